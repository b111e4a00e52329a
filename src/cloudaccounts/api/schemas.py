# src/cloudaccounts/api/schemas.py
"""
Pydantic response schemas for the API.
Keeps API-specific response shapes separate from internal domain models.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Health status of the API.")
    version: str = Field(..., description="Current application version.")


class VersionResponse(BaseModel):
    """Response schema for the version endpoint."""

    version: str = Field(..., description="Current application version.")


class ConfigResponse(BaseModel):
    """Non-sensitive configuration values."""

    credentials_api_url: str
    registered_providers: List[str]
    default_providers: Optional[List[str]] = None
    log_level: str
    api_host: str
    api_port: int


class AccountSummary(BaseModel):
    """An account as listed in the catalog."""

    name: str = Field(..., description="Account name.")
    type: str = Field(..., description="Provider type.")


class ZonesResponse(BaseModel):
    """Availability zones resolved for one account and region."""

    provider: str
    account: str
    region: str
    zones: List[str] = Field(default_factory=list, description="Usable zones, in preference order.")


class ProvidersResponse(BaseModel):
    """Providers resolved for an application context."""

    providers: List[str] = Field(default_factory=list, description="Provider types, in resolution order.")

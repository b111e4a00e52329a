# src/cloudaccounts/models/settings.py
"""
Pydantic models for operator-supplied provider settings and the optional
application context used when resolving providers.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# provider type -> account name -> region name -> ordered zone names
PreferredZoneTable = Dict[str, Dict[str, Dict[str, List[str]]]]

DEFAULT_ACCOUNT_KEY = "default"


class ProviderEntry(BaseModel):
    """Settings for one provider type."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    preferred_zones_by_account: Dict[str, Dict[str, List[str]]] = Field(
        default_factory=dict,
        alias="preferredZonesByAccount",
        description="account name -> region name -> preferred zones; 'default' is the fallback account",
    )


class ProviderSettings(BaseModel):
    """
    Pydantic model for the provider settings file.

    Attributes:
        default_providers: Providers enabled when an application declares none.
            A single string is accepted and normalized to a one-element list.
            None means no restriction.
        providers: Per-provider settings keyed by provider type
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    default_providers: Optional[List[str]] = Field(
        None, alias="defaultProviders", description="Default provider types"
    )
    providers: Dict[str, ProviderEntry] = Field(default_factory=dict, description="Per-provider settings")

    @field_validator("default_providers", mode="before")
    @classmethod
    def _normalize_default_providers(cls, value: Union[str, List[str], None]):
        if value is None:
            return None
        if isinstance(value, str):
            return [value] if value else None
        return value

    @property
    def preferred_zone_table(self) -> PreferredZoneTable:
        return {provider: entry.preferred_zones_by_account for provider, entry in self.providers.items()}


class ApplicationContext(BaseModel):
    """
    The part of an application consumed when resolving providers.

    Only `attributes["cloudProviders"]`, a comma-separated string, is read.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = Field(None, description="Application name")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Application attributes")

    @property
    def cloud_providers(self) -> Optional[List[str]]:
        raw = self.attributes.get("cloudProviders")
        if not raw or not isinstance(raw, str):
            return None
        return raw.split(",")

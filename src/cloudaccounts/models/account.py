# src/cloudaccounts/models/account.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Region(BaseModel):
    """
    Pydantic model for a region reported by the credentials service.

    Attributes:
        name: Region name (e.g., 'us-east-1', 'europe-west1')
        availability_zones: Zones the provider reports for the region, in server order
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., description="Region name")
    availability_zones: List[str] = Field(
        default_factory=list, alias="availabilityZones", description="Availability zones"
    )


class Account(BaseModel):
    """
    Pydantic model for a cloud account (credential) known to the credentials service.

    The catalog endpoint only returns summaries (type, usually name); the detail
    endpoint adds regions and any provider-specific attributes, which are kept
    as extra fields so they can be queried by name.

    Attributes:
        name: Account name, unique within a provider type
        type: Provider type identifier (e.g., 'aws', 'gce')
        regions: Regions the account can deploy to
        challenge_destructive_actions: Whether destructive operations must be confirmed
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    name: str = Field(default="", description="Account name")
    type: str = Field(..., description="Provider type")
    regions: List[Region] = Field(default_factory=list, description="Regions")
    challenge_destructive_actions: bool = Field(
        default=False,
        alias="challengeDestructiveActions",
        description="Require confirmation for destructive actions",
    )

    def get_region(self, region_name: str) -> Optional[Region]:
        for region in self.regions:
            if region.name == region_name:
                return region
        return None

    def get_attribute(self, attribute: str):
        """Return a declared or extra attribute by its wire name, or None."""
        if attribute in self.__class__.model_fields:
            return getattr(self, attribute)
        for field_name, field in self.__class__.model_fields.items():
            if field.alias == attribute:
                return getattr(self, field_name)
        return (self.model_extra or {}).get(attribute)

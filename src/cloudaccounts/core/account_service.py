# src/cloudaccounts/core/account_service.py
"""
The AccountService answers which accounts, providers and availability zones
a deployment may use. It combines the credentials service (remote), the
provider registry (local) and the operator provider settings.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from ..collectors.credentials_collector import CredentialsCollector
from ..models.account import Account, Region
from ..models.settings import DEFAULT_ACCOUNT_KEY, ApplicationContext, ProviderSettings
from .exceptions import FetchError
from .registry import CloudProviderRegistry
from .resolver import (
    distinct_provider_types,
    filter_by_type,
    intersect_ordered,
    requested_providers,
    resolve_preferred_zones,
    select_providers,
)

logger = logging.getLogger(__name__)


class AccountService:
    """
    Resolves accounts, availability zones and enabled providers.

    Each public coroutine issues its own requests and shares no state with
    concurrent calls. Catalog failures propagate as FetchError; a failed
    account detail fetch while resolving zones falls back to the provider's
    default preferred zones.
    """

    def __init__(
        self,
        collector: CredentialsCollector,
        registry: CloudProviderRegistry,
        settings: ProviderSettings,
    ):
        self.collector = collector
        self.registry = registry
        self.settings = settings

    async def list_accounts(self, provider: Optional[str] = None) -> List[Account]:
        """Returns the account catalog, narrowed to one provider type when given."""
        catalog = await self.collector.collect()
        if provider is None:
            return catalog
        return filter_by_type(catalog, provider)

    async def get_account_details(self, account_name: str) -> Account:
        return await self.collector.collect_account(account_name)

    async def get_all_account_details_for_provider(self, provider: str) -> List[Account]:
        """Detail records for every account of `provider`, in catalog order."""
        accounts = await self.list_accounts(provider)
        return list(await asyncio.gather(*(self.get_account_details(a.name) for a in accounts)))

    async def get_regions_for_account(self, account_name: str) -> List[Region]:
        details = await self.get_account_details(account_name)
        return list(details.regions)

    async def get_regions_keyed_by_account(self, provider: str) -> Dict[str, List[Region]]:
        details = await self.get_all_account_details_for_provider(provider)
        return {account.name: list(account.regions) for account in details}

    async def get_unique_attribute_for_all_accounts(self, provider: str, attribute: str) -> List[Any]:
        """
        Sorted distinct values of a detail attribute across all accounts of a provider.

        List-valued attributes are flattened; accounts without the attribute are skipped.
        """
        details = await self.get_all_account_details_for_provider(provider)
        values = set()
        for account in details:
            value = account.get_attribute(attribute)
            if value is None:
                continue
            if isinstance(value, (list, tuple, set)):
                values.update(v for v in value if v is not None)
            else:
                values.add(value)
        return sorted(values, key=str)

    async def challenge_destructive_actions(self, provider: str, account_name: str) -> bool:
        """Whether destructive actions against this account must be confirmed by the user."""
        if not account_name:
            return False
        try:
            details = await self.get_account_details(account_name)
        except FetchError as e:
            logger.warning("Could not fetch details for %s account '%s': %s", provider, account_name, e)
            return False
        return details.challenge_destructive_actions

    def get_preferred_zones_by_account(self, provider: str) -> Dict[str, Dict[str, List[str]]]:
        return self.settings.preferred_zone_table.get(provider, {})

    async def get_availability_zones(self, provider_type: str, account_name: str, region_name: str) -> List[str]:
        """
        Preferred zones of an account/region that the provider actually reports.

        The result keeps the preferred-zone order. If the account detail
        fetch fails the provider's default preferred zones for the region
        are returned unchanged.
        """
        table = self.settings.preferred_zone_table
        try:
            details = await self.get_account_details(account_name)
        except FetchError as e:
            logger.warning(
                "Falling back to default preferred zones for %s/%s/%s: %s",
                provider_type,
                account_name,
                region_name,
                e,
            )
            return resolve_preferred_zones(table, provider_type, DEFAULT_ACCOUNT_KEY, region_name)

        region = details.get_region(region_name)
        actual_zones = region.availability_zones if region else []
        preferred = resolve_preferred_zones(table, provider_type, account_name, region_name)
        return intersect_ordered(preferred, actual_zones)

    async def get_available_providers(self) -> List[str]:
        """Provider types present in the catalog that are registered, in catalog order."""
        catalog = await self.collector.collect()
        registered = set(self.registry.list_registered_providers())
        return [provider for provider in distinct_provider_types(catalog) if provider in registered]

    async def list_providers(self, application: Optional[ApplicationContext] = None) -> List[str]:
        """
        Providers enabled for an application.

        The application's declared providers take precedence over the
        configured defaults; with neither, every available provider is enabled.
        """
        available = await self.get_available_providers()
        requested = requested_providers(application, self.settings.default_providers)
        return select_providers(requested, available)

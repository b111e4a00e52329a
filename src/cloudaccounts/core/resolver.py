# src/cloudaccounts/core/resolver.py
"""
Pure resolution rules for accounts, zones and providers.

Nothing here performs I/O. Every function returns a new list and keeps the
ordering of the input that is authoritative for its result; lookups that
find nothing return an empty list instead of raising.
"""

from typing import Iterable, List, Optional, Sequence

from ..models.account import Account
from ..models.settings import DEFAULT_ACCOUNT_KEY, ApplicationContext, PreferredZoneTable


def filter_by_type(catalog: Iterable[Account], provider_type: str) -> List[Account]:
    """Accounts whose type equals `provider_type`, in catalog order."""
    if not provider_type:
        return []
    return [account for account in catalog if account.type == provider_type]


def resolve_preferred_zones(
    table: PreferredZoneTable,
    provider_type: str,
    account_name: str,
    region_name: str,
) -> List[str]:
    """
    Looks up the preferred zones for an account and region.

    An account with its own entry uses only that entry, so a region missing
    from it resolves to no zones. Accounts without an entry use the
    provider's 'default' entry.
    """
    by_account = table.get(provider_type) or {}
    if account_name in by_account:
        regions = by_account[account_name] or {}
    else:
        regions = by_account.get(DEFAULT_ACCOUNT_KEY) or {}
    return list(regions.get(region_name) or [])


def intersect_ordered(preferred: Sequence[str], actual: Iterable[str]) -> List[str]:
    """Elements of `preferred` that also appear in `actual`, in `preferred` order."""
    actual_set = set(actual)
    return [item for item in preferred if item in actual_set]


def distinct_provider_types(catalog: Iterable[Account]) -> List[str]:
    """Provider types of the catalog, deduplicated in first-occurrence order."""
    return list(dict.fromkeys(account.type for account in catalog))


def requested_providers(
    application: Optional[ApplicationContext],
    default_providers: Optional[Sequence[str]],
) -> Optional[List[str]]:
    """
    Providers asked for by the application, else the configured defaults.

    Returns None when neither is set, meaning no restriction.
    """
    if application is not None:
        declared = application.cloud_providers
        if declared:
            return declared
    if isinstance(default_providers, str):
        return [default_providers] if default_providers else None
    if default_providers is not None:
        return list(default_providers)
    return None


def select_providers(requested: Optional[Sequence[str]], available: Sequence[str]) -> List[str]:
    if requested is None:
        return list(available)
    return intersect_ordered(requested, available)

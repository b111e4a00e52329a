# src/cloudaccounts/api/routers/accounts.py
"""
API routes for accounts, their regions and usable availability zones.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cloudaccounts.api.dependencies import get_account_service
from cloudaccounts.api.schemas import AccountSummary, ZonesResponse
from cloudaccounts.core.account_service import AccountService
from cloudaccounts.core.exceptions import FetchError
from cloudaccounts.models.account import Region

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_http_error(e: FetchError) -> HTTPException:
    """Upstream 404s stay 404s; every other fetch failure is a bad gateway."""
    if e.status_code == 404:
        return HTTPException(status_code=404, detail=str(e))
    return HTTPException(status_code=502, detail=str(e))


@router.get("/accounts", response_model=List[AccountSummary])
async def list_accounts(
    provider: Optional[str] = Query(None, description="Only return accounts of this provider type."),
    service: AccountService = Depends(get_account_service),
):
    """Return the account catalog, optionally filtered by provider type."""
    try:
        accounts = await service.list_accounts(provider)
    except FetchError as e:
        logger.error("Failed to list accounts: %s", e)
        raise _to_http_error(e)
    return [AccountSummary(name=a.name, type=a.type) for a in accounts]


@router.get("/accounts/{account_name}")
async def get_account(
    account_name: str,
    service: AccountService = Depends(get_account_service),
) -> Dict[str, Any]:
    """Return the detail record of one account, including provider-specific attributes."""
    try:
        account = await service.get_account_details(account_name)
    except FetchError as e:
        raise _to_http_error(e)
    return account.model_dump(mode="json", by_alias=True)


@router.get("/accounts/{account_name}/regions", response_model=List[Region])
async def get_account_regions(
    account_name: str,
    service: AccountService = Depends(get_account_service),
):
    """Return the regions of one account."""
    try:
        return await service.get_regions_for_account(account_name)
    except FetchError as e:
        raise _to_http_error(e)


@router.get(
    "/providers/{provider}/accounts/{account_name}/regions/{region_name}/zones",
    response_model=ZonesResponse,
)
async def get_availability_zones(
    provider: str,
    account_name: str,
    region_name: str,
    service: AccountService = Depends(get_account_service),
):
    """Return the preferred zones the provider reports as available, in preference order."""
    zones = await service.get_availability_zones(provider, account_name, region_name)
    return ZonesResponse(provider=provider, account=account_name, region=region_name, zones=zones)

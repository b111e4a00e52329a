# src/cloudaccounts/api/routers/providers.py
"""
API routes for resolving enabled cloud providers.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cloudaccounts.api.dependencies import get_account_service
from cloudaccounts.api.schemas import ProvidersResponse
from cloudaccounts.core.account_service import AccountService
from cloudaccounts.core.exceptions import FetchError
from cloudaccounts.models.settings import ApplicationContext

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/providers", response_model=ProvidersResponse)
async def list_providers(
    cloud_providers: Optional[str] = Query(
        None,
        alias="cloudProviders",
        description="Comma-separated providers declared by the application.",
    ),
    service: AccountService = Depends(get_account_service),
):
    """Return the providers enabled for an application, or for the defaults when none is declared."""
    application = ApplicationContext(attributes={"cloudProviders": cloud_providers}) if cloud_providers else None
    try:
        providers = await service.list_providers(application)
    except FetchError as e:
        logger.error("Failed to list providers: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    return ProvidersResponse(providers=providers)


@router.get("/providers/available", response_model=ProvidersResponse)
async def list_available_providers(
    service: AccountService = Depends(get_account_service),
):
    """Return every registered provider that has at least one account."""
    try:
        providers = await service.get_available_providers()
    except FetchError as e:
        logger.error("Failed to list available providers: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    return ProvidersResponse(providers=providers)

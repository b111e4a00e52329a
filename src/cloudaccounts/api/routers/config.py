# src/cloudaccounts/api/routers/config.py
"""
API routes for exposing non-sensitive configuration and version information.
"""

import logging

from fastapi import APIRouter

from cloudaccounts import __version__
from cloudaccounts.api.schemas import ConfigResponse, HealthResponse, VersionResponse
from cloudaccounts.core.config import config
from cloudaccounts.core.factory import get_provider_settings
from cloudaccounts.core.registry import cloud_provider_registry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/version", response_model=VersionResponse)
async def version():
    """Return the current application version."""
    return VersionResponse(version=__version__)


@router.get("/config", response_model=ConfigResponse)
async def get_config():
    """Return non-sensitive configuration values.

    The credentials API token is never exposed.
    """
    return ConfigResponse(
        credentials_api_url=config.CREDENTIALS_API_URL,
        registered_providers=cloud_provider_registry.list_registered_providers(),
        default_providers=get_provider_settings().default_providers,
        log_level=config.LOG_LEVEL,
        api_host=config.API_HOST,
        api_port=config.API_PORT,
    )

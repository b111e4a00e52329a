# src/cloudaccounts/core/factory.py
"""
Factory functions to instantiate the AccountService and its collaborators
from the application configuration.
"""

import logging
from functools import lru_cache

from ..collectors.credentials_collector import CredentialsCollector
from ..data.provider_settings import load_provider_settings
from ..models.settings import ProviderSettings
from .account_service import AccountService
from .config import config
from .registry import cloud_provider_registry

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_provider_settings() -> ProviderSettings:
    """
    Loads the provider settings once per process.
    DEFAULT_PROVIDERS, when set, overrides the file's defaultProviders.
    """
    return load_provider_settings(config.PROVIDER_SETTINGS_PATH, default_providers=config.DEFAULT_PROVIDERS)


@lru_cache(maxsize=1)
def get_account_service() -> AccountService:
    """
    Factory function to get the AccountService.
    Uses lru_cache to act as a singleton.
    """
    logger.info("Using credentials service at %s", config.CREDENTIALS_API_URL)
    return AccountService(
        collector=CredentialsCollector(),
        registry=cloud_provider_registry,
        settings=get_provider_settings(),
    )

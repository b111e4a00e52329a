# src/cloudaccounts/core/registry.py
"""
Registry of the provider types this deployment has support for.

Accounts of an unregistered provider type are still listed by the
credentials service, but are never offered as an available provider.
"""

import logging
from typing import Any, Dict, List, Optional

from .config import config

logger = logging.getLogger(__name__)


class CloudProviderRegistry:
    """Keeps registered provider types and their (optional) configuration in insertion order."""

    def __init__(self, providers: Optional[List[str]] = None):
        self._providers: Dict[str, Dict[str, Any]] = {}
        for key in providers or []:
            self.register_provider(key)

    def register_provider(self, key: str, provider_config: Optional[Dict[str, Any]] = None) -> None:
        if not key:
            raise ValueError("Provider key must be a non-empty string.")
        if key in self._providers:
            logger.debug("Provider '%s' is already registered; replacing its configuration.", key)
        self._providers[key] = dict(provider_config or {})

    def has_provider(self, key: str) -> bool:
        return key in self._providers

    def get_provider(self, key: str) -> Optional[Dict[str, Any]]:
        return self._providers.get(key)

    def list_registered_providers(self) -> List[str]:
        return list(self._providers.keys())


cloud_provider_registry = CloudProviderRegistry(config.REGISTERED_PROVIDERS)

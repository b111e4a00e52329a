# src/cloudaccounts/api/dependencies.py
"""
FastAPI dependency injection functions.

Route handlers receive the AccountService through Depends() so tests can
override it with a fake.
"""

import logging

from cloudaccounts.core.account_service import AccountService

logger = logging.getLogger(__name__)


async def get_account_service() -> AccountService:
    """Provides the AccountService instance via the factory."""
    from cloudaccounts.core.factory import get_account_service as factory_get_account_service

    return factory_get_account_service()

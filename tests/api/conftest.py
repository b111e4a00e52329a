# tests/api/conftest.py
"""
Shared fixtures for API tests.
Uses FastAPI's TestClient with dependency overrides to inject a mock AccountService.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from cloudaccounts.api.app import create_app
from cloudaccounts.api.dependencies import get_account_service
from cloudaccounts.models.account import Account


@pytest.fixture
def mock_service():
    """Returns a mock AccountService."""
    service = MagicMock()
    service.list_accounts = AsyncMock(return_value=[])
    service.get_account_details = AsyncMock()
    service.get_regions_for_account = AsyncMock(return_value=[])
    service.get_availability_zones = AsyncMock(return_value=[])
    service.list_providers = AsyncMock(return_value=[])
    service.get_available_providers = AsyncMock(return_value=[])
    return service


@pytest.fixture
def client(mock_service):
    """Creates a TestClient with the AccountService dependency overridden."""
    app = create_app()
    app.dependency_overrides[get_account_service] = lambda: mock_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sample_accounts():
    return [Account(name="test", type="aws"), Account(name="prod", type="aws")]


@pytest.fixture
def sample_details():
    return Account.model_validate(
        {
            "name": "prod",
            "type": "aws",
            "accountId": "123456789012",
            "challengeDestructiveActions": True,
            "regions": [{"name": "us-east-1", "availabilityZones": ["us-east-1a", "us-east-1b"]}],
        }
    )

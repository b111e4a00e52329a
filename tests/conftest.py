# tests/conftest.py

import pytest

from cloudaccounts.models.account import Account

CREDENTIALS_URL = "http://credentials.test"


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so the
    configuration is predictable and isolated from the actual environment.
    """
    from cloudaccounts.core.config import config

    # Class-level values are bound at import time, so patch the instance too.
    monkeypatch.setenv("CREDENTIALS_API_URL", CREDENTIALS_URL)
    monkeypatch.setattr(config, "CREDENTIALS_API_URL", CREDENTIALS_URL)
    monkeypatch.setattr(config, "CREDENTIALS_API_TOKEN", None)
    monkeypatch.setattr(config, "PROVIDER_SETTINGS_PATH", None)
    monkeypatch.delenv("DEFAULT_PROVIDERS", raising=False)


@pytest.fixture(autouse=True)
def clear_factory_caches():
    """Each test gets a fresh AccountService and settings from the factory."""
    from cloudaccounts.core.factory import get_account_service, get_provider_settings

    get_account_service.cache_clear()
    get_provider_settings.cache_clear()
    yield
    get_account_service.cache_clear()
    get_provider_settings.cache_clear()


@pytest.fixture
def sample_catalog():
    return [
        Account(name="test", type="aws"),
        Account(name="prod", type="aws"),
        Account(name="prod", type="gce"),
        Account(name="gce-test", type="gce"),
    ]

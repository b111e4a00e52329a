# tests/core/test_config.py
"""
Tests for the Config class: secret loading and validation.
"""

import os
from unittest.mock import patch

import pytest

from cloudaccounts.core.config import Config


class TestGetSecret:
    """Tests for the Config._get_secret method."""

    def test_get_secret_from_env_var(self):
        """Falls back to the environment variable when no secret file exists."""
        with patch("cloudaccounts.core.config.os.path.exists", return_value=False):
            with patch.dict(os.environ, {"CREDENTIALS_API_TOKEN": "env_token"}):
                assert Config._get_secret("CREDENTIALS_API_TOKEN") == "env_token"

    def test_get_secret_with_default(self):
        with patch("cloudaccounts.core.config.os.path.exists", return_value=False):
            with patch.dict(os.environ, {}, clear=True):
                assert Config._get_secret("NONEXISTENT_SECRET", default="default_value") == "default_value"

    def test_get_secret_file_takes_precedence_and_is_stripped(self):
        with patch.dict(os.environ, {"CREDENTIALS_API_TOKEN": "env_token"}):
            with patch("cloudaccounts.core.config.os.path.exists", return_value=True):
                with patch("builtins.open", create=True) as mock_open:
                    mock_open.return_value.__enter__.return_value.read.return_value = "  file_token \n"
                    assert Config._get_secret("CREDENTIALS_API_TOKEN") == "file_token"

    def test_get_secret_permission_error(self):
        with patch("cloudaccounts.core.config.os.path.exists", return_value=True):
            with patch("builtins.open", side_effect=PermissionError("Permission denied")):
                with pytest.raises(PermissionError) as exc_info:
                    Config._get_secret("CREDENTIALS_API_TOKEN")

        assert "exists but cannot be read due to permission denied" in str(exc_info.value)

    def test_get_secret_io_error(self):
        with patch("cloudaccounts.core.config.os.path.exists", return_value=True):
            with patch("builtins.open", side_effect=IOError("Disk read error")):
                with pytest.raises(IOError) as exc_info:
                    Config._get_secret("CREDENTIALS_API_TOKEN")

        assert "Please check the file integrity" in str(exc_info.value)


class TestValidateInstance:
    def test_defaults_are_valid(self):
        Config().validate_instance()

    def test_rejects_url_without_scheme(self, monkeypatch):
        cfg = Config()
        monkeypatch.setattr(cfg, "CREDENTIALS_API_URL", "credentials.local:8084")
        with pytest.raises(ValueError, match="CREDENTIALS_API_URL"):
            cfg.validate_instance()

    def test_rejects_non_positive_timeouts(self, monkeypatch):
        cfg = Config()
        monkeypatch.setattr(cfg, "DEFAULT_TIMEOUT_READ", 0)
        with pytest.raises(ValueError, match="must be positive"):
            cfg.validate_instance()

    def test_rejects_unknown_log_level(self, monkeypatch):
        cfg = Config()
        monkeypatch.setattr(cfg, "LOG_LEVEL", "CHATTY")
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            cfg.validate_instance()


class TestDefaultProviders:
    def test_unset_means_no_restriction(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_PROVIDERS", raising=False)
        assert Config().DEFAULT_PROVIDERS is None

    def test_comma_separated_value_is_split(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PROVIDERS", "gce, cf")
        assert Config().DEFAULT_PROVIDERS == ["gce", "cf"]

    def test_blank_value_means_no_restriction(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PROVIDERS", " ")
        assert Config().DEFAULT_PROVIDERS is None

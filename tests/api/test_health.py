# tests/api/test_health.py
"""Tests for the health, version and config endpoints."""

import json

from cloudaccounts import __version__


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health_returns_status_ok(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}


def test_version(client):
    response = client.get("/api/v1/version")
    assert response.json()["version"] == __version__


def test_config_does_not_expose_token(client, monkeypatch):
    from cloudaccounts.core.config import config

    monkeypatch.setattr(config, "CREDENTIALS_API_TOKEN", "s3cret")

    response = client.get("/api/v1/config")

    assert response.status_code == 200
    data = response.json()
    assert data["credentials_api_url"] == "http://credentials.test"
    assert "s3cret" not in response.text


def test_config_reports_default_providers_from_settings_file(client, monkeypatch, tmp_path):
    from cloudaccounts.core.config import config

    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"defaultProviders": ["gce", "cf"]}))
    monkeypatch.setattr(config, "PROVIDER_SETTINGS_PATH", str(path))

    response = client.get("/api/v1/config")

    assert response.json()["default_providers"] == ["gce", "cf"]

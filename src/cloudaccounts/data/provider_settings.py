# src/cloudaccounts/data/provider_settings.py

"""
Loads operator provider settings (default providers and preferred zones per
account) from a JSON file, validated with the ProviderSettings model.

Expected layout:

    {
      "defaultProviders": ["aws", "gce"],
      "providers": {
        "aws": {
          "preferredZonesByAccount": {
            "prod": {"us-east-1": ["us-east-1c", "us-east-1d"]},
            "default": {"us-east-1": ["us-east-1a", "us-east-1b"]}
          }
        }
      }
    }
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from cloudaccounts.core.exceptions import SettingsError
from cloudaccounts.models.settings import ProviderSettings

logger = logging.getLogger(__name__)


def load_provider_settings(path: Optional[str] = None, default_providers: Optional[list] = None) -> ProviderSettings:
    """
    Load provider settings from `path`.

    A missing or unreadable file yields empty settings. A file that parses but
    does not match the expected structure raises SettingsError.
    When `default_providers` is given it overrides the file's value.
    """
    raw = {}
    if path:
        settings_file = Path(path)
        try:
            with open(settings_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
            logger.info(f"Loaded provider settings from {settings_file}")
        except FileNotFoundError:
            logger.warning(f"Provider settings file not found: {settings_file}. Using empty settings.")
        except json.JSONDecodeError as e:
            raise SettingsError(f"Provider settings file '{settings_file}' is not valid JSON: {e}") from e
        except OSError as e:
            logger.warning(f"Provider settings file '{settings_file}' cannot be read: {e}. Using empty settings.")

    if not isinstance(raw, dict):
        raise SettingsError("Provider settings must be a JSON object.")

    if default_providers is not None:
        raw = {**raw, "defaultProviders": default_providers}

    try:
        return ProviderSettings.model_validate(raw)
    except ValidationError as e:
        raise SettingsError(f"Invalid provider settings: {e}") from e

# src/cloudaccounts/core/config.py

import logging
import os

from dotenv import load_dotenv

from cloudaccounts import __version__

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _as_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "t", "y", "yes")


def _as_list(value: str) -> list:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    def __init__(self):
        # --- Credentials service secrets ---
        self.CREDENTIALS_API_TOKEN = self._get_secret("CREDENTIALS_API_TOKEN")

    @staticmethod
    def _get_secret(key: str, default: str = None) -> str:
        """
        Retrieves a secret from a file (Docker secret/volume) or falls back to environment variable.

        Raises:
            PermissionError: If the secret file exists but cannot be read due to permissions.
            IOError: If the secret file exists but cannot be read due to I/O errors.
        """
        secret_file = f"/etc/cloudaccounts/secrets/{key}"
        if os.path.exists(secret_file):
            try:
                with open(secret_file, "r") as f:
                    value = f.read().strip()
                    logging.getLogger(__name__).debug(f"Loaded secret '{key}' from {secret_file}")
                    return value
            except PermissionError as e:
                raise PermissionError(
                    f"Secret file '{secret_file}' exists but cannot be read due to permission denied. "
                    f"Please check file permissions or run with appropriate privileges."
                ) from e
            except (IOError, OSError) as e:
                raise IOError(
                    f"Secret file '{secret_file}' exists but cannot be read: {e}. "
                    f"Please check the file integrity and system resources."
                ) from e
        return os.getenv(key, default)

    # --- Credentials service variables ---
    CREDENTIALS_API_URL = os.getenv("CREDENTIALS_API_URL", "http://localhost:8084")
    CREDENTIALS_VERIFY_CERTS = _as_bool(os.getenv("CREDENTIALS_VERIFY_CERTS", "True"))

    # --- HTTP client variables ---
    DEFAULT_TIMEOUT_CONNECT = float(os.getenv("DEFAULT_TIMEOUT_CONNECT", "5"))
    DEFAULT_TIMEOUT_READ = float(os.getenv("DEFAULT_TIMEOUT_READ", "30"))
    USER_AGENT = os.getenv("USER_AGENT", f"cloudaccounts/{__version__}")

    # --- Provider variables ---
    PROVIDER_SETTINGS_PATH = os.getenv("PROVIDER_SETTINGS_PATH")
    REGISTERED_PROVIDERS = _as_list(
        os.getenv("REGISTERED_PROVIDERS", "aws,gce,azure,kubernetes,cf,openstack,titus")
    )

    # DEFAULT_PROVIDERS is resolved at access time so tests and long-running
    # processes see the current environment rather than the import-time value.
    @property
    def DEFAULT_PROVIDERS(self) -> list | None:
        raw = os.getenv("DEFAULT_PROVIDERS")
        if raw is None:
            return None
        return _as_list(raw) or None

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- API variables ---
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))

    def validate_instance(self):
        if not self.CREDENTIALS_API_URL.startswith(("http://", "https://")):
            raise ValueError("CREDENTIALS_API_URL must start with 'http://' or 'https://'.")
        if self.DEFAULT_TIMEOUT_CONNECT <= 0 or self.DEFAULT_TIMEOUT_READ <= 0:
            raise ValueError("DEFAULT_TIMEOUT_CONNECT and DEFAULT_TIMEOUT_READ must be positive.")
        if self.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}.")
        if not self.REGISTERED_PROVIDERS:
            logging.warning("REGISTERED_PROVIDERS is empty; no provider will be listed as available.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()

class CloudAccountsError(Exception):
    """Base exception for cloudaccounts."""

    pass


class FetchError(CloudAccountsError):
    """Raised when the credentials service cannot be reached or answers with a non-success status."""

    def __init__(self, message: str, url: str = None, status_code: int = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class SettingsError(CloudAccountsError):
    """Raised when the provider settings file is structurally invalid."""

    pass

"""Custom exceptions for slugcast."""


class SlugcastError(Exception):
    """Base exception for all slugcast errors."""

    pass


class ConfigError(SlugcastError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class EncryptionError(ConfigError):
    """Encryption/decryption errors."""

    pass


class CredentialsMissingError(ConfigError):
    """One or more Cloudflare credentials were not supplied."""

    pass


class InvalidCredentialsError(ConfigError):
    """A supplied credential cannot be used in a request."""

    pass


class ProviderError(SlugcastError):
    """Error from a model provider (API error, rate limit, bad response)."""

    def __init__(self, message: str, provider: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class StoreError(SlugcastError):
    """The podcast database could not be reached or rejected the query."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StoreResponseError(StoreError):
    """The database answered, but without a usable result set."""

    pass


def classify_http_error(status_code: int, error_message: str = "") -> str:
    """Describe an HTTP failure in terms a user can act on.

    Args:
        status_code: HTTP status code
        error_message: Error message from API

    Returns:
        Human readable description of the failure
    """
    if status_code == 429:
        return f"Rate limit exceeded: {error_message}"

    if 500 <= status_code < 600:
        return f"Server error (HTTP {status_code}): {error_message}"

    if status_code == 408:
        return f"Request timeout: {error_message}"

    if status_code in (401, 403):
        return f"Authentication failed (HTTP {status_code}): {error_message}"

    if 400 <= status_code < 500:
        return f"Invalid request (HTTP {status_code}): {error_message}"

    return f"HTTP error {status_code}: {error_message}"

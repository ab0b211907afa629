"""Utility functions and helpers for slugcast."""

from slugcast.utils.errors import (
    ConfigError,
    CredentialsMissingError,
    EncryptionError,
    InvalidConfigError,
    InvalidCredentialsError,
    ProviderError,
    SlugcastError,
    StoreError,
    StoreResponseError,
    classify_http_error,
)
from slugcast.utils.paths import (
    get_config_dir,
    get_config_file,
    get_credentials_file,
    get_key_file,
)

__all__ = [
    # Errors
    "SlugcastError",
    "ConfigError",
    "InvalidConfigError",
    "EncryptionError",
    "CredentialsMissingError",
    "InvalidCredentialsError",
    "ProviderError",
    "StoreError",
    "StoreResponseError",
    "classify_http_error",
    # Paths
    "get_config_dir",
    "get_config_file",
    "get_credentials_file",
    "get_key_file",
]

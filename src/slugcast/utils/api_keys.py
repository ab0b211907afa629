"""API key validation utilities.

Catches the usual configuration mistakes (quoted values, pasted newlines,
truncated keys) before a client is built with them.
"""

import os
import re
from typing import Literal

Provider = Literal["claude", "cloudflare"]


class APIKeyError(ValueError):
    """Raised when API key is invalid or missing."""

    pass


def validate_api_key(
    key: str | None,
    provider: Provider,
    key_name: str,
) -> str:
    """Validate API key format and return cleaned key.

    Args:
        key: The API key to validate (may be None)
        provider: The API provider name
        key_name: Environment variable name (for error messages)

    Returns:
        Validated and stripped API key

    Raises:
        APIKeyError: If key is missing, empty, or malformed

    Example:
        >>> key = validate_api_key(
        ...     os.environ.get("ANTHROPIC_API_KEY"),
        ...     "claude",
        ...     "ANTHROPIC_API_KEY"
        ... )
    """
    if key is None or not key.strip():
        raise APIKeyError(
            f"{provider.title()} API key is required.\n"
            f"Set the {key_name} environment variable.\n"
            f"Example: export {key_name}='your-api-key-here'"
        )

    # Quotes and control characters are checked before stripping
    stripped = key.strip()
    if (stripped.startswith('"') and stripped.endswith('"')) or (
        stripped.startswith("'") and stripped.endswith("'")
    ):
        raise APIKeyError(
            f"{provider.title()} API key should not be quoted.\n"
            f"Remove quotes from {key_name} environment variable.\n"
            f"Example: export {key_name}=your-api-key-here"
        )

    if any(char in key for char in ["\n", "\r", "\0", "\t"]):
        raise APIKeyError(
            f"{provider.title()} API key contains invalid characters.\n"
            f"API keys should not contain newlines or control characters.\n"
            f"Check your {key_name} environment variable."
        )

    key = stripped

    if len(key) < 20:
        raise APIKeyError(
            f"{provider.title()} API key appears invalid (too short).\n"
            f"Expected at least 20 characters, got {len(key)}.\n"
            f"Check your {key_name} environment variable."
        )

    if provider == "claude":
        if not re.match(r"^sk-ant-[A-Za-z0-9_-]+$", key):
            raise APIKeyError(
                f"Claude API key format appears invalid.\n"
                f"Claude keys typically start with 'sk-ant-' and contain only "
                f"alphanumeric characters, underscores, and dashes.\n"
                f"Check your {key_name} environment variable."
            )

    elif provider == "cloudflare":
        if not re.match(r"^[A-Za-z0-9_-]+$", key):
            raise APIKeyError(
                f"Cloudflare API token format appears invalid.\n"
                f"Tokens contain only alphanumeric characters, underscores, and dashes.\n"
                f"Check your {key_name} environment variable."
            )

    return key


def get_validated_api_key(env_var: str, provider: Provider) -> str:
    """Get and validate API key from environment.

    Raises:
        APIKeyError: If key is missing or invalid
    """
    key = os.environ.get(env_var)
    return validate_api_key(key, provider, env_var)

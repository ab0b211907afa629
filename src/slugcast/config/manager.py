"""Configuration manager for loading and saving slugcast config."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import SecretStr, ValidationError

from slugcast.config.crypto import SecretCipher
from slugcast.config.defaults import (
    DEFAULT_GLOBAL_CONFIG,
    get_default_config_content,
    get_default_credentials_content,
)
from slugcast.config.schema import CloudflareCredentials, GlobalConfig
from slugcast.utils.errors import InvalidConfigError
from slugcast.utils.paths import (
    get_config_dir,
    get_config_file,
    get_credentials_file,
    get_key_file,
)

logger = logging.getLogger(__name__)

# Environment variables consulted for credentials, by credential field
CREDENTIAL_ENV_VARS = {
    "account_id": "CLOUDFLARE_ACCOUNT_ID",
    "database_id": "CLOUDFLARE_DATABASE_ID",
    "api_token": "CLOUDFLARE_API_TOKEN",
}


class ConfigManager:
    """Manages slugcast configuration and stored credentials."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to the
                platform user config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
            self.credentials_file = get_credentials_file()
            self.key_file = get_key_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"
            self.credentials_file = config_dir / "credentials.yaml"
            self.key_file = config_dir / ".keyfile"

        self.cipher = SecretCipher(self.key_file)

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            return DEFAULT_GLOBAL_CONFIG.model_copy(deep=True)

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return GlobalConfig(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration."""
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def set_value(self, key: str, value: str) -> GlobalConfig:
        """Set a configuration value by dotted key, e.g. ``slug.use_llm``.

        The raw string is coerced by the schema, so "false" becomes a bool
        and "45" a number.

        Raises:
            InvalidConfigError: If the key is unknown or the value invalid
        """
        config = self.load_config()
        data = config.model_dump(mode="json")

        parts = key.split(".")
        target: Any = data
        for part in parts[:-1]:
            if not isinstance(target.get(part), dict):
                raise InvalidConfigError(f"Unknown config key: {key}")
            target = target[part]

        if parts[-1] not in target or isinstance(target[parts[-1]], dict):
            raise InvalidConfigError(f"Unknown config key: {key}")
        target[parts[-1]] = value

        try:
            updated = GlobalConfig.model_validate(data)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for {key}: {e}") from e

        self.save_config(updated)
        return updated

    def load_credentials(self) -> CloudflareCredentials:
        """Load stored credentials, decrypting them.

        Raises:
            InvalidConfigError: If the credentials file is unreadable
            EncryptionError: If a value cannot be decrypted
        """
        if not self.credentials_file.exists():
            return CloudflareCredentials()

        try:
            with open(self.credentials_file) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfigError(
                f"Invalid credentials file {self.credentials_file}: {e}"
            ) from e

        return CloudflareCredentials(
            **{field: self.cipher.decrypt(data.get(field)) for field in CREDENTIAL_ENV_VARS}
        )

    def save_credentials(self, credentials: CloudflareCredentials) -> None:
        """Store credentials encrypted. Unset fields keep their stored value."""
        merged = credentials.merged_over(self.load_credentials())
        data = {
            field: self.cipher.encrypt(getattr(merged, field)) for field in CREDENTIAL_ENV_VARS
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.credentials_file, "w") as f:
            f.write(get_default_credentials_content())
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        self.credentials_file.chmod(0o600)

    def clear_credentials(self) -> bool:
        """Delete stored credentials. Returns False if there were none."""
        if not self.credentials_file.exists():
            return False
        self.credentials_file.unlink()
        return True

    def resolve_credentials(
        self, overrides: CloudflareCredentials | None = None
    ) -> CloudflareCredentials:
        """Combine credentials from explicit values, environment and file.

        Explicit values win over environment variables, which win over the
        encrypted credentials file.
        """
        from_env = CloudflareCredentials(
            **{
                field: SecretStr(os.environ[env_var])
                for field, env_var in CREDENTIAL_ENV_VARS.items()
                if os.environ.get(env_var)
            }
        )

        resolved = (overrides or CloudflareCredentials()).merged_over(from_env)
        if not resolved.is_complete:
            resolved = resolved.merged_over(self.load_credentials())

        logger.debug(f"Cloudflare credentials complete: {resolved.is_complete}")
        return resolved

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())

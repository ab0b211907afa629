"""Filesystem locations used by slugcast."""

import os
from pathlib import Path

import platformdirs

APP_NAME = "slugcast"

# Overrides the platform config directory when set
CONFIG_DIR_ENV_VAR = "SLUGCAST_CONFIG_DIR"


def get_config_dir() -> Path:
    """Return the per-user configuration directory."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_config_file() -> Path:
    return get_config_dir() / "config.yaml"


def get_credentials_file() -> Path:
    return get_config_dir() / "credentials.yaml"


def get_key_file() -> Path:
    return get_config_dir() / ".keyfile"

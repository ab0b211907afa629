"""Configuration loading, credential storage and logging setup."""

from slugcast.config.manager import ConfigManager
from slugcast.config.schema import CloudflareCredentials, GlobalConfig

__all__ = [
    "CloudflareCredentials",
    "ConfigManager",
    "GlobalConfig",
]

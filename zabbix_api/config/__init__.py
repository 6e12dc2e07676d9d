"""Configuration loading and validation."""

from zabbix_api.config.loader import ENV_OVERRIDES, load_config
from zabbix_api.config.schema import ClientConfig

__all__ = [
    "ClientConfig",
    "ENV_OVERRIDES",
    "load_config",
]

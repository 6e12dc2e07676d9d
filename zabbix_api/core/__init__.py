"""Core errors, constants and helpers."""

from zabbix_api.core.errors import (
    ApplicationError,
    AuthCacheError,
    ConfigError,
    DecodeError,
    TransportError,
    ZabbixApiError,
)

__all__ = [
    "ZabbixApiError",
    "ConfigError",
    "TransportError",
    "DecodeError",
    "ApplicationError",
    "AuthCacheError",
]

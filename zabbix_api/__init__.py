"""Client SDK for the Zabbix JSON-RPC API.

Example usage:
    from zabbix_api import ZabbixApi

    api = ZabbixApi("https://zabbix.example.com/api_jsonrpc.php",
                    user="Admin", password="zabbix")
    hosts = api.host_get({"output": ["host"]}, result_key="hostid")
    api.host_delete(list(hosts))
"""

from zabbix_api.client import Session, ZabbixApi
from zabbix_api.core.errors import (
    ApplicationError,
    AuthCacheError,
    ConfigError,
    DecodeError,
    TransportError,
    ZabbixApiError,
)
from zabbix_api.rpc.transport import HttpxTransport, Transport, TransportResponse

__version__ = "1.0.0"

__all__ = [
    "ZabbixApi",
    "Session",
    # Transport
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    # Errors
    "ZabbixApiError",
    "ConfigError",
    "TransportError",
    "DecodeError",
    "ApplicationError",
    "AuthCacheError",
]

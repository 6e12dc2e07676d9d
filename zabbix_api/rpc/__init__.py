"""JSON-RPC 2.0 plumbing for the Zabbix API.

This package holds everything between a ZabbixApi method call and the wire:
envelope types, parameter normalization, response decoding, the HTTP
transport and the on-disk token cache.
"""

from zabbix_api.rpc.auth import TokenCache, get_os_user_id, token_file_name
from zabbix_api.rpc.protocol import (
    APPLICATION_ERROR,
    RequestIdGenerator,
    build_request,
    check_response,
    decode_body,
    normalize_params,
    parse_response,
    rekey_result,
    request_to_dict,
)
from zabbix_api.rpc.transport import HttpxTransport, Transport, TransportResponse
from zabbix_api.rpc.types import NO_AUTH, Request, Response

__all__ = [
    # Types
    "Request",
    "Response",
    "NO_AUTH",
    # Protocol functions
    "normalize_params",
    "build_request",
    "request_to_dict",
    "decode_body",
    "parse_response",
    "check_response",
    "rekey_result",
    "RequestIdGenerator",
    # Error codes
    "APPLICATION_ERROR",
    # Transport
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    # Token cache
    "TokenCache",
    "get_os_user_id",
    "token_file_name",
]

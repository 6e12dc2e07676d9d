"""Static description of the remote Zabbix API surface."""

from zabbix_api.api.constants import ApiConstants
from zabbix_api.api.methods import (
    ANONYMOUS_METHODS,
    API_METHODS,
    METHOD_TABLE,
    iter_method_names,
    python_method_name,
    requires_auth,
)

__all__ = [
    "ANONYMOUS_METHODS",
    "API_METHODS",
    "ApiConstants",
    "METHOD_TABLE",
    "iter_method_names",
    "python_method_name",
    "requires_auth",
]

"""CLI commands for the zabbix-api tool.

Each command takes the resolved ClientConfig, prints to the console and
returns an exit code:
    zabbix-api version              # apiinfo.version, anonymous
    zabbix-api call METHOD          # any method, JSON params
    zabbix-api login                # authenticate (token cache aware)
    zabbix-api logout               # user.logout
    zabbix-api methods [RESOURCE]   # list generated methods
"""

import json
from typing import Any

from zabbix_api.api.methods import API_METHODS, PROBE_METHOD, PROBE_PARAMS, iter_method_names
from zabbix_api.cli.output import print_error, print_info, print_methods, print_result
from zabbix_api.client import ZabbixApi
from zabbix_api.config.schema import ClientConfig

# Cleared to build a client that must not log in
_NO_CREDENTIALS = {"user": "", "password": "", "auth_token": ""}


def build_client(config: ClientConfig, authenticate: bool = True) -> ZabbixApi:
    """Create a client, logging in only when ``authenticate`` is set."""
    if not authenticate:
        config = config.model_copy(update=_NO_CREDENTIALS)
    return ZabbixApi.from_config(config)


def _require_url(config: ClientConfig) -> bool:
    if not config.api_url:
        print_error("No API URL configured (use --url, ZABBIX_API_URL or a config file)")
        return False
    return True


def _require_credentials(config: ClientConfig) -> bool:
    if not config.auth_token and not (config.user and config.password):
        print_error("No credentials configured (use --user/--password or --token)")
        return False
    return True


def cmd_version(config: ClientConfig) -> int:
    """Print the API version."""
    if not _require_url(config):
        return 1
    with build_client(config, authenticate=False) as api:
        print_result(api.apiinfo_version())
    return 0


def cmd_call(
    config: ClientConfig,
    method: str,
    params_json: str | None = None,
    result_key: str | None = None,
    auth: bool = True,
) -> int:
    """Call ``method`` and print its result."""
    params: Any = None
    if params_json is not None:
        try:
            params = json.loads(params_json)
        except json.JSONDecodeError as e:
            print_error(f"--params is not valid JSON: {e}")
            return 2

    if not _require_url(config):
        return 1
    if auth and not _require_credentials(config):
        return 1

    with build_client(config, authenticate=auth) as api:
        print_result(api.call(method, params, result_key, auth))
    return 0


def cmd_login(config: ClientConfig) -> int:
    """Authenticate and report the outcome."""
    if not _require_url(config) or not _require_credentials(config):
        return 1
    with build_client(config) as api:
        if config.auth_token:
            # A configured token is never checked by construction
            api.call(PROBE_METHOD, PROBE_PARAMS)
        authenticated = api.session.authenticated
    if not authenticated:
        print_error("Login returned an empty token")
        return 1
    print_info(f"Authenticated against {config.api_url}")
    return 0


def cmd_logout(config: ClientConfig) -> int:
    """Log out the configured session."""
    if not _require_url(config) or not _require_credentials(config):
        return 1
    with build_client(config) as api:
        print_result(api.logout())
    return 0


def cmd_methods(resource: str | None = None) -> int:
    """List generated API methods, optionally for one resource."""
    if resource is not None and resource not in API_METHODS:
        print_error(f"Unknown resource: {resource}")
        return 1
    methods = [
        name for name in iter_method_names()
        if resource is None or name.startswith(f"{resource}.")
    ]
    print_methods(methods)
    return 0

"""Core constants and paths for the Zabbix API client.

Single source of truth for names and paths. Modules import from here
instead of hardcoding things like the token file prefix.
"""

import tempfile
from pathlib import Path

SDK_NAME = "zabbixapi"

JSONRPC_VERSION = "2.0"
JSONRPC_CONTENT_TYPE = "application/json-rpc"

# Cached token files are named {cache_dir}/.zabbixapi-token-{md5}
TOKEN_FILE_PREFIX = f".{SDK_NAME}-token-"

# posix uid substitute on platforms without one
UNKNOWN_UID = -1

CONFIG_DIR_NAME = ".zabbix-api"
CONFIG_FILE_NAME = "config.json"


def get_default_cache_dir() -> Path:
    """Get the default token cache directory (the system temp dir)."""
    return Path(tempfile.gettempdir())


def get_config_dir() -> Path:
    """Get ~/.zabbix-api (global config directory)."""
    return Path.home() / CONFIG_DIR_NAME

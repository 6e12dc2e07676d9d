"""Configuration loading with layered merging and environment overrides.

Layers, later ones winning:
1. Global user config (~/.zabbix-api/config.json)
2. Project local config ({cwd}/.zabbix-api/config.json)
3. ZABBIX_API_* environment variables

An explicit path replaces layers 1 and 2; the environment still applies.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from zabbix_api.config.load_utils import load_json_file, load_json_file_optional
from zabbix_api.config.schema import ClientConfig
from zabbix_api.core.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME, get_config_dir
from zabbix_api.core.errors import ConfigError
from zabbix_api.core.utils import deep_merge

logger = logging.getLogger(__name__)

# Environment variable -> ClientConfig field
ENV_OVERRIDES: dict[str, str] = {
    "ZABBIX_API_URL": "api_url",
    "ZABBIX_API_USER": "user",
    "ZABBIX_API_PASSWORD": "password",
    "ZABBIX_API_TOKEN": "auth_token",
    "ZABBIX_API_HTTP_USER": "http_user",
    "ZABBIX_API_HTTP_PASSWORD": "http_password",
}


def load_config(
    path: Path | None = None,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Load configuration from files and the environment.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for the local layer. Defaults to Path.cwd().
        environ: Environment to read overrides from. Defaults to os.environ.

    Returns:
        Validated ClientConfig.

    Raises:
        ConfigError: If a config file contains invalid JSON or the merged
            config fails validation.
    """
    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []

    if path is not None:
        merged = load_json_file(path)
        loaded_from.append(path)
    else:
        global_config = get_config_dir() / CONFIG_FILE_NAME
        local_config = (cwd or Path.cwd()) / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        for layer in (global_config, local_config):
            data = load_json_file_optional(layer)
            if data:
                merged = deep_merge(merged, data)
                loaded_from.append(layer)

    env_data = _env_overrides(os.environ if environ is None else environ)
    merged = deep_merge(merged, env_data)

    if loaded_from:
        logger.info("Config loaded from: %s", [str(p) for p in loaded_from])
    if env_data:
        logger.debug("Config overridden from environment: %s", sorted(env_data))

    try:
        return ClientConfig.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in loaded_from) or "environment/defaults"
        raise ConfigError(f"Config validation failed (from {sources}): {e}") from e


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    return {
        field: environ[var]
        for var, field in ENV_OVERRIDES.items()
        if environ.get(var)
    }

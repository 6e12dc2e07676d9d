"""JSON loading helpers for config files.

Use:
- load_json_file() for required files (raises ConfigError if not found)
- load_json_file_optional() for optional config layers (returns None if not found)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from zabbix_api.core.errors import ConfigError

logger = logging.getLogger(__name__)


def load_json_file(path: Path) -> dict[str, Any]:
    """Load and parse a JSON object from ``path``.

    Returns:
        Parsed JSON as a dict. Returns empty dict if file is empty.

    Raises:
        ConfigError: If the file doesn't exist, can't be read, contains
            invalid JSON, or contains non-object JSON.
    """
    resolved = path.resolve()

    if not resolved.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        content = resolved.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    content = content.strip()
    if not content:
        return {}

    try:
        result = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(result, dict):
        raise ConfigError(f"Expected object in {path}, got {type(result).__name__}")

    return result


def load_json_file_optional(path: Path) -> dict[str, Any] | None:
    """Load a JSON config file if it exists, returning None when missing.

    Raises:
        ConfigError: If the file exists but can't be read or parsed.
    """
    resolved = path.resolve()

    if not resolved.is_file():
        logger.debug("Config file not found: %s", path)
        return None

    logger.debug("Loading config file: %s", resolved)
    return load_json_file(resolved)

"""Command-line interface."""

from zabbix_api.cli.main import main

__all__ = ["main"]

"""Entry point for the zabbix-api CLI."""

import logging
import sys

from dotenv import load_dotenv

from zabbix_api.cli.arg_parser import parse_args
from zabbix_api.cli.commands import cmd_call, cmd_login, cmd_logout, cmd_methods, cmd_version
from zabbix_api.cli.output import print_error
from zabbix_api.config.loader import load_config
from zabbix_api.config.schema import ClientConfig
from zabbix_api.core.errors import ConfigError, ZabbixApiError

# CLI flags that override config values when given
_OVERRIDE_ARGS = ("api_url", "user", "password", "auth_token", "token_cache_dir")


def configure_logging(verbose: bool) -> None:
    """Send zabbix_api logs to stderr, INFO+ when verbose, WARNING+ otherwise."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    package_logger = logging.getLogger("zabbix_api")
    package_logger.setLevel(logging.INFO if verbose else logging.WARNING)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


def resolve_config(args: object) -> ClientConfig:
    """Load the layered config and apply command line overrides."""
    config = load_config(getattr(args, "config", None))
    overrides = {
        name: getattr(args, name)
        for name in _OVERRIDE_ARGS
        if getattr(args, name, None) is not None
    }
    if getattr(args, "verbose", False):
        overrides["print_communication"] = True
    if not overrides:
        return config
    try:
        return ClientConfig.model_validate({**config.model_dump(), **overrides})
    except ValueError as e:
        raise ConfigError(f"Invalid command line options: {e}") from e


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    load_dotenv()
    args = parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        print("Usage: zabbix-api <command>")
        print("Commands: version, call, login, logout, methods")
        return 1

    if args.command == "methods":
        return cmd_methods(args.resource)

    try:
        config = resolve_config(args)
        if args.command == "version":
            return cmd_version(config)
        if args.command == "call":
            return cmd_call(config, args.method, args.params, args.result_key, args.auth)
        if args.command == "login":
            return cmd_login(config)
        if args.command == "logout":
            return cmd_logout(config)
    except ZabbixApiError as e:
        print_error(e.message)
        return 1

    print(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

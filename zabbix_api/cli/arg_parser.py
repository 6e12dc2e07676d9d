"""Argument parsing for the zabbix-api CLI."""

import argparse
from pathlib import Path


def add_connection_args(parser: argparse.ArgumentParser) -> None:
    """Add connection/credential options shared by all commands."""
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Config file (default: layered ~/.zabbix-api and ./.zabbix-api config.json)",
    )
    parser.add_argument("--url", dest="api_url", help="API URL (.../api_jsonrpc.php)")
    parser.add_argument("--user", "-u", help="API username")
    parser.add_argument("--password", "-p", help="API password")
    parser.add_argument("--token", dest="auth_token", help="Existing auth/API token")
    parser.add_argument(
        "--cache-dir",
        dest="token_cache_dir",
        help="Token cache directory ('' disables caching, default: system temp dir)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log (redacted) requests and responses to stderr",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zabbix-api",
        description="Command line client for the Zabbix JSON-RPC API",
    )
    add_connection_args(parser)

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("version", help="Show the API version (no login needed)")

    call_parser = subparsers.add_parser(
        "call",
        help="Call any API method",
        description="Call an API method and print its result as JSON.",
    )
    call_parser.add_argument("method", help="API method, e.g. host.get")
    call_parser.add_argument(
        "--params",
        default=None,
        help="Params as JSON, e.g. '{\"output\": [\"host\"]}' or '[\"10084\"]'",
    )
    call_parser.add_argument(
        "--key", "-k",
        dest="result_key",
        help="Re-key a list result by this field (e.g. hostid)",
    )
    call_parser.add_argument(
        "--no-auth",
        dest="auth",
        action="store_false",
        help="Call without an auth token (anonymous methods only)",
    )

    subparsers.add_parser("login", help="Log in (reusing a cached token when valid)")
    subparsers.add_parser("logout", help="Log out and invalidate the session token")

    methods_parser = subparsers.add_parser("methods", help="List known API methods")
    methods_parser.add_argument(
        "resource",
        nargs="?",
        help="Only list methods of this resource (e.g. host)",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)

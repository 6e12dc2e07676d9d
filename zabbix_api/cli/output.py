"""Rich-based output utilities for the zabbix-api CLI."""

from typing import Any

from rich.console import Console

from zabbix_api.api.methods import python_method_name, requires_auth

# Results go to stdout, diagnostics to stderr so output stays pipeable
console = Console()
err_console = Console(stderr=True)


def print_result(data: Any) -> None:
    """Print an API result as formatted JSON."""
    console.print_json(data=data)


def print_error(message: str) -> None:
    """Print an error message in red."""
    err_console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)


def print_info(message: str) -> None:
    """Print an informational message."""
    err_console.print(f"[dim]{message}[/dim]", highlight=False)


def print_methods(methods: list[str]) -> None:
    """Print remote methods with their Python names, anonymous ones marked."""
    console.print(f"[bold]Zabbix API methods[/] ({len(methods)})")
    width = max((len(m) for m in methods), default=0)
    for method in methods:
        marker = "  [green](no auth)[/]" if not requires_auth(method) else ""
        console.print(
            f"  [cyan]{method:<{width}}[/]  [dim]{python_method_name(method)}[/]{marker}",
            highlight=False,
        )

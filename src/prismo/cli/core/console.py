"""Rich console singleton and error output for the CLI."""

import json
import sys

import typer
from rich.console import Console

from prismo.core.types import Failure

# Box drawing characters are not encodable on Windows cp1252 consoles
console = Console(safe_box=sys.platform == "win32")


def print_error(message: str, details: dict | None = None) -> None:
    """Print an error message with optional key/value details."""
    console.print(f"[red]Error: {message}[/red]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")


def print_failure(failure: Failure, as_json: bool = False) -> None:
    """Report a Failure, as a JSON object when the caller asked for JSON."""
    if as_json:
        typer.echo(json.dumps(failure.to_dict(), indent=2, default=str))
        return
    print_error(failure.error, failure.details)

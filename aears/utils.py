"""Shared console helpers for the AEARS pipeline.

Progress and diagnostics are reported through a single Rich console writing
to stderr, so library output never mixes with data a caller writes to
stdout.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def format_percentage(value: float) -> str:
    """Format a 0-100 share with one decimal place.

    Examples::

        format_percentage(50)       -> "50.0%"
        format_percentage(33.3333)  -> "33.3%"
    """
    return f"{value:.1f}%"

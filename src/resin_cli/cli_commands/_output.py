"""Shared CLI consoles and error output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def print_error(exc: BaseException) -> None:
    """Print a failed step the way every command reports errors."""
    console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)

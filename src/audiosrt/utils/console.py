"""Shared rich consoles for status output and error reporting."""

from rich.console import Console

console = Console()
err_console = Console(stderr=True)

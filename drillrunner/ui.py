"""Coloured status lines shared by the verification and run commands."""

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _print_line(symbol: str, fallback: str, message: str, style: str) -> None:
    prefix = fallback if no_emoji() else symbol
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text(f"{prefix} {message}", style=style))


def warn(message: str) -> None:
    """Print a red warning line."""
    _print_line("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _print_line("✅", "✓", message, "green")
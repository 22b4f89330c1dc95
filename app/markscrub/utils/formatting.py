"""Rich console formatting utilities.

Provides consistent formatting for CLI output and log records using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from markscrub.core.theme import load_theme
from markscrub.scrubber.models import find_marker


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
_theme = load_theme()
console = Console(theme=_theme, color_system=_detect_color_system())
err_console = Console(theme=_theme, stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Show DEBUG records.
        quiet: Show ERROR records only. Ignored when verbose is set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    handler = RichHandler(console=err_console, show_path=verbose, rich_tracebacks=True)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def highlight_marker(name: str) -> str:
    """Return a base name as Rich markup with its last marker highlighted.

    Names without a marker are returned escaped and unstyled.
    """
    span = find_marker(name)
    if span is None:
        return escape(name)
    start, end = span
    return f"{escape(name[:start])}[marker]{escape(name[start:end])}[/]{escape(name[end:])}"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")

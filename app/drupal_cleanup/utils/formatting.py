"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console, RenderableType
from rich.logging import RichHandler

from drupal_cleanup.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())

# Set by the CLI callback; gates print_verbose output.
_verbose = False


def set_verbose(enabled: bool) -> None:
    """Enable or disable verbose console output."""
    global _verbose
    _verbose = enabled


def configure_logging(verbose: bool = False) -> None:
    """Route the package logger through Rich on stderr.

    Only the ``drupal_cleanup`` logger is configured; the root logger is
    left alone so embedding applications keep their own setup.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    pkg_logger = logging.getLogger("drupal_cleanup")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )
    pkg_logger.propagate = False


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_verbose(message: RenderableType) -> None:
    """Print a message or renderable only when verbose output is enabled."""
    if _verbose:
        console.print(message)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")

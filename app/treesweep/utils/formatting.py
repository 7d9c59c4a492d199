"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from treesweep.core.theme import get_theme

_SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB")


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


def format_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable string.

    Scales by 1024 up to gigabytes and always shows one decimal place,
    e.g. ``100.0 B``, ``1.5 KB``, ``2048.0 GB``.

    Args:
        size_bytes: Number of bytes.

    Returns:
        Formatted size string.
    """
    size = float(size_bytes)
    unit = 0
    while size >= 1024 and unit < len(_SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{size:.1f} {_SIZE_UNITS[unit]}"


def configure_logging(verbose: bool = False) -> None:
    """Route log records to the error console.

    Args:
        verbose: If True, show debug records; otherwise warnings and above.
    """
    handler = RichHandler(console=err_console, show_path=False, show_time=verbose)
    package_logger = logging.getLogger("treesweep")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


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

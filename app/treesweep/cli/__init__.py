"""CLI package for treesweep.

This package contains the Typer application.
"""

from treesweep.cli.main import app

__all__ = ["app"]

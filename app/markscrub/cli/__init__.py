"""CLI package for markscrub.

This package contains the Typer application and all subcommands.
"""

from markscrub.cli.main import app

__all__ = ["app"]

"""CLI commands for markscrub.

This package contains all subcommand implementations.
"""

from markscrub.cli.commands import config, destroy, scan

__all__ = ["config", "destroy", "scan"]

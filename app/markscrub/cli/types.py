"""Shared helpers for CLI commands.

This module provides the configuration lookup and the remote backend
factory used across command modules.
"""

import typer
from rich.markup import escape

from markscrub.core.config import ConfigError, ScrubConfig, load_config
from markscrub.remote.base import RemoteLister
from markscrub.remote.drive import GoogleDriveLister
from markscrub.utils.formatting import print_error


def get_config(ctx: typer.Context) -> ScrubConfig:
    """Load the configuration selected by the global --config option.

    Exits with code 1 if the configuration file is invalid.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Validated ScrubConfig (defaults when no file exists).
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    try:
        return load_config(obj.get("config_path"))
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def get_remote(config: ScrubConfig, account: str | None = None) -> RemoteLister:
    """Build the remote listing backend.

    Args:
        config: Loaded configuration.
        account: Account override from the command line.

    Returns:
        Configured GoogleDriveLister.
    """
    remote = config.remote
    return GoogleDriveLister(
        account or remote.account,
        browser=remote.effective_browser,
        rscript=remote.rscript,
        timeout_seconds=remote.timeout_seconds,
    )

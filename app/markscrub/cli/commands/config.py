"""Configuration commands.

Show, locate, or create the markscrub configuration file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer
from rich.markup import escape
from rich.syntax import Syntax

from markscrub.cli.types import get_config
from markscrub.core.config import ConfigError, ScrubConfig, config_to_dict, save_config
from markscrub.core.paths import get_config_path
from markscrub.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the configuration file.",
    no_args_is_help=True,
)


def _selected_path(ctx: typer.Context) -> Path:
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return obj.get("config_path") or get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as TOML."""
    config = get_config(ctx)
    path = _selected_path(ctx)
    source = str(path) if path.exists() else "defaults (no config file)"
    print_info(f"Configuration from {escape(source)}")
    console.print(Syntax(tomli_w.dumps(config_to_dict(config)), "toml"))


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the configuration file path."""
    console.print(str(_selected_path(ctx)), markup=False, highlight=False, soft_wrap=True)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    target = _selected_path(ctx)
    if target.exists() and not force:
        print_error(f"Config already exists: {escape(str(target))} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(ScrubConfig(), target)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {escape(str(saved))}")

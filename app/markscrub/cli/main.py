"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from markscrub import __version__
from markscrub.cli.commands import config, destroy, scan
from markscrub.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="markscrub",
    help='Seek and destroy spurious " (1)" markers left in names by sync clients.',
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"markscrub version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of ~/.config/markscrub/config.toml.",
        ),
    ] = None,
) -> None:
    """markscrub - seek and destroy spurious " (1)" markers.

    Typical workflow: scan a synced folder, review (or reconcile) the
    list of marked entries, then destroy the markers in that list.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.command(name="scan")(scan.scan)
app.command(name="scan-with-reconciliation")(scan.scan_with_reconciliation)
app.command(name="destroy")(destroy.destroy)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

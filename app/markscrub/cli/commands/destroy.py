"""Destroy command implementation.

Strips markers from every path in a list file, deepest paths first.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from markscrub.cli.display import create_plan_table, create_results_table, print_destroy_summary
from markscrub.errors import ReportError
from markscrub.scrubber.destroyer import MarkerDestroyer
from markscrub.scrubber.models import DestroySummary
from markscrub.scrubber.report import read_path_list
from markscrub.utils.formatting import console, print_error, print_info


def destroy(
    ctx: typer.Context,
    list_file: Annotated[
        Path,
        typer.Argument(show_default=False, help="List of paths to clean (one per line)."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be renamed without renaming.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation prompt.",
        ),
    ] = False,
) -> None:
    """Remove the last " (d)" marker from every listed path.

    Entries whose unmarked name already exists, or that no longer
    exist, are skipped; the remaining entries are still processed.

    Examples:
        markscrub destroy ~/reports/loos.txt --dry-run
        markscrub destroy ~/reports/heuristic_loos.txt -y
    """
    quiet = isinstance(ctx.obj, dict) and ctx.obj.get("quiet", False)

    try:
        paths = read_path_list(list_file)
    except ReportError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if not paths:
        print_info(f"No paths listed in {escape(str(list_file))}.")
        return

    destroyer = MarkerDestroyer(dry_run=dry_run)

    if not quiet:
        console.print(create_plan_table(destroyer.plan(paths), dry_run=dry_run))

    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"\nProceed with renaming {len(paths)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = destroyer.destroy(paths)

    if not quiet:
        console.print(create_results_table(results))
    print_destroy_summary(DestroySummary.from_results(results), dry_run=dry_run)

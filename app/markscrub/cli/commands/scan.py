"""Scan commands.

Seek marked entries below a directory and write the candidate list,
optionally reconciling it against the remote listing first.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskProgressColumn, TextColumn

from markscrub.cli.display import create_candidates_table
from markscrub.cli.types import get_config, get_remote
from markscrub.errors import AuthenticationError, InvalidRootError, ReportError
from markscrub.remote.drive import AUTH_HINT
from markscrub.scrubber.models import MarkedEntry
from markscrub.scrubber.reconciler import Reconciler
from markscrub.scrubber.report import write_path_list
from markscrub.scrubber.scanner import MarkerScanner
from markscrub.utils.formatting import console, err_console, print_error, print_info, print_warning

MaxDigitArg = Annotated[
    int,
    typer.Argument(
        min=1,
        max=9,
        show_default=False,
        help="Largest marker digit to search for (1-9).",
    ),
]
RootArg = Annotated[
    Path,
    typer.Argument(show_default=False, help="Directory tree to scan."),
]
ReportDirArg = Annotated[
    Path,
    typer.Argument(show_default=False, help="Directory for the list files."),
]


def scan(
    ctx: typer.Context,
    max_digit: MaxDigitArg,
    root: RootArg,
    report_dir: ReportDirArg,
) -> None:
    """Seek entries ending in " (1)" .. " (N)" and write them to a list.

    The list (loos.txt by default) can be edited by hand and then fed
    to the destroy command.

    Examples:
        markscrub scan 3 ~/Drive ~/reports
    """
    config = get_config(ctx)
    entries = _run_scan(root, max_digit)
    report_path = _write_list([e.path for e in entries], report_dir / config.report_name)

    _print_candidates(ctx, entries)
    console.print(f"\nNumber of hits:\t{len(entries)}\t{escape(str(report_path))}")


def scan_with_reconciliation(
    ctx: typer.Context,
    max_digit: MaxDigitArg,
    root: RootArg,
    report_dir: ReportDirArg,
    account: Annotated[
        str | None,
        typer.Option(
            "--account",
            "-a",
            help="Google account to query (overrides remote.account in config).",
        ),
    ] = None,
) -> None:
    """Seek marked entries, then keep those with no remote counterpart.

    Each candidate's name is looked up on Google Drive; a candidate is
    confirmed when no remote file carries the same name. This is a
    heuristic: new local files that were never synced are confirmed
    too, so review the confirmed list before destroying.

    Examples:
        markscrub scan-with-reconciliation 3 ~/Drive ~/reports -a me@example.org
    """
    config = get_config(ctx)
    entries = _run_scan(root, max_digit)
    candidates = [e.path for e in entries]
    report_path = _write_list(candidates, report_dir / config.report_name)

    _print_candidates(ctx, entries)
    console.print(f"\nNumber of hits:\t{len(candidates)}\t{escape(str(report_path))}")

    confirmed_path = report_dir / config.confirmed_name
    if not candidates:
        _write_list([], confirmed_path)
        print_info("Nothing to reconcile.")
        return

    remote = get_remote(config, account)
    with Progress(
        TextColumn("Progress:"),
        BarColumn(),
        MofNCompleteColumn(),
        TaskProgressColumn(),
        console=err_console,
        transient=True,
    ) as progress:
        task = progress.add_task("reconcile", total=len(candidates))
        reconciler = Reconciler(
            remote,
            on_progress=lambda done, _total: progress.update(task, completed=done),
        )
        try:
            result = reconciler.reconcile(candidates)
        except AuthenticationError as e:
            progress.stop()
            print_error(escape(str(e)))
            err_console.print(escape(AUTH_HINT.format(account=e.account or "<account>")))
            raise typer.Exit(code=2) from e

    confirmed_path = _write_list(result.confirmed, confirmed_path)
    if result.failed:
        print_warning(f"{len(result.failed)} remote lookup(s) failed; those entries were left out.")
    console.print(f"Detections:\t{len(result.confirmed)}\t{escape(str(confirmed_path))}")


# === Private helper functions ===


def _run_scan(root: Path, max_digit: int) -> list[MarkedEntry]:
    """Run the scanner, exiting with code 1 on an invalid root."""
    try:
        return MarkerScanner(root, max_digit).scan()
    except InvalidRootError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def _write_list(paths: list[str], path: Path) -> Path:
    """Write a list file, exiting with code 1 on failure."""
    try:
        return write_path_list(paths, path)
    except ReportError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def _print_candidates(ctx: typer.Context, entries: list[MarkedEntry]) -> None:
    """Display the candidates unless --quiet was given."""
    quiet = isinstance(ctx.obj, dict) and ctx.obj.get("quiet", False)
    if entries and not quiet:
        console.print(create_candidates_table(entries))

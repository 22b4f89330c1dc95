"""Shared Rich display functions for candidates and rename results.

Provides reusable table builders and summary printers for the scan,
scan-with-reconciliation and destroy commands.
"""

from pathlib import PurePath

from rich.markup import escape
from rich.table import Table

from markscrub.scrubber.models import DestroySummary, EntryType, MarkedEntry, RenameResult
from markscrub.utils.formatting import console, highlight_marker, print_success


def create_candidates_table(entries: list[MarkedEntry], title: str = "Marked Entries") -> Table:
    """Create a Rich table listing marked entries.

    Args:
        entries: Entries to display, in report order.
        title: Table title.

    Returns:
        Rich Table with Type, Name and Parent columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Type", width=9)
    table.add_column("Name", no_wrap=True)
    table.add_column("Parent", style="muted", overflow="fold")

    for entry in entries:
        if entry.entry_type == EntryType.DIRECTORY:
            kind = "[directory]dir[/]"
        else:
            kind = "file"
        table.add_row(kind, highlight_marker(entry.name), escape(entry.parent))

    return table


def create_plan_table(plan: list[tuple[str, str | None]], dry_run: bool = False) -> Table:
    """Create a Rich table showing planned renames in processing order.

    Args:
        plan: (source, target) pairs; target is None when no marker was found.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table with From and To columns.
    """
    title = "Planned Renames (Dry Run)" if dry_run else "Planned Renames"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("From", overflow="fold")
    table.add_column("To", overflow="fold")

    for source, target in plan:
        parent = escape(str(PurePath(source).parent))
        origin = f"[muted]{parent}/[/]{highlight_marker(PurePath(source).name)}"
        if target is None:
            destination = "[skipped]no marker[/]"
        else:
            destination = f"[muted]{parent}/[/][renamed]{escape(PurePath(target).name)}[/]"
        table.add_row(origin, destination)

    return table


def create_results_table(results: list[RenameResult]) -> Table:
    """Create a Rich table displaying rename results.

    Args:
        results: Rename results in processing order.

    Returns:
        Rich Table with Status, Path and Details columns.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=9, justify="center")
    table.add_column("Path", overflow="fold")
    table.add_column("Details", style="muted", overflow="fold")

    for r in results:
        if r.renamed and r.dry_run:
            status = "[info]dry-run[/]"
            detail = f"Would rename to {escape(PurePath(r.target or '').name)}"
        elif r.renamed:
            status = "[success]OK[/]"
            detail = f"-> {escape(PurePath(r.target or '').name)}"
        else:
            status = "[skipped]SKIP[/]"
            detail = escape(r.error or "Unknown error")
        table.add_row(status, escape(r.source), detail)

    return table


def print_destroy_summary(summary: DestroySummary, dry_run: bool = False) -> None:
    """Print the renamed/skipped counts of a destroy pass.

    Args:
        summary: Counts to print.
        dry_run: Whether the pass was simulated.
    """
    if dry_run:
        console.print(
            f"\nDry-run: [renamed]{summary.renamed} would be renamed[/], "
            f"[skipped]{summary.skipped} would be skipped[/]"
        )
    elif summary.skipped == 0:
        print_success(f"All {summary.renamed} entr{'y' if summary.renamed == 1 else 'ies'} renamed.")
    else:
        console.print(
            f"\n[success]{summary.renamed} renamed[/], [skipped]{summary.skipped} skipped[/]"
        )

"""Plain-text path list artifacts.

Scan reports and confirmed lists share one format: UTF-8 text with
one path per line, meant to be reviewed and edited by hand before
being fed to the destroy stage.
"""

from pathlib import Path

from markscrub.errors import ReportError


def write_path_list(paths: list[str], path: Path) -> Path:
    """Write paths to a list file, one per line.

    The parent directory is created if needed. An empty list
    produces an empty file.

    Args:
        paths: Paths to write, in order.
        path: Destination file.

    Returns:
        The written file path.

    Raises:
        ReportError: If the file cannot be written.
    """
    content = "".join(f"{p}\n" for p in paths)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ReportError(f"Failed to write path list {path}: {e}") from e
    return path


def read_path_list(path: Path) -> list[str]:
    """Read a list file written by write_path_list (or by hand).

    Blank lines are ignored; other lines are kept verbatim apart from
    the line terminator, so names with surrounding spaces survive.

    Args:
        path: List file to read.

    Returns:
        Paths in file order.

    Raises:
        ReportError: If the file is missing or unreadable.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ReportError(f"Path list not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ReportError(f"Failed to read path list {path}: {e}") from e

    return [line.rstrip("\r") for line in text.split("\n") if line.strip()]

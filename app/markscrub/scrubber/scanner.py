"""Marker scanner.

Walks a directory tree and lists every directory, then every regular
file, whose base name carries a marker within the configured digit
bound. Symbolic links are neither followed nor reported.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from markscrub.errors import InvalidRootError
from markscrub.scrubber.models import EntryType, MarkedEntry, Marker

logger = logging.getLogger(__name__)


class MarkerScanner:
    """Scans a directory tree for marked entries.

    Args:
        root: Directory to scan. The root itself is never reported.
        max_digit: Largest marker digit to detect (1 to 9).
    """

    def __init__(self, root: Path | str, max_digit: int) -> None:
        self._root = Path(root).expanduser().absolute()
        self._marker = Marker(max_digit)

    @property
    def root(self) -> Path:
        """Absolute scan root."""
        return self._root

    @property
    def marker(self) -> Marker:
        """Marker pattern used for matching."""
        return self._marker

    def scan(self) -> list[MarkedEntry]:
        """Scan the tree and return the candidate list.

        Directories come first, then files; each section is sorted
        by path so repeated scans of the same tree produce the same
        report.

        Returns:
            Marked entries, possibly empty.

        Raises:
            InvalidRootError: If the root does not exist or is not a directory.
        """
        if not self._root.is_dir():
            raise InvalidRootError(str(self._root))

        directories: list[MarkedEntry] = []
        files: list[MarkedEntry] = []

        for entry in self._walk(self._root):
            entry_type = self._get_entry_type(entry)
            if entry_type is None:
                continue

            digit = self._marker.match(entry.name, entry_type)
            if digit is None:
                continue

            marked = MarkedEntry(path=str(entry), entry_type=entry_type, digit=digit)
            if entry_type == EntryType.DIRECTORY:
                directories.append(marked)
            else:
                files.append(marked)

        directories.sort(key=lambda e: e.path)
        files.sort(key=lambda e: e.path)

        logger.debug(
            "Scanned %s: %d marked directories, %d marked files",
            self._root,
            len(directories),
            len(files),
        )
        return directories + files

    def _walk(self, directory: Path) -> Iterator[Path]:
        """Yield every entry below a directory, depth first.

        Unreadable directories are logged and skipped.

        Args:
            directory: Directory to descend into.

        Yields:
            Paths of all entries below the directory.
        """
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.warning("Cannot read directory %s: %s", directory, e)
            return

        for entry in entries:
            yield entry
            if entry.is_dir() and not entry.is_symlink():
                yield from self._walk(entry)

    @staticmethod
    def _get_entry_type(path: Path) -> EntryType | None:
        """Classify a path as directory or regular file.

        Symlinks are checked first since is_dir/is_file follow them.

        Args:
            path: Path to classify.

        Returns:
            EntryType, or None for symlinks and special files.
        """
        try:
            if path.is_symlink():
                return None
            if path.is_dir():
                return EntryType.DIRECTORY
            if path.is_file():
                return EntryType.FILE
        except OSError:
            logger.warning("Cannot determine type of: %s", path)
        return None

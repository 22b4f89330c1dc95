"""Unit tests for MarkerScanner.

Tests candidate detection, ordering, symlink handling, and root validation.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from markscrub.errors import InvalidRootError
from markscrub.scrubber.models import EntryType
from markscrub.scrubber.scanner import MarkerScanner


class TestMarkerScanner:
    """Tests for MarkerScanner."""

    def test_finds_directories_then_files(self, marked_tree: Path) -> None:
        """Marked directories are listed before marked files, each sorted."""
        entries = MarkerScanner(marked_tree, 3).scan()

        assert [e.path for e in entries] == [
            str(marked_tree / "data (1).v2"),
            str(marked_tree / "dir (1)"),
            str(marked_tree / "plain" / "deep (3)"),
            str(marked_tree / "dir (1)" / "inner (2).txt"),
            str(marked_tree / "foo (1).txt"),
        ]
        assert [e.entry_type for e in entries] == [
            EntryType.DIRECTORY,
            EntryType.DIRECTORY,
            EntryType.DIRECTORY,
            EntryType.FILE,
            EntryType.FILE,
        ]

    def test_records_digit(self, marked_tree: Path) -> None:
        """Each entry carries the digit found in its name."""
        digits = {e.name: e.digit for e in MarkerScanner(marked_tree, 3).scan()}
        assert digits["deep (3)"] == 3
        assert digits["inner (2).txt"] == 2

    def test_bound_limits_matches(self, marked_tree: Path) -> None:
        """Entries with digits above the bound are left out."""
        names = {e.name for e in MarkerScanner(marked_tree, 1).scan()}
        assert names == {"data (1).v2", "dir (1)", "foo (1).txt"}

    def test_higher_bound_includes_more(self, marked_tree: Path) -> None:
        """Raising the bound picks up bar (4).txt."""
        names = {e.name for e in MarkerScanner(marked_tree, 4).scan()}
        assert "bar (4).txt" in names
        assert "notes (0).md" not in names
        assert "archive (1).tar.gz" not in names

    def test_no_matches_returns_empty(self, tmp_path: Path) -> None:
        """A clean tree yields an empty list, not an error."""
        (tmp_path / "clean.txt").write_text("x")
        (tmp_path / "folder").mkdir()
        assert MarkerScanner(tmp_path, 9).scan() == []

    def test_root_itself_not_reported(self, tmp_path: Path) -> None:
        """A marked root directory is not a candidate."""
        root = tmp_path / "top (1)"
        root.mkdir()
        (root / "child (1).txt").write_text("x")

        entries = MarkerScanner(root, 3).scan()

        assert [e.name for e in entries] == ["child (1).txt"]

    def test_symlinks_ignored(self, marked_tree: Path) -> None:
        """Symlinks are neither reported nor followed."""
        (marked_tree / "link (1)").symlink_to(marked_tree / "dir (1)")
        (marked_tree / "alias (2).txt").symlink_to(marked_tree / "foo.txt")

        paths = [e.path for e in MarkerScanner(marked_tree, 3).scan()]

        assert str(marked_tree / "link (1)") not in paths
        assert str(marked_tree / "alias (2).txt") not in paths
        assert str(marked_tree / "link (1)" / "inner (2).txt") not in paths
        assert len(paths) == 5

    def test_relative_root_made_absolute(
        self, marked_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Reported paths are absolute even for a relative root."""
        monkeypatch.chdir(marked_tree.parent)
        entries = MarkerScanner(marked_tree.name, 3).scan()
        assert all(Path(e.path).is_absolute() for e in entries)

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing root raises InvalidRootError."""
        with pytest.raises(InvalidRootError, match="does not exist"):
            MarkerScanner(tmp_path / "nope", 3).scan()

    def test_file_root(self, tmp_path: Path) -> None:
        """A regular file is not a valid root."""
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(InvalidRootError) as exc_info:
            MarkerScanner(target, 3).scan()
        assert exc_info.value.root == str(target)

    def test_invalid_bound(self, tmp_path: Path) -> None:
        """The digit bound is validated on construction."""
        with pytest.raises(ValueError):
            MarkerScanner(tmp_path, 0)

    def test_unreadable_directory_skipped(self, marked_tree: Path) -> None:
        """Directories that cannot be listed are skipped with a warning."""
        original_iterdir = Path.iterdir

        def guarded_iterdir(self: Path):  # type: ignore[no-untyped-def]
            if self.name == "plain":
                raise PermissionError("denied")
            return original_iterdir(self)

        with patch.object(Path, "iterdir", guarded_iterdir):
            names = {e.name for e in MarkerScanner(marked_tree, 3).scan()}

        assert "deep (3)" not in names
        assert "foo (1).txt" in names

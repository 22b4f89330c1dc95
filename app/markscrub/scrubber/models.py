"""Scrubber domain models.

This module defines the marker pattern and the data structures passed
between the scan, reconcile and destroy stages: marked entries, rename
results and reconciliation outcomes.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import PurePath

MIN_DIGIT = 1
MAX_DIGIT = 9

# Stripping accepts any single digit, independently of the scan bound
_STRIP_PATTERN = re.compile(r" \([0-9]\)")


class EntryType(str, Enum):
    """Type of a marked filesystem entry.

    Attributes:
        DIRECTORY: Regular directory (never a symlink).
        FILE: Regular file (never a symlink).
    """

    DIRECTORY = "directory"
    FILE = "file"


class RenameStatus(str, Enum):
    """Lifecycle state of a single entry in a destroy pass.

    Attributes:
        PENDING: Queued, not processed yet.
        RENAMED: Marker stripped (or would be, in dry-run mode).
        SKIPPED: Left untouched; see the accompanying SkipReason.
    """

    PENDING = "pending"
    RENAMED = "renamed"
    SKIPPED = "skipped"


class SkipReason(str, Enum):
    """Why an entry was skipped during a destroy pass."""

    SOURCE_MISSING = "source_missing"
    DESTINATION_EXISTS = "destination_exists"
    NO_MARKER = "no_marker"
    OS_ERROR = "os_error"


@lru_cache(maxsize=32)
def _marker_pattern(max_digit: int, entry_type: EntryType) -> re.Pattern[str]:
    """Compile the base-name pattern for a digit bound and entry type.

    A dot-segment in a directory name is treated as an extension by the
    sync client, so directories accept any dot-prefixed remainder while
    files accept a single alphanumeric extension.
    """
    digits = f"[{MIN_DIGIT}-{max_digit}]"
    remainder = r"(?:\..+)?" if entry_type == EntryType.DIRECTORY else r"(?:\.[a-zA-Z0-9]+)?"
    return re.compile(rf".+ \(({digits})\){remainder}")


@dataclass(frozen=True, slots=True)
class Marker:
    """Disposable " (n)" suffix pattern with an inclusive digit bound.

    Attributes:
        max_digit: Largest marker digit to detect (1 to 9).
    """

    max_digit: int

    def __post_init__(self) -> None:
        """Validate the digit bound."""
        if not (MIN_DIGIT <= self.max_digit <= MAX_DIGIT):
            msg = f"max_digit must be between {MIN_DIGIT} and {MAX_DIGIT}, got {self.max_digit}"
            raise ValueError(msg)

    def match(self, name: str, entry_type: EntryType) -> int | None:
        """Return the marker digit carried by a base name, or None.

        Args:
            name: Base name of the entry (no directory part).
            entry_type: Whether the entry is a directory or a file.

        Returns:
            The digit inside the parentheses, or None if the name
            does not carry a marker within the bound.
        """
        found = _marker_pattern(self.max_digit, entry_type).fullmatch(name)
        if found is None:
            return None
        return int(found.group(1))

    def matches(self, name: str, entry_type: EntryType) -> bool:
        """Check whether a base name carries a marker within the bound."""
        return self.match(name, entry_type) is not None


def find_marker(name: str) -> tuple[int, int] | None:
    """Locate the last " (d)" occurrence in a base name.

    Args:
        name: Base name to search.

    Returns:
        (start, end) slice of the marker, or None if there is none.
    """
    last: re.Match[str] | None = None
    for last in _STRIP_PATTERN.finditer(name):
        pass
    if last is None:
        return None
    return last.span()


def strip_marker(name: str) -> str | None:
    """Remove the last " (d)" occurrence from a base name.

    Only the occurrence nearest the end of the name is removed, so
    "a (1) (2).txt" becomes "a (1).txt".

    Args:
        name: Base name to clean.

    Returns:
        The cleaned name, or None if the name has no marker or would
        become empty.
    """
    span = find_marker(name)
    if span is None:
        return None
    start, end = span
    cleaned = name[:start] + name[end:]
    return cleaned or None


@dataclass(frozen=True, slots=True)
class MarkedEntry:
    """A filesystem entry whose name carries a marker.

    Attributes:
        path: Absolute path of the entry.
        entry_type: Directory or file.
        digit: Marker digit found in the base name.
    """

    path: str
    entry_type: EntryType
    digit: int

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """Base name of the entry."""
        return PurePath(self.path).name

    @property
    def parent(self) -> str:
        """Parent directory of the entry."""
        return str(PurePath(self.path).parent)


@dataclass(frozen=True, slots=True)
class RenameResult:
    """Outcome of processing one path in a destroy pass.

    Attributes:
        source: Path as listed.
        target: Unmarked path in the same parent, None if no marker was found.
        status: RENAMED or SKIPPED.
        reason: Why the entry was skipped (None when renamed).
        error: Human-readable error message for skipped entries.
        dry_run: Whether the rename was only simulated.
    """

    source: str
    target: str | None
    status: RenameStatus
    reason: SkipReason | None = None
    error: str | None = None
    dry_run: bool = False

    @property
    def renamed(self) -> bool:
        """Check if the entry was (or would be) renamed."""
        return self.status == RenameStatus.RENAMED

    @property
    def skipped(self) -> bool:
        """Check if the entry was skipped."""
        return self.status == RenameStatus.SKIPPED


@dataclass(frozen=True, slots=True)
class DestroySummary:
    """Renamed and skipped counts for a finished destroy pass."""

    renamed: int
    skipped: int

    @classmethod
    def from_results(cls, results: list[RenameResult]) -> "DestroySummary":
        """Count renamed and skipped entries."""
        renamed = sum(1 for r in results if r.renamed)
        return cls(renamed=renamed, skipped=len(results) - renamed)

    @property
    def total(self) -> int:
        """Number of processed entries."""
        return self.renamed + self.skipped


@dataclass(slots=True)
class ReconcileResult:
    """Outcome of a reconciliation run.

    Attributes:
        confirmed: Candidates with no remote counterpart, in input order.
        checked: Number of candidates queried.
        failed: Candidates whose remote lookup failed (never confirmed).
    """

    confirmed: list[str] = field(default_factory=list)
    checked: int = 0
    failed: list[str] = field(default_factory=list)

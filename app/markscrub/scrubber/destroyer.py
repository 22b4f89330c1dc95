"""Marker destroyer.

Strips the marker from each listed path by renaming the entry within
its parent directory. Paths are processed in reverse lexicographic
order so nested entries are renamed before their ancestors.
"""

import logging
import os
from pathlib import Path

from markscrub.errors import DestinationExistsError, RenameError, SourceMissingError
from markscrub.scrubber.models import RenameResult, RenameStatus, SkipReason, strip_marker

logger = logging.getLogger(__name__)


def processing_order(paths: list[str]) -> list[str]:
    """Return the order in which a destroy pass visits paths.

    A descendant always sorts after its ancestor, so reversing the
    sort visits leaves before the directories that contain them.

    Args:
        paths: Paths as listed, in any order.

    Returns:
        New list sorted in reverse lexicographic order.
    """
    return sorted(paths, reverse=True)


class MarkerDestroyer:
    """Renames marked entries to their unmarked names.

    Failures are isolated per entry: a collision or a vanished source
    skips that entry and the pass continues. The filesystem under the
    listed paths must not be modified by other processes meanwhile.

    Attributes:
        _dry_run: If True, report what would be renamed without renaming.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the MarkerDestroyer.

        Args:
            dry_run: If True, report what would be renamed without renaming.
        """
        self._dry_run = dry_run

    def destroy(self, paths: list[str]) -> list[RenameResult]:
        """Strip markers from multiple paths and return results.

        Args:
            paths: Paths to clean (candidate or confirmed list).

        Returns:
            List of RenameResult, one per input path, in processing order.
        """
        return [self._rename_single(path) for path in processing_order(paths)]

    def plan(self, paths: list[str]) -> list[tuple[str, str | None]]:
        """Return (source, target) pairs in processing order without touching disk."""
        return [(path, self._target_for(path)) for path in processing_order(paths)]

    def _rename_single(self, path: str) -> RenameResult:
        """Strip the marker from one path.

        Existence of source and target is re-checked immediately before
        the rename, since earlier renames in the same pass may have
        changed the tree.

        Args:
            path: Path to clean.

        Returns:
            RenameResult with RENAMED or SKIPPED status.
        """
        target = self._target_for(path)
        if target is None:
            logger.warning("No marker found in %s", path)
            return RenameResult(
                source=path,
                target=None,
                status=RenameStatus.SKIPPED,
                reason=SkipReason.NO_MARKER,
                error=f"No marker found in name: {Path(path).name}",
                dry_run=self._dry_run,
            )

        try:
            self._check(path, target)
        except RenameError as e:
            reason = (
                SkipReason.DESTINATION_EXISTS
                if isinstance(e, DestinationExistsError)
                else SkipReason.SOURCE_MISSING
            )
            logger.warning("Skipping %s: %s", path, e)
            return RenameResult(
                source=path,
                target=target,
                status=RenameStatus.SKIPPED,
                reason=reason,
                error=str(e),
                dry_run=self._dry_run,
            )

        if self._dry_run:
            logger.info("Dry-run: would rename %s -> %s", path, target)
            return RenameResult(
                source=path,
                target=target,
                status=RenameStatus.RENAMED,
                dry_run=True,
            )

        try:
            Path(path).rename(target)
        except OSError as e:
            logger.warning("Rename failed for %s: %s", path, e)
            return RenameResult(
                source=path,
                target=target,
                status=RenameStatus.SKIPPED,
                reason=SkipReason.OS_ERROR,
                error=str(e),
            )

        logger.info("Renamed %s -> %s", path, target)
        return RenameResult(source=path, target=target, status=RenameStatus.RENAMED)

    @staticmethod
    def _check(path: str, target: str) -> None:
        """Validate a rename before performing it.

        Raises:
            SourceMissingError: If the source no longer exists.
            DestinationExistsError: If the unmarked name is taken.
        """
        if not os.path.lexists(path):
            raise SourceMissingError(path)
        if os.path.lexists(target):
            raise DestinationExistsError(path, target)

    @staticmethod
    def _target_for(path: str) -> str | None:
        """Compute the unmarked path in the same parent directory."""
        source = Path(path)
        cleaned = strip_marker(source.name)
        if cleaned is None:
            return None
        return str(source.with_name(cleaned))

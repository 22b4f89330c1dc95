"""Remote reconciliation of marker candidates.

Keeps the candidates whose base name has no counterpart in a remote
listing. A local marker that is absent remotely is assumed to be
spurious, since the sync client only adds markers on the local side.
"""

import logging
from collections.abc import Callable
from pathlib import PurePath

from markscrub.errors import RemoteQueryError
from markscrub.remote.base import RemoteLister
from markscrub.scrubber.models import ReconcileResult

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class Reconciler:
    """Filters candidates through a remote listing.

    This is a heuristic, not a proof: a new local file that has not been
    synced yet also has zero remote matches and will be confirmed along
    with the spurious markers. Review the confirmed list before
    destroying.

    Args:
        remote: Backend answering remote name lookups.
        on_progress: Called with (done, total) after each candidate.
    """

    def __init__(
        self,
        remote: RemoteLister,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self._remote = remote
        self._on_progress = on_progress

    def reconcile(self, paths: list[str]) -> ReconcileResult:
        """Query the remote for each candidate and keep the unmatched ones.

        Queries run one at a time in input order. A failed lookup is
        recorded and the candidate is left out of the confirmed list.

        Args:
            paths: Candidate paths.

        Returns:
            ReconcileResult with the confirmed paths in input order.

        Raises:
            AuthenticationError: If the remote session cannot be established.
        """
        self._remote.authenticate()
        logger.info("Remote session established for %s", self._remote.account)

        result = ReconcileResult()
        total = len(paths)

        for done, path in enumerate(paths, start=1):
            name = PurePath(path).name
            try:
                matches = self._remote.count(name)
            except RemoteQueryError as e:
                logger.warning("Remote lookup failed for %s: %s", name, e)
                result.failed.append(path)
            else:
                logger.debug("%d remote match(es) for %s", matches, name)
                if matches == 0:
                    result.confirmed.append(path)

            result.checked = done
            if self._on_progress is not None:
                self._on_progress(done, total)

        return result

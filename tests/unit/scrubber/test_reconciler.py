"""Unit tests for Reconciler.

Tests the zero-remote-match heuristic, progress reporting, lookup
failures, and fatal authentication errors.
"""

from collections.abc import Callable
from typing import Any

import pytest
from markscrub.errors import AuthenticationError
from markscrub.scrubber.reconciler import Reconciler

RemoteFactory = Callable[..., Any]


class TestReconciler:
    """Tests for Reconciler."""

    def test_zero_matches_confirmed(self, make_remote: RemoteFactory) -> None:
        """A candidate with no remote counterpart is confirmed."""
        remote = make_remote({})
        result = Reconciler(remote).reconcile(["/drive/foo (1).txt"])

        assert result.confirmed == ["/drive/foo (1).txt"]
        assert result.checked == 1
        assert result.failed == []

    def test_one_match_excluded(self, make_remote: RemoteFactory) -> None:
        """A candidate whose name exists remotely is left out."""
        remote = make_remote({"Song (1).mp3": 1})
        result = Reconciler(remote).reconcile(["/drive/Song (1).mp3"])

        assert result.confirmed == []
        assert result.checked == 1

    def test_several_matches_excluded(self, make_remote: RemoteFactory) -> None:
        """Any non-zero remote count excludes the candidate."""
        remote = make_remote({"a (1).txt": 3})
        assert Reconciler(remote).reconcile(["/x/a (1).txt"]).confirmed == []

    def test_keeps_input_order(self, make_remote: RemoteFactory) -> None:
        """Confirmed paths keep candidate order."""
        remote = make_remote({"b (1)": 1})
        paths = ["/d/c (1)", "/d/b (1)", "/d/a (1)"]

        result = Reconciler(remote).reconcile(paths)

        assert result.confirmed == ["/d/c (1)", "/d/a (1)"]

    def test_queries_base_name(self, make_remote: RemoteFactory) -> None:
        """The remote is asked about base names, one per candidate."""
        remote = make_remote()
        Reconciler(remote).reconcile(["/drive/dir (1)", "/drive/dir (1)/inner (2).txt"])

        assert remote.queries == ["dir (1)", "inner (2).txt"]

    def test_progress_monotonic(self, make_remote: RemoteFactory) -> None:
        """Progress is reported after every candidate, counting up to the total."""
        calls: list[tuple[int, int]] = []
        remote = make_remote({"b (1)": 1}, failing={"c (1)"})

        Reconciler(remote, on_progress=lambda done, total: calls.append((done, total))).reconcile(
            ["/a (1)", "/b (1)", "/c (1)"]
        )

        assert calls == [(1, 3), (2, 3), (3, 3)]

    def test_lookup_failure_not_confirmed(self, make_remote: RemoteFactory) -> None:
        """A failed lookup is recorded and the run continues."""
        remote = make_remote(failing={"bad (1).txt"})

        result = Reconciler(remote).reconcile(["/d/bad (1).txt", "/d/good (1).txt"])

        assert result.failed == ["/d/bad (1).txt"]
        assert result.confirmed == ["/d/good (1).txt"]
        assert result.checked == 2

    def test_authentication_failure_is_fatal(self, make_remote: RemoteFactory) -> None:
        """An authentication error aborts before any lookup."""
        remote = make_remote(fail_auth=True)

        with pytest.raises(AuthenticationError) as exc_info:
            Reconciler(remote).reconcile(["/d/a (1)"])

        assert exc_info.value.account == "tester@example.org"
        assert remote.queries == []

    def test_authenticates_once(self, make_remote: RemoteFactory) -> None:
        """One session serves every lookup in the run."""
        remote = make_remote({"b (1).txt": 2})
        result = Reconciler(remote).reconcile(["/d/a (1).txt", "/d/b (1).txt", "/d/c (2)"])

        assert remote.auth_calls == 1
        assert remote.queries == ["a (1).txt", "b (1).txt", "c (2)"]
        assert result.confirmed == ["/d/a (1).txt", "/d/c (2)"]

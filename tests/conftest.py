"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from markscrub.errors import AuthenticationError, RemoteQueryError
from markscrub.remote.base import RemoteLister


class FakeRemote(RemoteLister):
    """In-memory remote listing for reconciler tests."""

    def __init__(
        self,
        counts: dict[str, int] | None = None,
        *,
        fail_auth: bool = False,
        failing: set[str] | None = None,
        account: str | None = "tester@example.org",
    ) -> None:
        self._counts = counts or {}
        self._fail_auth = fail_auth
        self._failing = failing or set()
        self._account = account
        self.auth_calls = 0
        self.queries: list[str] = []

    @property
    def account(self) -> str | None:
        return self._account

    def authenticate(self) -> None:
        if self._fail_auth:
            raise AuthenticationError(self._account, "token expired")
        self.auth_calls += 1

    def count(self, name: str) -> int:
        self.queries.append(name)
        if name in self._failing:
            raise RemoteQueryError(f"lookup failed for {name}")
        return self._counts.get(name, 0)


@pytest.fixture
def make_remote() -> Callable[..., FakeRemote]:
    """Factory for FakeRemote instances."""
    return FakeRemote


@pytest.fixture
def marked_tree(tmp_path: Path) -> Path:
    """Build a small synced-folder tree with markers at several depths.

    Layout (relative to the returned root)::

        archive (1).tar.gz      file, double extension: not a candidate
        bar (4).txt             file, digit above 3
        data (1).v2/            directory with a dot-segment
        dir (1)/inner (2).txt   nested markers
        foo (1).txt
        foo.txt
        plain/deep (3)/         marked directory below an unmarked one
        plain/notes (0).md      digit zero: never a candidate
    """
    root = tmp_path / "drive"
    root.mkdir()
    (root / "archive (1).tar.gz").write_text("tarball")
    (root / "bar (4).txt").write_text("bar")
    (root / "data (1).v2").mkdir()
    (root / "dir (1)").mkdir()
    (root / "dir (1)" / "inner (2).txt").write_text("inner")
    (root / "foo (1).txt").write_text("marked foo")
    (root / "foo.txt").write_text("original foo")
    (root / "plain").mkdir()
    (root / "plain" / "deep (3)").mkdir()
    (root / "plain" / "notes (0).md").write_text("notes")
    return root

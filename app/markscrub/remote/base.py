"""Abstract base class for remote listing backends.

This module defines the RemoteLister interface the reconciler queries
to decide whether a local marker has a remote counterpart.
"""

from abc import ABC, abstractmethod


class RemoteLister(ABC):
    """Abstract base class for remote listing backends.

    A backend answers one question: how many remote objects carry a
    given name. Session setup is owned by the backend.

    Example:
        >>> remote = GoogleDriveLister(account="me@example.org")
        >>> remote.authenticate()
        >>> remote.count("report.pdf")
        1
    """

    @property
    @abstractmethod
    def account(self) -> str | None:
        """Return the account this backend queries, if any."""

    @abstractmethod
    def authenticate(self) -> None:
        """Establish the remote session.

        Raises:
            AuthenticationError: If the session cannot be established.
        """

    @abstractmethod
    def count(self, name: str) -> int:
        """Count remote objects whose name equals ``name``.

        Args:
            name: Base name to look up.

        Returns:
            Number of matching remote objects.

        Raises:
            RemoteQueryError: If the lookup fails.
        """

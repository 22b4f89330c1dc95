"""Exception hierarchy for markscrub.

Fatal errors abort the current stage; per-entry errors are recorded in
results and never abort a batch.
"""


class ScrubError(Exception):
    """Base exception for all markscrub errors."""


class InvalidRootError(ScrubError):
    """Raised when a scan root does not exist or is not a directory."""

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(f"Scan root does not exist or is not a directory: {root}")


class AuthenticationError(ScrubError):
    """Raised when the remote listing session cannot be established."""

    def __init__(self, account: str | None, detail: str | None = None) -> None:
        self.account = account
        self.detail = detail
        message = f"Cannot establish a remote session for account {account or '<none>'}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RemoteQueryError(ScrubError):
    """Raised when a single remote lookup fails."""


class RenameError(ScrubError):
    """Base exception for per-entry rename failures."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class DestinationExistsError(RenameError):
    """Raised when the unmarked name is already taken."""

    def __init__(self, path: str, target: str) -> None:
        self.target = target
        super().__init__(path, f"Destination already exists: {target}")


class SourceMissingError(RenameError):
    """Raised when an entry vanished between listing and rename."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Path does not exist: {path}")


class ReportError(ScrubError):
    """Raised when a path list artifact cannot be read or written."""

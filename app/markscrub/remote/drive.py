"""Google Drive listing through the googledrive R package.

Each lookup runs ``googledrive::drive_get`` in a fresh Rscript process
and reads back the number of matching rows. Authentication relies on a
token cached by a previous interactive ``drive_auth`` call.
"""

import logging
import subprocess

from markscrub.errors import AuthenticationError, RemoteQueryError
from markscrub.remote.base import RemoteLister
from markscrub.remote.rscript import rscript_exists, run_rscript

logger = logging.getLogger(__name__)

AUTH_HINT = """\
Consider running the following commands from R to authenticate
via web and cache a token for {account}:
  > options(browser = 'wslview')
  > googledrive::drive_auth(email = NA)
When prompted, remember to grant all permissions (checkboxes)."""

_AUTH_EXPRESSIONS: list[str] = [
    "args = commandArgs(trailingOnly = TRUE)",
    "googledrive::drive_auth(email = args[1])",
]

_COUNT_EXPRESSIONS: list[str] = [
    "args = commandArgs(trailingOnly = TRUE)",
    "options(browser = args[1])",
    "options(googledrive_quiet = TRUE)",
    "googledrive::drive_auth(email = args[2])",
    "x <- googledrive::drive_get(args[3])",
    "cat(nrow(x))",
]


class GoogleDriveLister(RemoteLister):
    """Counts Google Drive files by name via Rscript.

    Drive identifies files by ID rather than by path, so the lookup is
    by name only: two remote files with the same name in different
    folders both count.

    Args:
        account: Google account email with a cached token.
        browser: Browser R may open for re-authentication ("" for none).
        rscript: Rscript executable.
        timeout_seconds: Per-call timeout.
    """

    def __init__(
        self,
        account: str | None,
        *,
        browser: str | None = None,
        rscript: str = "Rscript",
        timeout_seconds: float = 120.0,
    ) -> None:
        self._account = account
        self._browser = browser or ""
        self._rscript = rscript
        self._timeout = timeout_seconds

    @property
    def account(self) -> str | None:
        """Return the Google account being queried."""
        return self._account

    def authenticate(self) -> None:
        """Check that a Drive session can be opened for the account.

        Raises:
            AuthenticationError: If no account is set, Rscript is missing,
                or drive_auth fails.
        """
        if not self._account:
            raise AuthenticationError(None, "no account configured")

        if not rscript_exists(self._rscript):
            raise AuthenticationError(self._account, f"'{self._rscript}' not found on PATH")

        try:
            result = run_rscript(
                self._rscript,
                _AUTH_EXPRESSIONS,
                [self._account],
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise AuthenticationError(self._account, str(e)) from e

        if not result.success:
            logger.debug("drive_auth stderr: %s", result.stderr.strip())
            raise AuthenticationError(self._account, "drive_auth failed")

    def count(self, name: str) -> int:
        """Count Drive files named ``name``.

        Raises:
            RemoteQueryError: If R fails or prints something other than a count.
        """
        try:
            result = run_rscript(
                self._rscript,
                _COUNT_EXPRESSIONS,
                [self._browser, self._account or "", name],
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise RemoteQueryError(f"drive_get failed for {name!r}: {e}") from e

        if not result.success:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise RemoteQueryError(f"drive_get failed for {name!r}: {detail}")

        output = result.stdout.strip()
        try:
            return int(output)
        except ValueError as e:
            raise RemoteQueryError(f"Unexpected drive_get output for {name!r}: {output!r}") from e

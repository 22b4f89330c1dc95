"""Rscript subprocess execution.

Runs short R programs through ``Rscript --vanilla -e ...`` with
positional arguments passed after the expressions, so user data is
never interpolated into R source.
"""

import shutil
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RscriptResult:
    """Result of an Rscript invocation.

    Attributes:
        stdout: Standard output from R.
        stderr: Standard error from R.
        returncode: Exit code of the Rscript process.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if the R program exited successfully."""
        return self.returncode == 0


def build_rscript_args(rscript: str, expressions: list[str], args: list[str]) -> list[str]:
    """Build the argv for an Rscript call.

    Args:
        rscript: Rscript executable name or path.
        expressions: R expressions, each passed with its own ``-e``.
        args: Trailing arguments, read in R via commandArgs(trailingOnly = TRUE).

    Returns:
        Command and arguments ready for subprocess.
    """
    argv = [rscript, "--vanilla"]
    for expression in expressions:
        argv.extend(["-e", expression])
    argv.extend(args)
    return argv


def run_rscript(
    rscript: str,
    expressions: list[str],
    args: list[str],
    *,
    timeout: float | None = 120.0,
) -> RscriptResult:
    """Execute an R program and return the result.

    Args:
        rscript: Rscript executable name or path.
        expressions: R expressions to evaluate in order.
        args: Trailing arguments available to the program.
        timeout: Maximum time in seconds to wait for R.

    Returns:
        RscriptResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If R exceeds the timeout.
        FileNotFoundError: If the Rscript executable is not found.
    """
    result = subprocess.run(  # nosec: B603
        build_rscript_args(rscript, expressions, args),
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    return RscriptResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def rscript_exists(rscript: str) -> bool:
    """Check if the Rscript executable can be found.

    Args:
        rscript: Executable name (looked up on PATH) or path.

    Returns:
        True if the executable exists, False otherwise.
    """
    return shutil.which(rscript) is not None

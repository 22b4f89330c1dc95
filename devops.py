"""Development tasks for markscrub.

Usage: python devops.py <task>
Tasks: fmt, lint, test, clean
"""

import subprocess
import sys

SOURCES = ["app", "tests", "devops.py"]


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format sources and apply safe lint fixes with Ruff."""
    _run(
        [
            ["ruff", "format", *SOURCES],
            ["ruff", "check", "--fix", *SOURCES],
        ]
    )


def lint() -> None:
    """Check formatting and lint rules without touching files."""
    _run(
        [
            ["ruff", "format", "--check", *SOURCES],
            ["ruff", "check", *SOURCES],
        ]
    )


def test() -> None:
    """Run the test suite."""
    _run([[sys.executable, "-m", "pytest", "-q", *sys.argv[2:]]])


def clean() -> None:
    """Remove caches and build artifacts."""
    _run(
        [
            ["find", ".", "-type", "d", "-name", "__pycache__", "-exec", "rm", "-rf", "{}", "+"],
            ["find", ".", "-type", "f", "-name", "*.pyc", "-delete"],
            ["rm", "-rf", ".pytest_cache", ".ruff_cache", "dist", "build"],
        ]
    )


TASKS = {
    "fmt": format_code,
    "lint": lint,
    "test": test,
    "clean": clean,
}


if __name__ == "__main__":
    if len(sys.argv) < 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()

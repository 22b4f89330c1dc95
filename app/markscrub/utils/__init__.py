"""Utility modules for markscrub.

This module exports commonly used utility functions.
"""

from markscrub.utils.formatting import (
    configure_logging,
    console,
    err_console,
    highlight_marker,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "highlight_marker",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]

"""XDG-compliant path management for markscrub.

XDG defaults:
- Config: ~/.config/markscrub/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "markscrub"

# Default names of the list artifacts written under a report directory
DEFAULT_REPORT_NAME = "loos.txt"
DEFAULT_CONFIRMED_NAME = "heuristic_loos.txt"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/markscrub/ (or XDG_CONFIG_HOME/markscrub/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/markscrub/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/markscrub/theme.toml.
    """
    return get_config_dir() / "theme.toml"

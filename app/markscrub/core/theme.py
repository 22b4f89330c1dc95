"""Colour theme for the markscrub CLI.

The bundled data/theme.toml maps style names to colours. A theme.toml
in the config directory may override any of those names.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path

from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme

from markscrub.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

# Styles drawn bold on top of their colour
BOLD_STYLES = frozenset({"error", "marker", "directory"})


def bundled_colors() -> dict[str, str]:
    """Return the colours shipped in data/theme.toml."""
    source = resources.files("markscrub.data").joinpath("theme.toml")
    return dict(tomllib.loads(source.read_text(encoding="utf-8"))["colors"])


def user_colors(path: Path, known: set[str]) -> dict[str, str]:
    """Read colour overrides from a user theme file.

    Unknown names and values Rich cannot parse are dropped with a
    warning, so a typo never disables the whole theme.

    Args:
        path: User theme file; a missing file means no overrides.
        known: Style names defined by the bundled theme.

    Returns:
        Valid overrides, possibly empty.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    section = data.get("colors", {})
    if not isinstance(section, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}

    overrides: dict[str, str] = {}
    for name, value in section.items():
        if name not in known:
            logger.warning("Unknown theme colour %r in %s", name, path)
            continue
        try:
            Style.parse(str(value))
        except StyleSyntaxError:
            logger.warning("Invalid colour %r for %r in %s", value, name, path)
            continue
        overrides[name] = str(value)
    return overrides


def build_theme(colors: dict[str, str]) -> Theme:
    """Turn a name-to-colour mapping into the Rich theme used by the consoles."""
    styles = {
        name: f"bold {color}" if name in BOLD_STYLES else color for name, color in colors.items()
    }
    styles["bold_header"] = f"bold {colors['header']}"
    styles["dim"] = colors["muted"]
    return Theme(styles)


def load_theme() -> Theme:
    """Build the Rich theme from the bundled colours and user overrides."""
    colors = bundled_colors()
    colors.update(user_colors(get_user_theme_path(), set(colors)))
    return build_theme(colors)

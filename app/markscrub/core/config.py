"""Scrubber configuration and settings.

Configuration is stored in ~/.config/markscrub/config.toml and passed
explicitly to each pipeline stage. A missing file means defaults.

Example config.toml::

    report_name = "loos.txt"

    [remote]
    account = "me@example.org"
    timeout_seconds = 60
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from markscrub.core.paths import DEFAULT_CONFIRMED_NAME, DEFAULT_REPORT_NAME, get_config_path

logger = logging.getLogger(__name__)


class RemoteConfig(BaseModel):
    """Settings for the Google Drive listing backend.

    Attributes:
        account: Google account email used for lookups.
        browser: Browser R may open for re-authentication. Falls back
            to the BROWSER environment variable when unset.
        rscript: Rscript executable name or path.
        timeout_seconds: Timeout for each Rscript call.
    """

    model_config = ConfigDict(extra="forbid")

    account: Annotated[
        str | None,
        Field(description="Google account email"),
    ] = None
    browser: Annotated[
        str | None,
        Field(description="Browser for web authentication (None = $BROWSER)"),
    ] = None
    rscript: Annotated[
        str,
        Field(min_length=1, description="Rscript executable"),
    ] = "Rscript"
    timeout_seconds: Annotated[
        int,
        Field(ge=10, le=600, description="Timeout per remote call (10-600)"),
    ] = 120

    @property
    def effective_browser(self) -> str | None:
        """Return the configured browser or the BROWSER environment variable."""
        return self.browser or os.environ.get("BROWSER") or None


class ScrubConfig(BaseModel):
    """Top-level markscrub configuration.

    Attributes:
        report_name: File name of the scan report.
        confirmed_name: File name of the reconciled (confirmed) list.
        remote: Remote listing settings.
    """

    model_config = ConfigDict(extra="forbid")

    report_name: Annotated[str, Field(min_length=1)] = DEFAULT_REPORT_NAME
    confirmed_name: Annotated[str, Field(min_length=1)] = DEFAULT_CONFIRMED_NAME
    remote: RemoteConfig = Field(default_factory=RemoteConfig)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ScrubConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ScrubConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return ScrubConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return ScrubConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: ScrubConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file first and then moved into
    place with os.replace().

    Args:
        config: The ScrubConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: ScrubConfig) -> dict[str, object]:
    """Convert ScrubConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are left out.

    Args:
        config: The ScrubConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return config.model_dump(exclude_none=True)

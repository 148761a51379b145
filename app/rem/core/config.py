"""User configuration for rem.

Configuration is stored in ~/.config/rem/config.toml:

    trash_dir = "/mnt/big/trash"
    allow_copy = true

A missing file means defaults. The trash directory can additionally be
overridden per invocation with ``--trash-dir`` or ``REM_TRASH_DIR``.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rem.core.paths import get_config_path, get_default_trash_dir

logger = logging.getLogger(__name__)


class RemConfig(BaseModel):
    """Persistent settings for rem.

    Attributes:
        trash_dir: Trash holding directory. None means the XDG default.
        allow_copy: Fall back to copy + delete when a rename crosses
            filesystems.
    """

    model_config = ConfigDict(extra="forbid")

    trash_dir: Annotated[
        Path | None,
        Field(description="Trash holding directory (None = XDG default)"),
    ] = None
    allow_copy: Annotated[
        bool,
        Field(description="Copy across filesystems when rename is impossible"),
    ] = True

    @property
    def effective_trash_dir(self) -> Path:
        """Trash directory with ``~`` expanded, or the XDG default."""
        if self.trash_dir is not None:
            return self.trash_dir.expanduser()
        return get_default_trash_dir()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> RemConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated RemConfig. Defaults when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or fails validation.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return RemConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return RemConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: RemConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file atomically.

    Args:
        config: The RemConfig to save.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, object] = {"allow_copy": config.allow_copy}
    if config.trash_dir is not None:
        data["trash_dir"] = str(config.trash_dir)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def resolve_trash_dir(override: Path | None, config: RemConfig) -> Path:
    """Pick the trash directory for this invocation.

    Precedence: explicit override (flag or REM_TRASH_DIR), then the
    config file, then the XDG default. The result is absolute.
    """
    if override is not None:
        return Path(os.path.abspath(override.expanduser()))
    return Path(os.path.abspath(config.effective_trash_dir))

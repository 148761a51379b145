"""XDG-compliant path management for rem.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and trash storage.

XDG defaults:
- Config: ~/.config/rem/
- Data:   ~/.local/share/rem/ (the trash holding directory lives here)
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "rem"

# Ledger file kept inside the trash directory, and its temporary files
LEDGER_FILENAME = ".trash.json"
LEDGER_TEMP_PREFIX = ".trash-"
LEDGER_TEMP_SUFFIX = ".tmp"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/rem/ (or XDG_CONFIG_HOME/rem/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_data_dir() -> Path:
    """Get the data directory path.

    Returns:
        Path to ~/.local/share/rem/ (or XDG_DATA_HOME/rem/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/rem/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_default_trash_dir() -> Path:
    """Get the default trash holding directory.

    Returns:
        Path to ~/.local/share/rem/trash.
    """
    return get_data_dir() / "trash"


def get_ledger_path(trash_dir: Path) -> Path:
    """Get the ledger file path for a trash directory.

    The ledger travels with its trash directory, so pointing rem at a
    different trash directory also selects a different ledger.

    Args:
        trash_dir: Trash holding directory.

    Returns:
        Path to <trash_dir>/.trash.json.
    """
    return trash_dir / LEDGER_FILENAME


def get_lock_path(trash_dir: Path) -> Path:
    """Get the advisory lock file path for a trash directory.

    The lock sits next to the trash directory rather than inside it, so
    emptying the trash never removes a lock that is still held.

    Returns:
        Path to <parent>/.<trash_dir name>.lock.
    """
    return trash_dir.parent / f".{trash_dir.name}.lock"


def is_reserved_name(name: str) -> bool:
    """Check whether a name inside the trash directory belongs to rem itself.

    Covers the ledger and the temporary files it is written through.
    """
    if name == LEDGER_FILENAME:
        return True
    return name.startswith(LEDGER_TEMP_PREFIX) and name.endswith(LEDGER_TEMP_SUFFIX)

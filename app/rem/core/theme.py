"""Console colors for rem.

The defaults live in ``ThemeColors``. Any subset can be overridden in
~/.config/rem/theme.toml::

    [colors]
    path = "#00afff"
    removed = "#ff0000"

A broken override file is reported and ignored; rem never refuses to run
because of its colors.
"""

import logging
import tomllib
from functools import cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.theme import Theme

from rem.core.paths import get_config_dir

logger = logging.getLogger(__name__)

HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")]


class ThemeColors(BaseModel):
    """Colors for every style rem prints with, as #RGB or #RRGGBB."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    muted: HexColor = "#b2bec3"
    info: HexColor = "#0ec1c8"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    path: HexColor = "#faf870"
    trashed: HexColor = "#f5b332"
    restored: HexColor = "#c1ff62"
    removed: HexColor = "#f53263"

    def to_rich(self) -> Theme:
        """Build the Rich theme; errors, deletions and table headers are bold."""
        styles = self.model_dump()
        for bold in ("error", "removed"):
            styles[bold] = f"bold {styles[bold]}"
        styles["bold_header"] = f"bold {self.header}"
        return Theme(styles)


def get_user_theme_path() -> Path:
    return get_config_dir() / "theme.toml"


def load_colors(path: Path | None = None) -> ThemeColors:
    """Load colors, applying the user's overrides on top of the defaults.

    Args:
        path: Override file. If None, uses ~/.config/rem/theme.toml.

    Returns:
        ThemeColors. Defaults when the file is missing or invalid.
    """
    theme_path = path or get_user_theme_path()
    try:
        with open(theme_path, "rb") as f:
            overrides = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", theme_path, e)
        return ThemeColors()

    try:
        return ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Ignoring invalid colors in %s: %s", theme_path, e)
        return ThemeColors()


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once per process."""
    return load_colors().to_rich()

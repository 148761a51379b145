"""Shared helpers for CLI commands.

Commands get their settings from the Typer context populated by the main
callback and open the trash through ``trash_session``, which turns setup
failures into a printed error and exit code 1.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import typer

from rem.trash.can import TrashCan, open_trash_can
from rem.trash.errors import LedgerError
from rem.utils.formatting import print_error


@dataclass(frozen=True, slots=True)
class Settings:
    """Effective settings for one invocation.

    Attributes:
        trash_dir: Trash holding directory.
        allow_copy: Default for the cross-device copy fallback.
        verbose: Verbose output requested.
        quiet: Non-essential output suppressed.
    """

    trash_dir: Path
    allow_copy: bool = True
    verbose: bool = False
    quiet: bool = False


def get_settings(ctx: typer.Context) -> Settings:
    """Fetch the settings stored by the main callback."""
    ctx.ensure_object(dict)
    settings = ctx.obj.get("settings")
    if not isinstance(settings, Settings):
        msg = "CLI settings missing from context"
        raise RuntimeError(msg)
    return settings


@contextmanager
def trash_session(settings: Settings) -> Iterator[TrashCan]:
    """Open the trash for the duration of a command.

    Raises:
        typer.Exit: With code 1 if the trash cannot be opened.
    """
    try:
        with open_trash_can(settings.trash_dir, allow_copy=settings.allow_copy) as can:
            yield can
    except LedgerError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"Cannot use trash directory {settings.trash_dir}: {e}")
        raise typer.Exit(code=1) from e

"""Undo command for restoring trashed files.

This module provides the `rem undo` command, which moves trashed files
back to the path they were trashed from.
"""

from typing import Annotated

import typer

from rem.cli.context import get_settings, trash_session
from rem.utils.formatting import console, format_path, print_error, print_info


def undo(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(
            help="Original paths of the files to restore (see `rem list`).",
            show_default=False,
        ),
    ],
    no_copy: Annotated[
        bool,
        typer.Option(
            "--no-copy",
            help="Fail instead of copying when the trash is on another filesystem.",
        ),
    ] = False,
) -> None:
    """Restore files from the trash.

    Examples:
        rem undo notes.txt
        rem undo "/home/me/notes.txt Oct 19 12:53:01"
    """
    settings = get_settings(ctx)

    with trash_session(settings) as can:
        results = can.restore_many(paths, allow_copy=False if no_copy else None)

    failed = 0
    for result in results:
        if result.failed:
            failed += 1
            print_error(result.error or f"Could not restore {result.path}")
        elif not settings.quiet:
            console.print(f"{format_path(result.path)} [restored]restored[/]")

    if failed:
        if len(results) > 1:
            print_info(f"{len(results) - failed} restored, {failed} failed")
        raise typer.Exit(code=1)

"""Trash command.

Moves files and directories into the trash and prints how to undo it.
"""

from typing import Annotated

import typer
from rich.markup import escape

from rem.cli.context import get_settings, trash_session
from rem.trash.models import TrashActionResult
from rem.utils.formatting import console, format_path, print_error, print_warning, quote_path


def trash(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Files or directories to move to the trash.", show_default=False),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Ignore paths that do not exist."),
    ] = False,
    no_copy: Annotated[
        bool,
        typer.Option(
            "--no-copy",
            help="Fail instead of copying when the trash is on another filesystem.",
        ),
    ] = False,
) -> None:
    """Move files to the trash.

    Examples:
        rem trash notes.txt build/
        rem trash -f maybe-missing.log
    """
    settings = get_settings(ctx)

    with trash_session(settings) as can:
        results = can.trash_many(paths, force=force, allow_copy=False if no_copy else None)

    for result in results:
        _print_result(result, quiet=settings.quiet)

    if any(r.failed for r in results):
        raise typer.Exit(code=1)


def _print_result(result: TrashActionResult, quiet: bool) -> None:
    """Print the outcome of trashing one path."""
    if result.failed:
        print_error(result.error or f"Could not trash {result.path}")
        return
    if result.item is None:
        return

    item = result.item
    if item.key_renamed:
        print_warning(
            f"To avoid conflicts, {format_path(item.requested_path)} will now be "
            f"restored as {format_path(item.original_path)}"
        )
    if quiet:
        return
    if item.name_renamed:
        console.print(f"[muted]Stored in the trash as {escape(item.trashed_path)}[/]")
    console.print(f"[trashed]Trashed[/] {format_path(result.path)}")
    console.print(f"[muted]Undo using[/] {format_path('rem undo ' + quote_path(item.original_path))}")

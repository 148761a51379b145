"""Permanent delete command."""

from typing import Annotated

import typer

from rem.cli.context import get_settings, trash_session
from rem.utils.formatting import (
    console,
    format_path,
    print_error,
    print_info,
    print_numbered_list,
)


def delete(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Files or directories to delete for good.", show_default=False),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Ignore paths that do not exist."),
    ] = False,
) -> None:
    """Permanently delete files, bypassing the trash.

    Read-only files and directories are made writable first.
    """
    settings = get_settings(ctx)

    console.print("[removed]Warning, permanently deleting:[/]")
    print_numbered_list(paths)

    if not yes:
        confirmed = typer.confirm("Confirm delete?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    with trash_session(settings) as can:
        results = can.delete_many(paths, force=force)

    for result in results:
        if result.failed:
            print_error(result.error or f"Could not delete {result.path}")
        elif not result.skipped and not settings.quiet:
            console.print(f"{format_path(result.path)} [removed]deleted[/]")

    if any(r.failed for r in results):
        raise typer.Exit(code=1)

"""Empty-trash command."""

from typing import Annotated

import typer

from rem.cli.context import get_settings, trash_session
from rem.utils.formatting import console, format_path, print_error, print_info, print_success


def empty(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Permanently delete everything in the trash.

    Removes the trash directory together with its restore data. This
    cannot be undone.
    """
    settings = get_settings(ctx)

    console.print(
        f"[removed]Warning, permanently deleting all files in[/] {format_path(str(settings.trash_dir))}"
    )
    if not yes:
        confirmed = typer.confirm("Confirm delete?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    with trash_session(settings) as can:
        count = len(can.ledger)
        try:
            can.empty()
        except OSError as e:
            print_error(f"Failed to empty trash: {e}")
            raise typer.Exit(code=1) from e

    if not settings.quiet:
        print_success(f"Trash emptied ({count} item(s) removed).")

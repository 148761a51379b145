"""List command showing what is in the trash."""

import os
from typing import Annotated

import typer
from rich.markup import escape

from rem.cli.context import get_settings, trash_session
from rem.utils.formatting import console, create_entries_table, print_info, print_numbered_list


def list_trash(
    ctx: typer.Context,
    long: Annotated[
        bool,
        typer.Option("--long", "-l", help="Show where each file sits in the trash."),
    ] = False,
) -> None:
    """List the original paths of trashed files."""
    settings = get_settings(ctx)

    with trash_session(settings) as can:
        entries = can.entries()

    if not entries:
        print_info("Trash is empty.")
        return

    if not long:
        print_numbered_list(entry.original_path for entry in entries)
        return

    table = create_entries_table()
    missing = 0
    for i, entry in enumerate(entries, start=1):
        if os.path.lexists(entry.trashed_path):
            status = "[success]ok[/]"
        else:
            status = "[error]missing[/]"
            missing += 1
        table.add_row(str(i), escape(entry.original_path), escape(entry.trashed_path), status)
    console.print(table)

    if missing:
        console.print(f"\n[warning]{missing} entr{'y' if missing == 1 else 'ies'} cannot be restored.[/]")

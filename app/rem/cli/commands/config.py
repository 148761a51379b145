"""Config commands.

Show and change the persistent settings in ~/.config/rem/config.toml.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from rem.cli.context import get_settings
from rem.core.config import ConfigError, load_config, save_config
from rem.core.paths import get_config_path
from rem.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or change rem settings.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective settings and where they come from."""
    settings = get_settings(ctx)
    config_path = get_config_path()

    table = Table(
        title="rem settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value", style="path")
    table.add_row("config file", f"{config_path}{'' if config_path.exists() else ' (not created)'}")
    table.add_row("trash_dir", str(settings.trash_dir))
    table.add_row("allow_copy", str(settings.allow_copy).lower())
    console.print(table)


@app.command(name="set")
def set_(
    trash_dir: Annotated[
        Path | None,
        typer.Option("--trash-dir", help="Trash directory to use by default.", show_default=False),
    ] = None,
    allow_copy: Annotated[
        bool | None,
        typer.Option(
            "--allow-copy/--no-allow-copy",
            help="Copy across filesystems when a rename is impossible.",
            show_default=False,
        ),
    ] = None,
    reset_trash_dir: Annotated[
        bool,
        typer.Option("--reset-trash-dir", help="Go back to the default trash directory."),
    ] = False,
) -> None:
    """Change persistent settings."""
    if trash_dir is None and allow_copy is None and not reset_trash_dir:
        print_info("Nothing to change. See `rem config set --help`.")
        return

    try:
        current = load_config()
        updates: dict[str, object] = {}
        if reset_trash_dir:
            updates["trash_dir"] = None
        elif trash_dir is not None:
            updates["trash_dir"] = trash_dir.expanduser().absolute()
        if allow_copy is not None:
            updates["allow_copy"] = allow_copy
        saved_to = save_config(current.model_copy(update=updates))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings saved to {saved_to}")

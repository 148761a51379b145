"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from rem import __version__
from rem.cli.commands import config, delete, directory, empty, listing, trash, undo
from rem.cli.context import Settings
from rem.core.config import ConfigError, load_config, resolve_trash_dir
from rem.utils.formatting import err_console, print_error

# Create main Typer app
app = typer.Typer(
    name="rem",
    help="Get some rem sleep knowing your files are safe. A command-line trash can.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rem version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Log DEBUG and up.
        quiet: Log ERROR and up only.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=verbose)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    trash_dir: Annotated[
        Path | None,
        typer.Option(
            "--trash-dir",
            "-t",
            envvar="REM_TRASH_DIR",
            help="Use this trash directory instead of the configured one.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """rem - a command-line trash can.

    Files are moved to a trash directory instead of being deleted, and
    can be put back with [bold]rem undo[/bold].
    """
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        user_config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    ctx.ensure_object(dict)
    ctx.obj["settings"] = Settings(
        trash_dir=resolve_trash_dir(trash_dir, user_config),
        allow_copy=user_config.allow_copy,
        verbose=verbose,
        quiet=quiet,
    )


# Register commands
app.command(name="trash")(trash.trash)
app.command(name="undo")(undo.undo)
app.command(name="list")(listing.list_trash)
app.command(name="delete")(delete.delete)
app.command(name="empty")(empty.empty)
app.command(name="dir")(directory.show_dir)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

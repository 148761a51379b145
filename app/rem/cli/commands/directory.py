"""Dir command printing the trash directory."""

import typer

from rem.cli.context import get_settings


def show_dir(ctx: typer.Context) -> None:
    """Print the path of the trash directory."""
    typer.echo(str(get_settings(ctx).trash_dir))

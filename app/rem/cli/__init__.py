"""CLI package for rem.

This package contains the Typer application and all subcommands.
"""

from rem.cli.main import app

__all__ = ["app"]

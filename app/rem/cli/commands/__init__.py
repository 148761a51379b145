"""CLI commands for rem.

This package contains all subcommand implementations.
"""

from rem.cli.commands import config, delete, directory, empty, listing, trash, undo

__all__ = ["config", "delete", "directory", "empty", "listing", "trash", "undo"]

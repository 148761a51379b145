"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rem.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_path(path: str) -> str:
    """Wrap a path in path markup, escaping any Rich markup it contains."""
    return f"[path]{escape(path)}[/]"


def quote_path(path: str) -> str:
    """Quote a path for a copy-pasteable shell hint when it needs quoting."""
    if any(c.isspace() or c in "'\"$`\\*?[]()&;|<>!#~" for c in path):
        return '"' + path.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return path


def print_numbered_list(items: Iterable[str]) -> None:
    """Print items as a 1-based numbered list."""
    for i, item in enumerate(items, start=1):
        console.print(f"[info]{i}:[/] {escape(item)}")


def create_entries_table(title: str = "Trash Contents") -> Table:
    """Create a pre-configured table for displaying ledger entries.

    Args:
        title: Table title.

    Returns:
        Rich Table with #, Original Path, Trashed As and Status columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("#", justify="right", style="info", width=4)
    table.add_column("Original Path", style="path")
    table.add_column("Trashed As", style="muted", overflow="fold")
    table.add_column("Status", width=8)
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")

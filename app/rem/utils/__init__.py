"""Utility modules for rem.

This module exports commonly used utility functions.
"""

from rem.utils.formatting import (
    console,
    create_entries_table,
    err_console,
    format_path,
    print_error,
    print_info,
    print_numbered_list,
    print_success,
    print_warning,
    quote_path,
)

__all__ = [
    "console",
    "create_entries_table",
    "err_console",
    "format_path",
    "print_error",
    "print_info",
    "print_numbered_list",
    "print_success",
    "print_warning",
    "quote_path",
]

"""Fixtures for CLI tests."""

from collections.abc import Iterator

import pytest
from rem.utils.formatting import console, err_console


@pytest.fixture(autouse=True)
def wide_console() -> Iterator[None]:
    """Keep long temporary paths on one line in captured output."""
    saved = console.width, err_console.width
    console.width = err_console.width = 400
    yield
    console.width, err_console.width = saved

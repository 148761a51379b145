"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from rem.trash.can import TrashCan
from rem.trash.ledger import Ledger


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point XDG directories into a temporary home.

    Keeps tests away from the real ~/.config/rem and trash directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    monkeypatch.delenv("REM_TRASH_DIR", raising=False)
    yield home


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory holding files to be trashed."""
    path = tmp_path / "work"
    path.mkdir()
    return path.resolve()


@pytest.fixture
def trash_dir(tmp_path: Path) -> Path:
    """Trash holding directory (not created yet)."""
    return (tmp_path / "trash").resolve()


@pytest.fixture
def can(trash_dir: Path) -> TrashCan:
    """TrashCan with an empty ledger stored in the trash directory."""
    return TrashCan(trash_dir, Ledger(trash_dir / ".trash.json"))

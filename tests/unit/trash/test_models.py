"""Unit tests for trash models."""

import dataclasses

import pytest
from rem.trash.models import LedgerEntry, TrashAction, TrashActionResult, TrashedItem


class TestLedgerEntry:
    """Tests for LedgerEntry dataclass."""

    def test_create_entry(self) -> None:
        entry = LedgerEntry(original_path="/home/me/a.txt", trashed_path="/trash/a.txt")

        assert entry.original_path == "/home/me/a.txt"
        assert entry.trashed_path == "/trash/a.txt"

    def test_empty_original_raises(self) -> None:
        with pytest.raises(ValueError, match="Original path cannot be empty"):
            LedgerEntry(original_path="", trashed_path="/trash/a.txt")

    def test_empty_trashed_raises(self) -> None:
        with pytest.raises(ValueError, match="Trashed path cannot be empty"):
            LedgerEntry(original_path="/home/me/a.txt", trashed_path="")

    def test_entry_is_immutable(self) -> None:
        entry = LedgerEntry(original_path="/a", trashed_path="/trash/a")

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.trashed_path = "/elsewhere"  # type: ignore[misc]


class TestTrashedItem:
    """Tests for TrashedItem dataclass."""

    def test_paths_come_from_entry(self) -> None:
        entry = LedgerEntry(original_path="/a Jan 26 14:30:05", trashed_path="/trash/a Jan 26 14:30:05")
        item = TrashedItem(entry=entry, requested_path="/a", key_renamed=True, name_renamed=True)

        assert item.original_path == "/a Jan 26 14:30:05"
        assert item.trashed_path == "/trash/a Jan 26 14:30:05"
        assert item.requested_path == "/a"

    def test_defaults(self) -> None:
        item = TrashedItem(entry=LedgerEntry("/a", "/trash/a"), requested_path="/a")

        assert item.key_renamed is False
        assert item.name_renamed is False


class TestTrashActionResult:
    """Tests for TrashActionResult dataclass."""

    def test_success(self) -> None:
        result = TrashActionResult(path="a.txt", action=TrashAction.TRASH, success=True)

        assert result.failed is False
        assert result.error is None
        assert result.skipped is False

    def test_failure(self) -> None:
        result = TrashActionResult(
            path="a.txt",
            action=TrashAction.RESTORE,
            success=False,
            error="a.txt is not in the trash",
        )

        assert result.failed is True
        assert result.error == "a.txt is not in the trash"

    def test_action_values(self) -> None:
        assert TrashAction.TRASH.value == "trash"
        assert TrashAction.RESTORE.value == "restore"
        assert TrashAction.DELETE.value == "delete"

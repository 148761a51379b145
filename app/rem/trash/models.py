"""Trash domain models.

This module defines the immutable records exchanged between the trash
engine and its callers: ledger entries, the outcome of a single trash
operation, and per-path results of batch operations.
"""

from dataclasses import dataclass
from enum import Enum


class TrashAction(str, Enum):
    """Kind of operation a result refers to.

    Attributes:
        TRASH: Moved into the trash.
        RESTORE: Moved back out of the trash.
        DELETE: Permanently deleted.
    """

    TRASH = "trash"
    RESTORE = "restore"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """One reversible deletion.

    Attributes:
        original_path: Absolute path the object was trashed from. This is
            the ledger key, possibly disambiguated.
        trashed_path: Absolute path of the object inside the trash.
    """

    original_path: str
    trashed_path: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.original_path:
            msg = "Original path cannot be empty"
            raise ValueError(msg)
        if not self.trashed_path:
            msg = "Trashed path cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class TrashedItem:
    """Outcome of trashing one path.

    Attributes:
        entry: Ledger entry that was recorded.
        requested_path: Canonical path the caller asked to trash.
        key_renamed: Whether the ledger key had to be disambiguated.
        name_renamed: Whether the name inside the trash had to be
            disambiguated.
    """

    entry: LedgerEntry
    requested_path: str
    key_renamed: bool = False
    name_renamed: bool = False

    @property
    def original_path(self) -> str:
        """Key to pass to restore."""
        return self.entry.original_path

    @property
    def trashed_path(self) -> str:
        return self.entry.trashed_path


@dataclass(frozen=True, slots=True)
class TrashActionResult:
    """Result of one path in a batch operation.

    Attributes:
        path: Path as given by the caller.
        action: Operation that was attempted.
        success: Whether the operation completed.
        error: Error message if the operation failed, None otherwise.
        item: Trash outcome for successful trash operations.
        entry: Restored ledger entry for successful restores.
        skipped: True if a missing path was ignored on request.
    """

    path: str
    action: TrashAction
    success: bool
    error: str | None = None
    item: TrashedItem | None = None
    entry: LedgerEntry | None = None
    skipped: bool = False

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return not self.success

"""Trash engine.

This module provides relocation of filesystem objects, collision-free
naming, the persistent ledger of trashed paths, and the TrashCan that
combines them into trash, restore and delete operations.
"""

from rem.trash.can import TrashCan, canonicalize, open_trash_can
from rem.trash.errors import (
    AlreadyInTrashError,
    ContainsTrashError,
    CopyFailedError,
    CrossDeviceError,
    DestinationExistsError,
    LedgerCorruptError,
    LedgerError,
    LedgerLockedError,
    LedgerPersistError,
    NotInTrashError,
    RelocationError,
    RemError,
    SourceNotFoundError,
)
from rem.trash.ledger import Ledger, ledger_lock
from rem.trash.models import LedgerEntry, TrashAction, TrashActionResult, TrashedItem
from rem.trash.naming import DEFAULT_STRATEGIES, Disambiguation, disambiguate
from rem.trash.relocate import is_cross_device_failure, relocate, remove_tree

__all__ = [
    "DEFAULT_STRATEGIES",
    "AlreadyInTrashError",
    "ContainsTrashError",
    "CopyFailedError",
    "CrossDeviceError",
    "DestinationExistsError",
    "Disambiguation",
    "Ledger",
    "LedgerCorruptError",
    "LedgerEntry",
    "LedgerError",
    "LedgerLockedError",
    "LedgerPersistError",
    "NotInTrashError",
    "RelocationError",
    "RemError",
    "SourceNotFoundError",
    "TrashAction",
    "TrashActionResult",
    "TrashCan",
    "TrashedItem",
    "canonicalize",
    "disambiguate",
    "is_cross_device_failure",
    "ledger_lock",
    "open_trash_can",
    "relocate",
    "remove_tree",
]

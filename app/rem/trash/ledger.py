"""Persistent ledger of trashed paths.

The ledger maps each original path to where the object now sits in the
trash. It is read in full when a trash can is opened and rewritten in
full, atomically, after every change.

On-disk format (``.trash.json`` inside the trash directory)::

    {"version": 1, "entries": {"/home/me/a.txt": "/home/me/.local/share/rem/trash/a.txt"}}
"""

import fcntl
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from rem.core.paths import LEDGER_TEMP_PREFIX, LEDGER_TEMP_SUFFIX
from rem.trash.errors import (
    LedgerCorruptError,
    LedgerLockedError,
    LedgerPersistError,
    NotInTrashError,
)
from rem.trash.models import LedgerEntry

logger = logging.getLogger(__name__)

LEDGER_VERSION = 1


class LedgerFile(BaseModel):
    """Serialized form of the ledger."""

    model_config = ConfigDict(extra="forbid")

    version: Literal[1] = LEDGER_VERSION
    entries: dict[str, str] = {}


class Ledger:
    """In-memory ledger bound to its storage file.

    Attributes:
        path: File the ledger is persisted to.
    """

    def __init__(self, path: Path, entries: dict[str, str] | None = None) -> None:
        """Initialize the Ledger.

        Args:
            path: Storage file. Not touched until ``save``.
            entries: Initial mapping of original path to trashed path.
        """
        self.path = path
        self._entries: dict[str, str] = dict(entries or {})

    @classmethod
    def load(cls, path: Path) -> "Ledger":
        """Read a ledger from disk.

        A missing file yields an empty ledger.

        Args:
            path: Storage file.

        Returns:
            Loaded Ledger.

        Raises:
            LedgerCorruptError: If the file exists but is not a valid ledger.
            OSError: If the file cannot be read.
        """
        if not path.exists():
            logger.debug("No ledger at %s, starting empty", path)
            return cls(path)

        try:
            raw = path.read_text(encoding="utf-8")
            if not raw.strip():
                return cls(path)
            data = LedgerFile.model_validate_json(raw)
        except (UnicodeDecodeError, ValidationError) as e:
            msg = f"Ledger {path} is corrupt, move it aside to start over: {e}"
            raise LedgerCorruptError(msg) from e

        logger.debug("Loaded %d ledger entries from %s", len(data.entries), path)
        return cls(path, data.entries)

    def save(self) -> None:
        """Write the whole ledger atomically.

        Raises:
            LedgerPersistError: If the file cannot be written.
        """
        payload = LedgerFile(entries=self._entries).model_dump_json(indent=2)
        tmp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=LEDGER_TEMP_PREFIX,
                suffix=LEDGER_TEMP_SUFFIX,
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            logger.error("Failed to write ledger %s: %s", self.path, e)
            raise LedgerPersistError(f"Failed to write ledger {self.path}: {e}") from e

    def discard(self) -> None:
        """Forget every entry and delete the storage file."""
        self._entries.clear()
        if os.path.lexists(self.path):
            self.path.unlink()

    def __contains__(self, original_path: object) -> bool:
        return original_path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, original_path: str) -> LedgerEntry | None:
        """Look up the entry for an original path."""
        trashed = self._entries.get(original_path)
        if trashed is None:
            return None
        return LedgerEntry(original_path=original_path, trashed_path=trashed)

    def add(self, original_path: str, trashed_path: str) -> LedgerEntry:
        """Record a new entry. Does not persist.

        Raises:
            ValueError: If the key is already present. Keys are never
                overwritten; disambiguate first.
        """
        if original_path in self._entries:
            msg = f"Ledger already has an entry for {original_path}"
            raise ValueError(msg)
        self._entries[original_path] = trashed_path
        return LedgerEntry(original_path=original_path, trashed_path=trashed_path)

    def remove(self, original_path: str) -> LedgerEntry:
        """Drop an entry. Does not persist.

        Raises:
            NotInTrashError: If there is no entry for the path.
        """
        try:
            trashed = self._entries.pop(original_path)
        except KeyError:
            raise NotInTrashError(f"{original_path} is not in the trash") from None
        return LedgerEntry(original_path=original_path, trashed_path=trashed)

    def originals(self) -> list[str]:
        """Snapshot of all original paths, sorted."""
        return sorted(self._entries)

    def entries(self) -> list[LedgerEntry]:
        """Snapshot of all entries, sorted by original path."""
        return [
            LedgerEntry(original_path=key, trashed_path=self._entries[key])
            for key in sorted(self._entries)
        ]


@contextmanager
def ledger_lock(lock_path: Path) -> Iterator[None]:
    """Hold an exclusive advisory lock for the duration of the block.

    Args:
        lock_path: Lock file, created if missing.

    Raises:
        LedgerLockedError: If another process holds the lock.
    """
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    with open(lock_path, "w") as lock_fd:
        try:
            fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError as e:
            msg = f"Another rem process is using the trash ({lock_path}). Try again shortly."
            raise LedgerLockedError(msg) from e
        logger.debug("Acquired trash lock %s", lock_path)
        try:
            yield
        finally:
            fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)

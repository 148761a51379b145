"""Trash can: trash, restore, list and permanently delete.

Ties the relocation engine, the naming ladder and the ledger together.
Each single-path operation either completes (object moved, ledger
saved) or raises with the ledger unchanged for that path. The batch
variants run paths one after another and collect a result per path, so
one failure never stops the rest.
"""

import logging
import os
import time
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from rem.core.paths import get_ledger_path, get_lock_path, is_reserved_name
from rem.trash.errors import (
    AlreadyInTrashError,
    ContainsTrashError,
    LedgerPersistError,
    NotInTrashError,
    RemError,
    SourceNotFoundError,
)
from rem.trash.ledger import Ledger, ledger_lock
from rem.trash.models import LedgerEntry, TrashAction, TrashActionResult, TrashedItem
from rem.trash.naming import Clock, disambiguate
from rem.trash.relocate import ensure_directory, lexists, relocate, remove_tree

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def canonicalize(path: PathLike) -> Path:
    """Make a path absolute with its parent directories resolved.

    The last component is kept as is, so a symlink names the link itself
    and not its target.

    Args:
        path: Path as typed by the user (``~`` allowed).

    Returns:
        Canonical absolute path.
    """
    absolute = Path(os.path.abspath(Path(path).expanduser()))
    if absolute.parent == absolute:
        return absolute
    return absolute.parent.resolve() / absolute.name


class TrashCan:
    """A trash holding directory and its ledger.

    Attributes:
        _trash_dir: Resolved trash holding directory.
        _ledger: Ledger owned by this trash can.
        _allow_copy: Default for the cross-device copy fallback.
        _clock: Time source for name disambiguation.
    """

    def __init__(
        self,
        trash_dir: Path,
        ledger: Ledger,
        allow_copy: bool = True,
        clock: Clock = time.time_ns,
    ) -> None:
        """Initialize the TrashCan.

        Args:
            trash_dir: Trash holding directory. Created on first trash.
            ledger: Loaded ledger for this directory.
            allow_copy: Copy + delete when a rename crosses filesystems.
            clock: Nanosecond clock used for disambiguation timestamps.
        """
        self._trash_dir = Path(trash_dir).expanduser().resolve()
        self._ledger = ledger
        self._allow_copy = allow_copy
        self._clock = clock

    @property
    def trash_dir(self) -> Path:
        """Trash holding directory."""
        return self._trash_dir

    @property
    def ledger(self) -> Ledger:
        """Ledger of the objects in this trash can."""
        return self._ledger

    # -- single path operations -------------------------------------------

    def trash(
        self,
        path: PathLike,
        *,
        force: bool = False,
        allow_copy: bool | None = None,
    ) -> TrashedItem | None:
        """Move a path into the trash and record it.

        Args:
            path: File, directory or symlink (broken links allowed).
            force: Return None instead of raising when the path is missing.
            allow_copy: Override the cross-device copy default.

        Returns:
            TrashedItem with the final ledger key and trashed path, or
            None if a missing path was skipped.

        Raises:
            AlreadyInTrashError: If the path is inside the trash.
            ContainsTrashError: If the path contains the trash directory.
            SourceNotFoundError: If the path does not exist and not ``force``.
            RelocationError: If the move itself fails.
            LedgerPersistError: If the object moved but the ledger could
                not be saved.
            OSError: Permission and other environment failures.
        """
        source = canonicalize(path)
        self._check_trashable(source)

        if not lexists(source):
            if force:
                logger.debug("Skipping missing path %s", source)
                return None
            raise SourceNotFoundError(f"{source} does not exist")

        ensure_directory(self._trash_dir)
        name = disambiguate(str(self._trash_dir / source.name), self._name_taken, clock=self._clock)
        key = disambiguate(str(source), self._ledger.__contains__, clock=self._clock)

        relocate(source, name.path, allow_copy=self._copy_allowed(allow_copy))

        entry = self._ledger.add(key.path, name.path)
        try:
            self._ledger.save()
        except LedgerPersistError as e:
            msg = f"{source} was moved to {name.path} but the ledger was not saved: {e}"
            raise LedgerPersistError(msg) from e

        logger.info("Trashed %s -> %s", source, name.path)
        return TrashedItem(
            entry=entry,
            requested_path=str(source),
            key_renamed=key.renamed,
            name_renamed=name.renamed,
        )

    def restore(self, path: PathLike, *, allow_copy: bool | None = None) -> LedgerEntry:
        """Move a trashed object back to where it came from.

        The ledger entry is only dropped after the move succeeded.

        Args:
            path: Original path (ledger key) of the trashed object.
            allow_copy: Override the cross-device copy default.

        Returns:
            The ledger entry that was restored.

        Raises:
            NotInTrashError: If the path has no ledger entry.
            DestinationExistsError: If something now occupies the path.
            SourceNotFoundError: If the trashed object has vanished.
            LedgerPersistError: If the object moved back but the ledger
                could not be saved.
        """
        key = str(canonicalize(path))
        entry = self._ledger.get(key)
        if entry is None:
            raise NotInTrashError(f"{key} is not in the trash or its restore data is missing")

        Path(key).parent.mkdir(parents=True, exist_ok=True)
        relocate(entry.trashed_path, key, allow_copy=self._copy_allowed(allow_copy))

        self._ledger.remove(key)
        try:
            self._ledger.save()
        except LedgerPersistError as e:
            msg = f"{key} was restored but the ledger was not saved: {e}"
            raise LedgerPersistError(msg) from e

        logger.info("Restored %s <- %s", key, entry.trashed_path)
        return entry

    def permanently_delete(self, path: PathLike, *, force: bool = False) -> bool:
        """Irrecoverably delete a path.

        Deleting something inside the trash also drops the ledger entries
        that pointed at it.

        Args:
            path: Path to delete.
            force: Return False instead of raising when the path is missing.

        Returns:
            True if something was deleted, False if a missing path was skipped.

        Raises:
            ContainsTrashError: If the path is or contains the trash
                directory (use ``empty`` instead).
            SourceNotFoundError: If the path does not exist and not ``force``.
            OSError: If deletion fails even after fixing permissions.
        """
        target = canonicalize(path)
        if self._contains_trash(target):
            raise ContainsTrashError(f"{target} contains the trash directory, empty the trash instead")

        if not lexists(target):
            if force:
                logger.debug("Skipping missing path %s", target)
                return False
            raise SourceNotFoundError(f"{target} does not exist")

        remove_tree(target)
        logger.info("Permanently deleted %s", target)

        if target.is_relative_to(self._trash_dir):
            self._forget_trashed(target)
        return True

    def empty(self) -> None:
        """Delete the trash directory and discard the ledger storage."""
        if lexists(self._trash_dir):
            remove_tree(self._trash_dir)
        self._ledger.discard()
        logger.info("Emptied trash %s", self._trash_dir)

    def list_originals(self) -> list[str]:
        """Snapshot of the original paths currently in the trash."""
        return self._ledger.originals()

    def entries(self) -> list[LedgerEntry]:
        """Snapshot of all ledger entries."""
        return self._ledger.entries()

    # -- batch operations --------------------------------------------------

    def trash_many(
        self,
        paths: Iterable[PathLike],
        *,
        force: bool = False,
        allow_copy: bool | None = None,
    ) -> list[TrashActionResult]:
        """Trash several paths, isolating failures per path."""
        results: list[TrashActionResult] = []
        for path in paths:
            try:
                item = self.trash(path, force=force, allow_copy=allow_copy)
            except (RemError, OSError) as e:
                results.append(_failure(path, TrashAction.TRASH, e))
                continue
            results.append(
                TrashActionResult(
                    path=str(path),
                    action=TrashAction.TRASH,
                    success=True,
                    item=item,
                    skipped=item is None,
                )
            )
        return results

    def restore_many(
        self,
        paths: Iterable[PathLike],
        *,
        allow_copy: bool | None = None,
    ) -> list[TrashActionResult]:
        """Restore several paths, isolating failures per path."""
        results: list[TrashActionResult] = []
        for path in paths:
            try:
                entry = self.restore(path, allow_copy=allow_copy)
            except (RemError, OSError) as e:
                results.append(_failure(path, TrashAction.RESTORE, e))
                continue
            results.append(
                TrashActionResult(
                    path=str(path),
                    action=TrashAction.RESTORE,
                    success=True,
                    entry=entry,
                )
            )
        return results

    def delete_many(
        self,
        paths: Iterable[PathLike],
        *,
        force: bool = False,
    ) -> list[TrashActionResult]:
        """Permanently delete several paths, isolating failures per path."""
        results: list[TrashActionResult] = []
        for path in paths:
            try:
                deleted = self.permanently_delete(path, force=force)
            except (RemError, OSError) as e:
                results.append(_failure(path, TrashAction.DELETE, e))
                continue
            results.append(
                TrashActionResult(
                    path=str(path),
                    action=TrashAction.DELETE,
                    success=True,
                    skipped=not deleted,
                )
            )
        return results

    # -- helpers -----------------------------------------------------------

    def _copy_allowed(self, override: bool | None) -> bool:
        return self._allow_copy if override is None else override

    def _contains_trash(self, path: Path) -> bool:
        return self._trash_dir == path or self._trash_dir.is_relative_to(path)

    def _check_trashable(self, source: Path) -> None:
        if self._contains_trash(source):
            raise ContainsTrashError(f"{source} contains the trash directory")
        if source.is_relative_to(self._trash_dir):
            raise AlreadyInTrashError(f"{source} is already in the trash")

    def _name_taken(self, path: str) -> bool:
        return lexists(path) or is_reserved_name(os.path.basename(path))

    def _forget_trashed(self, deleted: Path) -> None:
        stale = [
            entry.original_path
            for entry in self._ledger.entries()
            if Path(entry.trashed_path).is_relative_to(deleted)
        ]
        if not stale:
            return
        for original in stale:
            self._ledger.remove(original)
        self._ledger.save()
        logger.info("Dropped %d ledger entries for %s", len(stale), deleted)


def _failure(path: PathLike, action: TrashAction, error: Exception) -> TrashActionResult:
    logger.debug("%s failed for %s: %s", action.value, path, error)
    return TrashActionResult(path=str(path), action=action, success=False, error=str(error))


@contextmanager
def open_trash_can(trash_dir: Path, allow_copy: bool = True) -> Iterator[TrashCan]:
    """Lock a trash directory, load its ledger and yield a TrashCan.

    The trash directory itself is not created here; the first trash
    operation does that. The lock file sits beside the trash directory and
    is held until the block exits.

    Args:
        trash_dir: Trash holding directory.
        allow_copy: Default for the cross-device copy fallback.

    Yields:
        TrashCan bound to the directory.

    Raises:
        LedgerLockedError: If another rem process holds the lock.
        LedgerCorruptError: If the ledger file cannot be parsed.
    """
    resolved = Path(trash_dir).expanduser().resolve()
    with ledger_lock(get_lock_path(resolved)):
        ledger = Ledger.load(get_ledger_path(resolved))
        yield TrashCan(resolved, ledger, allow_copy=allow_copy)

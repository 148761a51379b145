"""Exceptions raised by the trash engine.

User errors abort the operation for one path; the CLI reports them and
carries on with the remaining paths. Raw ``OSError`` (permission denied,
disk full) is not wrapped and propagates as-is.
"""


class RemError(Exception):
    """Base exception for trash operations."""


class SourceNotFoundError(RemError):
    """Raised when the path to trash, restore from or delete does not exist."""


class NotInTrashError(RemError):
    """Raised when restoring a path that has no ledger entry."""


class AlreadyInTrashError(RemError):
    """Raised when trashing a path that already lives inside the trash."""


class ContainsTrashError(RemError):
    """Raised when trashing a directory that contains the trash directory."""


class DestinationExistsError(RemError):
    """Raised when a relocation target is already occupied."""


class RelocationError(RemError):
    """Base exception for relocation failures other than plain OSError."""


class CrossDeviceError(RelocationError):
    """Raised when a rename crosses filesystems and copying is disabled."""


class CopyFailedError(RelocationError):
    """Raised when the cross-device copy fallback fails midway.

    The source is left in place. The destination may hold a partial copy.
    """


class LedgerError(RemError):
    """Base exception for ledger storage problems."""


class LedgerCorruptError(LedgerError):
    """Raised when the ledger file exists but cannot be parsed."""


class LedgerPersistError(LedgerError):
    """Raised when the ledger cannot be written after a relocation.

    The filesystem and the ledger are out of sync when this is raised.
    """


class LedgerLockedError(LedgerError):
    """Raised when another rem process holds the trash lock."""

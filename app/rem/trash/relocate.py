"""Relocation of files, directories and symlinks.

Moves filesystem objects between two paths. A plain rename is tried
first; when source and destination live on different filesystems the
move falls back to a recursive copy followed by a recursive delete.
Also hosts the read-only-resilient recursive delete used for permanent
deletion and for emptying the trash.
"""

import errno
import logging
import os
import shutil
import stat
from pathlib import Path

from rem.trash.errors import (
    CopyFailedError,
    CrossDeviceError,
    DestinationExistsError,
    SourceNotFoundError,
)

logger = logging.getLogger(__name__)


def lexists(path: str | os.PathLike[str]) -> bool:
    """Check whether anything, including a broken symlink, occupies a path."""
    return os.path.lexists(path)


def is_cross_device_failure(err: OSError) -> bool:
    """Check whether a rename failed because it crossed filesystems."""
    return err.errno == errno.EXDEV


def relocate(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    allow_copy: bool = True,
) -> None:
    """Move ``src`` to ``dst``, copying across filesystems if needed.

    Args:
        src: Existing file, directory or symlink (broken links allowed).
        dst: Target path. Must not exist.
        allow_copy: Permit the copy + delete fallback on a cross-device
            rename.

    Raises:
        SourceNotFoundError: If ``src`` does not exist.
        DestinationExistsError: If ``dst`` is already occupied.
        CrossDeviceError: If the rename crosses filesystems and copying
            is not allowed.
        CopyFailedError: If the fallback copy fails. ``src`` is untouched.
        OSError: Any other rename or delete failure, unchanged.
    """
    src_path = Path(src)
    dst_path = Path(dst)

    if not lexists(src_path):
        raise SourceNotFoundError(f"{src_path} does not exist")
    if lexists(dst_path):
        raise DestinationExistsError(f"{dst_path} already exists")

    try:
        os.rename(src_path, dst_path)
        logger.debug("Renamed %s -> %s", src_path, dst_path)
        return
    except OSError as e:
        if not is_cross_device_failure(e):
            raise
        if not allow_copy:
            msg = f"Cannot move {src_path} to {dst_path}: different filesystems"
            raise CrossDeviceError(msg) from e

    logger.info("%s and %s are on different filesystems, copying", src_path, dst_path)
    _copy_across(src_path, dst_path)
    remove_tree(src_path)


def _copy_across(src: Path, dst: Path) -> None:
    """Copy a tree to another filesystem, keeping symlinks as links."""
    try:
        if src.is_dir() and not src.is_symlink():
            shutil.copytree(src, dst, symlinks=True)
        else:
            shutil.copy2(src, dst, follow_symlinks=False)
    except (OSError, shutil.Error) as e:
        _discard_partial_copy(dst)
        raise CopyFailedError(f"Copying {src} to {dst} failed: {e}") from e


def _discard_partial_copy(dst: Path) -> None:
    if not lexists(dst):
        return
    try:
        remove_tree(dst)
    except OSError as e:
        logger.warning("Could not clean up partial copy at %s: %s", dst, e)


def remove_tree(path: str | os.PathLike[str]) -> None:
    """Recursively and permanently delete a path.

    Files and symlinks are unlinked (never followed), directories are
    removed with their contents. If deletion fails with a permission
    error, write permission is granted on the tree and deletion is
    retried once.

    Args:
        path: Path to delete.

    Raises:
        SourceNotFoundError: If nothing exists at ``path``.
        OSError: If deletion still fails after fixing permissions.
    """
    target = Path(path)
    if not lexists(target):
        raise SourceNotFoundError(f"{target} does not exist")

    try:
        _remove(target)
    except PermissionError:
        logger.debug("Permission denied deleting %s, making it writable", target)
        make_writable(target)
        _remove(target)


def _remove(target: Path) -> None:
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    else:
        target.unlink()


def make_writable(path: str | os.PathLike[str]) -> None:
    """Grant owner write permission on a path and, depth-first, its children.

    Each directory is fixed before it is descended into, so a tree with
    unreadable directories can still be walked. Symlinks are skipped,
    chmod on them would touch their targets. Failures on individual
    entries are logged and left for the delete retry to report.
    """
    root = Path(path)
    _add_write_bit(root)
    if not root.is_dir() or root.is_symlink():
        return
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            _add_write_bit(Path(dirpath) / name)


def _add_write_bit(path: Path) -> None:
    if path.is_symlink():
        return
    try:
        mode = path.stat().st_mode
        extra = stat.S_IWUSR
        if stat.S_ISDIR(mode):
            extra |= stat.S_IRUSR | stat.S_IXUSR
        path.chmod(mode | extra)
    except OSError as e:
        logger.debug("Could not chmod %s: %s", path, e)


def ensure_directory(path: str | os.PathLike[str]) -> Path:
    """Make sure ``path`` is a directory, replacing anything else there.

    Args:
        path: Directory to create.

    Returns:
        The directory path.

    Raises:
        OSError: If the directory cannot be created.
    """
    directory = Path(path)
    if lexists(directory) and not directory.is_dir():
        logger.warning("%s is not a directory, replacing it", directory)
        remove_tree(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory

"""Filesystem checks and small mutations shared by the mirror components.

The check functions return ``None``/``False`` and log a warning naming the
problem instead of raising; callers decide which error to surface.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def readable_directory(dirname: str | Path | None) -> Path | None:
    """Return *dirname* as a Path if it names an existing, readable directory."""
    if dirname is None:
        logger.warning("cannot use None for a directory name")
        return None
    path = Path(dirname)
    if not path.exists():
        logger.warning("specified directory %r does not exist", str(dirname))
        return None
    if not path.is_dir():
        logger.warning("specified value %r is not a directory", str(dirname))
        return None
    if not os.access(path, os.R_OK | os.X_OK):
        logger.warning("specified directory %r is not readable", str(dirname))
        return None
    return path


def is_writable_directory(path: Path | None) -> bool:
    return path is not None and path.is_dir() and os.access(path, os.W_OK | os.X_OK)


def is_dir_empty(path: Path) -> bool:
    """True if *path* is a directory with no entries; False on any error."""
    try:
        with os.scandir(path) as it:
            return next(it, None) is None
    except OSError as e:
        logger.warning("could not check directory %s: %s", path, e)
        return False


def existing_ancestor(path: Path) -> Path | None:
    """Closest existing path, walking up from *path* itself."""
    current = path.absolute()
    while not current.exists():
        if current.parent == current:
            return None
        current = current.parent
    return current


def creatable_directory(dirname: str | Path | None) -> Path | None:
    """Return *dirname* as a Path if it is, or could be made, a writable directory.

    Does not create anything. A missing directory qualifies when its closest
    existing ancestor is a writable directory.
    """
    if dirname is None:
        logger.warning("received None directory name")
        return None
    path = Path(dirname)
    if path.exists():
        if is_writable_directory(path):
            return path
        logger.warning("%s exists but is not a writable directory", path)
        return None
    ancestor = existing_ancestor(path)
    if is_writable_directory(ancestor):
        return path
    logger.warning("%s could not be created", path)
    return None


def is_clean_destination(path: Path) -> bool:
    """True if *path* does not exist, or exists as an empty directory."""
    if not path.exists() and not path.is_symlink():
        return True
    if not path.is_dir():
        logger.warning("%s already exists as a non-directory", path)
        return False
    if not is_dir_empty(path):
        logger.warning("directory %s has contents", path)
        return False
    return True


def rmdir_if_empty(path: Path) -> bool:
    """Remove *path* if it is an empty directory. Returns whether it was removed."""
    if not path.is_dir() or path.is_symlink():
        return False
    if not is_dir_empty(path):
        return False
    try:
        path.rmdir()
    except OSError as e:
        logger.warning("could not remove directory %s: %s", path, e)
        return False
    return True


def is_same_file(existing: Path, candidate: Path) -> bool:
    """True if both paths name the same file on disk.

    Compares filesystem identity, so a symlink alias counts as the same file.
    A missing *candidate* is simply not the same file.
    """
    if not candidate.exists():
        return False
    try:
        return os.path.samefile(existing, candidate)
    except OSError as e:
        logger.warning("could not compare %s and %s: %s", existing, candidate, e)
        return False


def move_file(src: Path, dst: Path) -> None:
    """Move *src* to *dst*, refusing to replace an existing entry.

    Raises FileExistsError if *dst* is taken, or OSError from the move itself.
    """
    if dst.exists() or dst.is_symlink():
        raise FileExistsError(f"destination already exists: {dst}")
    shutil.move(str(src), str(dst))

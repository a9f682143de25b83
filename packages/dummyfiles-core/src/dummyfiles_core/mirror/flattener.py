"""Flattens a tree: every nested file is moved up under a synthesized name.

This stands in for an external tool that renames and relocates files, so
that restoring can be exercised end to end.
"""

from __future__ import annotations

import itertools
import logging
from pathlib import Path

from dummyfiles_core.tree.fs import is_writable_directory, move_file, rmdir_if_empty
from dummyfiles_core.tree.walker import TreeWalker

logger = logging.getLogger(__name__)

DEFAULT_START_INDEX = 100


class Flattener:
    """Moves every file beneath a directory to ``<dir>/<base_name><n>``."""

    def __init__(
        self,
        start_index: int = DEFAULT_START_INDEX,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        self.start_index = start_index
        self.log = log or logger

    def flatten(self, base_name: str, directory: str | Path) -> bool:
        """Flatten *directory* in place.

        Every file, top-level ones included, gets the first free
        ``base_name`` + counter name, the counter starting at
        ``start_index``. Files this pass has already placed are left alone.
        Emptied subdirectories are then removed, deepest first.

        Fail-fast: returns False on the first file that cannot be moved or
        directory that cannot be listed, leaving already moved files where
        they are.
        """
        root = Path(directory)
        if not is_writable_directory(root):
            self.log.warning("%s is not a writable directory", root)
            return False

        counter = itertools.count(self.start_index)
        placed: set[Path] = set()

        def relocate(file: Path) -> None:
            if file in placed:
                return
            dest = root / f"{base_name}{next(counter)}"
            while dest.exists() or dest.is_symlink():
                dest = root / f"{base_name}{next(counter)}"
            move_file(file, dest)
            placed.add(dest)
            self.log.debug("moved %s to %s", file, dest)

        try:
            walked = TreeWalker(strict=True, log=self.log).walk(root, on_file=relocate)
        except OSError as e:
            self.log.warning("unable to flatten %s: %s", root, e)
            return False

        for subdir in walked.directories_deepest_first():
            if subdir != root:
                rmdir_if_empty(subdir)
        return True


def flatten_and_rename(
    base_name: str,
    directory: str | Path,
    start_index: int = DEFAULT_START_INDEX,
    *,
    log: logging.Logger | None = None,
) -> bool:
    """Convenience wrapper around Flattener().flatten()."""
    return Flattener(start_index, log=log).flatten(base_name, directory)

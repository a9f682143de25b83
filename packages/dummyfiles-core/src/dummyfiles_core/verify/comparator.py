"""Structural comparison of two directory trees.

The rest of the engine is tested against this module, and it uses nothing
from the walker or the mirror modules.
"""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

logger = logging.getLogger(__name__)


def _name_on_disk(path: Path) -> str:
    """The entry's name if it still exists, else ``""``."""
    if path.exists() or path.is_symlink():
        return path.name
    return ""


class TreeComparator:
    """Decides whether two trees have the same shape.

    Shape means the same names at every level, the same nesting and the same
    empty directories. File content is never read, and the two roots
    themselves may have different names: a mirror of ``/x/y/z`` may live at
    ``/a/b/c``.
    """

    def __init__(self, *, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def _list_children(self, directory: Path) -> list[Path] | None:
        if not directory.is_dir():
            return None
        try:
            children = list(directory.iterdir())
        except OSError as e:
            self.log.warning("could not list directory %s: %s", directory, e)
            return None
        children.sort(key=_name_on_disk)
        return children

    def verify_mirror(self, a: str | Path, b: str | Path) -> bool:
        """True if the trees beneath *a* and *b* are structurally identical.

        A regular file (or a symlink to one) on the *a* side only requires a
        regular file on the *b* side. Any listing failure counts as a
        difference.
        """
        pending: deque[tuple[Path, Path]] = deque([(Path(a), Path(b))])

        while pending:
            left, right = pending.pop()
            if left.is_file():
                if not right.is_file():
                    return False
                continue

            left_children = self._list_children(left)
            if left_children is None:
                return False
            right_children = self._list_children(right)
            if right_children is None:
                return False
            if len(left_children) != len(right_children):
                return False

            for lc, rc in zip(left_children, right_children):
                if _name_on_disk(lc) != _name_on_disk(rc):
                    return False
                pending.append((lc, rc))

        return True


def verify_mirror(a: str | Path, b: str | Path) -> bool:
    """Convenience wrapper around TreeComparator().verify_mirror()."""
    return TreeComparator().verify_mirror(a, b)

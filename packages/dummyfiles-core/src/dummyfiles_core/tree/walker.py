"""Iterative directory traversal shared by the builder, flattener and restorer."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class WalkResult:
    """Everything a walk discovered, in discovery order."""

    files: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)
    errors: int = 0

    def directories_deepest_first(self) -> list[Path]:
        """Directories ordered so every child precedes its parent."""
        return list(reversed(self.directories))


class TreeWalker:
    """Walks a tree with an explicit work list instead of the call stack.

    Depth is bounded only by memory. Subdirectories are descended in sorted
    order. Symbolic links below the root are never followed and are reported
    as files; a root that links to a directory is walked.
    """

    def __init__(
        self,
        *,
        strict: bool = False,
        log: logging.Logger | None = None,
    ) -> None:
        self.strict = strict
        self.log = log or logger

    def walk(
        self,
        root: Path,
        on_file: Callable[[Path], None] | None = None,
        on_directory: Callable[[Path], None] | None = None,
    ) -> WalkResult:
        """Visit every entry under *root*.

        *on_directory* runs for each directory before its children are
        listed; *on_file* runs for each non-directory entry. Exceptions from
        either callback propagate. A directory that cannot be listed is logged
        and counted, or re-raised when the walker is strict.
        """
        result = WalkResult()
        if not root.is_dir():
            result.files.append(root)
            if on_file is not None:
                on_file(root)
            return result

        # Only directories are queued; the root may itself be a link
        pending: deque[Path] = deque([root])

        while pending:
            current = pending.pop()
            result.directories.append(current)
            if on_directory is not None:
                on_directory(current)

            try:
                children = sorted(current.iterdir())
            except OSError as e:
                if self.strict:
                    raise
                self.log.warning("I/O error descending %s: %s", current, e)
                result.errors += 1
                continue

            subdirs: list[Path] = []
            for child in children:
                if child.is_dir() and not child.is_symlink():
                    subdirs.append(child)
                else:
                    result.files.append(child)
                    if on_file is not None:
                        on_file(child)
            # Reversed so the deque pops them in sorted order
            pending.extend(reversed(subdirs))

        return result


def walk_tree(root: Path, **kwargs) -> WalkResult:
    """Convenience wrapper around TreeWalker().walk() with no callbacks."""
    return TreeWalker(**kwargs).walk(root)

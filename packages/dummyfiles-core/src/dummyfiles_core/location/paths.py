"""Pure path decomposition and recombination.

Nothing in this module touches the filesystem. Every function keeps the
flavour of the path it is given, so ``PureWindowsPath`` arguments behave like
Windows paths on any host.
"""

from __future__ import annotations

from pathlib import PurePath


def _as_path(path: PurePath | str) -> PurePath:
    return path if isinstance(path, PurePath) else PurePath(path)


def segments(path: PurePath | str) -> tuple[str, ...]:
    """Name segments of *path*, excluding any drive or root anchor."""
    p = _as_path(path)
    return p.parts[1:] if p.anchor else p.parts


def normalize(path: PurePath) -> PurePath:
    """Lexically collapse ``..`` segments.

    ``.`` segments are already dropped by ``PurePath``. A ``..`` that would
    climb above an anchored root is discarded; on a relative path it is kept.
    """
    kept: list[str] = []
    for part in segments(path):
        if part == "..":
            if kept and kept[-1] != "..":
                kept.pop()
                continue
            if path.anchor:
                continue
        kept.append(part)
    return type(path)(path.anchor, *kept)


def basename(path: PurePath | str | None) -> str:
    """Last segment of *path*, or ``""`` for ``None`` or an empty path."""
    if path is None:
        return ""
    return _as_path(path).name


def dirname(path: PurePath | str | None) -> str:
    """Everything but the last segment of *path*, or ``""`` if there is none.

    On POSIX the dirname of ``/a/b/c`` is ``/a/b``, of ``/a`` is ``/``, and of
    a single relative segment is ``""``.
    """
    if path is None:
        return ""
    p = _as_path(path)
    if not p.name:
        return ""
    parent = p.parent
    if parent == type(p)("."):
        return ""
    return str(parent)


def is_root_path(path: PurePath | str | None) -> bool:
    """True if *path* names the top of a directory hierarchy.

    Wider than ``is_absolute()``: on Windows ``C:\\Users\\bill`` is both
    absolute and a root path, while ``\\Users\\bill`` is not absolute but is
    still a root path.
    """
    if path is None:
        return False
    p = _as_path(path)
    return p.is_absolute() or bool(p.root)


def combine_paths(parent: PurePath, append: PurePath | str) -> PurePath:
    """Combine *append* into *parent*.

    A relative *append* is simply joined. A root *append* has its leading
    segments that positionally match *parent* elided first, so
    ``/Users/steve/Documents/merges`` + ``/Users/steve/Documents/sheets/x``
    gives ``/Users/steve/Documents/merges/sheets/x``. At least the last
    segment of *append* is always kept: the result never equals *parent*, and
    ``combine_paths(p, p)`` is *p* with its own last segment appended again.

    Raises ValueError if *parent* is None or *append* has no segments.
    """
    if parent is None:
        raise ValueError("cannot combine into a None path")
    if append is None:
        raise ValueError("cannot combine a None path")
    flavour = type(parent)
    append_path = flavour(append) if isinstance(append, str) else flavour(str(append))
    append_parts = segments(append_path)
    if not append_parts:
        raise ValueError("cannot combine an empty path")

    if is_root_path(append_path):
        parent_parts = segments(parent)
        max_common = min(len(parent_parts), len(append_parts) - 1)
        k = 0
        while k < max_common and parent_parts[k] == append_parts[k]:
            k += 1
        tail = flavour(*append_parts[k:])
    else:
        tail = append_path
    return normalize(parent / tail)

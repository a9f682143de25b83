"""Reading and writing marker files.

A marker's bytes are its original relative path in a single-byte encoding.
Readers strip surrounding whitespace, so a trailing newline is harmless.
"""

from __future__ import annotations

from pathlib import Path

MARKER_ENCODING = "latin-1"

# Files written by an older generator start with this token
IGNORE_PREFIX = "content"


def is_ignore_content(content: str, prefix: str = IGNORE_PREFIX) -> bool:
    """True if *content* belongs to a legacy file this engine did not produce."""
    return content.startswith(prefix)


def write_marker(path: Path, recorded: str, encoding: str = MARKER_ENCODING) -> None:
    """Create the marker at *path* holding *recorded*.

    Missing parent directories are created. An existing file at *path* is
    never replaced: FileExistsError is raised instead. UnicodeEncodeError is
    raised if *recorded* cannot be expressed in *encoding*.
    """
    data = recorded.encode(encoding)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "xb") as f:
        f.write(data)


def read_marker(path: Path, encoding: str = MARKER_ENCODING) -> str:
    """Return the stripped recorded path stored in the marker at *path*."""
    return path.read_bytes().decode(encoding).strip()

"""Builds a mirror: the source tree's shape, with marker files for content."""

from __future__ import annotations

import logging
from pathlib import Path

from dummyfiles_core.errors import BadArgumentsError
from dummyfiles_core.mirror.markers import MARKER_ENCODING, write_marker
from dummyfiles_core.tree.fs import is_clean_destination, readable_directory
from dummyfiles_core.tree.walker import TreeWalker

logger = logging.getLogger(__name__)


class MirrorBuilder:
    """Recreates every directory of a source tree and a marker for every file."""

    def __init__(
        self,
        encoding: str = MARKER_ENCODING,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        self.encoding = encoding
        self.log = log or logger

    def _check_arguments(self, source_root: str | Path, dest_root: str | Path) -> tuple[Path, Path]:
        source = readable_directory(source_root)
        if source is None:
            raise BadArgumentsError(
                f"{source_root} does not name a readable directory", source_root
            )
        dest = Path(dest_root)
        if not is_clean_destination(dest):
            raise BadArgumentsError(
                f"{dest_root} must not exist, or must be an empty directory", dest_root
            )
        if dest.absolute().resolve().is_relative_to(source.absolute().resolve()):
            raise BadArgumentsError(
                f"{dest_root} lies inside the tree being mirrored", dest_root
            )
        return source, dest

    def build(self, source_root: str | Path, dest_root: str | Path) -> int:
        """Mirror *source_root* into *dest_root*.

        Returns the number of directories and files that could not be created;
        zero is full success. Partial work is not rolled back.

        Raises BadArgumentsError, before anything is written, if the source is
        not a readable directory or the destination is populated.
        """
        source, dest = self._check_arguments(source_root, dest_root)
        errors = 0

        def make_directory(directory: Path) -> None:
            nonlocal errors
            target = dest / directory.relative_to(source)
            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                errors += 1
                self.log.warning("unable to create directory %s: %s", target, e)

        def make_marker(file: Path) -> None:
            nonlocal errors
            rel = file.relative_to(source)
            target = dest / rel
            try:
                write_marker(target, str(rel), self.encoding)
            except FileExistsError:
                errors += 1
                self.log.warning("refusing to overwrite existing file %s", target)
            except UnicodeEncodeError:
                errors += 1
                self.log.warning("cannot record %r in %s", str(rel), self.encoding)
            except OSError as e:
                errors += 1
                self.log.warning("unable to create file %s: %s", target, e)

        walked = TreeWalker(log=self.log).walk(
            source, on_file=make_marker, on_directory=make_directory
        )
        errors += walked.errors
        self.log.info(
            "mirrored %d files in %d directories from %s to %s (%d errors)",
            len(walked.files),
            len(walked.directories),
            source,
            dest,
            errors,
        )
        return errors


def create_mirror(
    source_root: str | Path,
    dest_root: str | Path,
    encoding: str = MARKER_ENCODING,
    *,
    log: logging.Logger | None = None,
) -> int:
    """Build a mirror; return the error count, or BAD_ARGUMENTS on bad input."""
    try:
        return MirrorBuilder(encoding, log=log).build(source_root, dest_root)
    except BadArgumentsError as e:
        (log or logger).warning("%s", e)
        return int(e.status)

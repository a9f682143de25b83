"""Moves marker files back to the relative locations recorded inside them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePath

from dummyfiles_core.errors import BadArgumentsError, InvalidTargetError
from dummyfiles_core.location.paths import combine_paths, normalize, segments
from dummyfiles_core.mirror.markers import (
    IGNORE_PREFIX,
    MARKER_ENCODING,
    is_ignore_content,
    read_marker,
)
from dummyfiles_core.status import ExitStatus
from dummyfiles_core.tree.fs import (
    creatable_directory,
    is_same_file,
    move_file,
    readable_directory,
    rmdir_if_empty,
)
from dummyfiles_core.tree.walker import TreeWalker

logger = logging.getLogger(__name__)


@dataclass
class RestoreResult:
    """Per-file outcome counts of one restore pass."""

    restored: int = 0
    unchanged: int = 0
    ignored: int = 0
    conflicts: int = 0
    errors: int = 0
    descend_errors: int = 0

    @property
    def file_errors(self) -> int:
        """Files that were left behind: conflicts plus failures."""
        return self.conflicts + self.errors

    @property
    def status(self) -> ExitStatus:
        if self.file_errors:
            return ExitStatus.EXCEPTION_RESTORING
        if self.descend_errors:
            return ExitStatus.EXCEPTION_DESCENDING
        return ExitStatus.OK


class Restorer:
    """Reads each marker under a directory and moves it to its recorded path.

    Best-effort: a failure on one file is logged and counted, and the rest are
    still processed. An occupied destination is never overwritten.
    """

    def __init__(
        self,
        encoding: str = MARKER_ENCODING,
        ignore_prefix: str = IGNORE_PREFIX,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        self.encoding = encoding
        self.ignore_prefix = ignore_prefix
        self.log = log or logger

    def restore(
        self, source_dir: str | Path, target_dir: str | Path | None = None
    ) -> RestoreResult:
        """Restore every marker under *source_dir* relative to *target_dir*.

        *target_dir* defaults to *source_dir*, restoring in place. It is
        created if missing.

        Raises BadArgumentsError if *source_dir* is not a readable directory,
        InvalidTargetError if *target_dir* cannot be created.
        """
        source = readable_directory(source_dir)
        if source is None:
            raise BadArgumentsError(
                f"{source_dir} does not name a readable directory", source_dir
            )
        target_name = source_dir if target_dir is None else target_dir
        target = creatable_directory(target_name)
        if target is None:
            raise InvalidTargetError(f"could not create directory {target_name}", target_name)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise InvalidTargetError(f"could not create directory {target}: {e}", target) from e

        # Walk fully before moving anything
        walked = TreeWalker(log=self.log).walk(source)
        result = RestoreResult(descend_errors=walked.errors)

        for file in walked.files:
            self._restore_file(file, target, result)

        keep = target.absolute()
        for directory in walked.directories_deepest_first():
            if directory.absolute() != keep:
                rmdir_if_empty(directory)

        self.log.info(
            "restored %d, unchanged %d, ignored %d, conflicts %d, errors %d",
            result.restored,
            result.unchanged,
            result.ignored,
            result.conflicts,
            result.errors,
        )
        return result

    def _restore_file(self, file: Path, target: Path, result: RestoreResult) -> None:
        try:
            content = read_marker(file, self.encoding)
        except OSError as e:
            self.log.warning("I/O error reading %s: %s", file, e)
            result.errors += 1
            return

        if is_ignore_content(content, self.ignore_prefix):
            self.log.info("ignoring %s", file)
            result.ignored += 1
            return
        if not segments(PurePath(content)):
            self.log.warning("no recorded path in %s", file)
            result.errors += 1
            return

        new_path = Path(combine_paths(target, content))
        if not new_path.is_relative_to(normalize(target)):
            self.log.warning("recorded path %r in %s escapes %s", content, file, target)
            result.errors += 1
            return

        if is_same_file(file, new_path):
            self.log.debug("nothing to be done to %s", file)
            result.unchanged += 1
            return
        if new_path.exists() or new_path.is_symlink():
            self.log.warning("already exists: %s (leaving %s in place)", new_path, file)
            result.conflicts += 1
            return

        try:
            new_path.parent.mkdir(parents=True, exist_ok=True)
            move_file(file, new_path)
        except OSError as e:
            self.log.warning("I/O error restoring %s to %s: %s", file, new_path, e)
            result.errors += 1
            return
        self.log.debug("restored %s to %s", file, new_path)
        result.restored += 1


def restore_to_original_names(
    source_dir: str | Path,
    target_dir: str | Path | None = None,
    encoding: str = MARKER_ENCODING,
    *,
    log: logging.Logger | None = None,
) -> int:
    """Restore markers and return an exit status instead of raising."""
    try:
        result = Restorer(encoding, log=log).restore(source_dir, target_dir)
    except (BadArgumentsError, InvalidTargetError) as e:
        (log or logger).warning("%s", e)
        return int(e.status)
    return int(result.status)

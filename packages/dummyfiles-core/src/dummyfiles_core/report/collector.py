"""Classifies each marker under a mirror as moved, renamed, or untouched."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from dummyfiles_core.location.paths import basename, dirname, segments
from dummyfiles_core.mirror.markers import (
    IGNORE_PREFIX,
    MARKER_ENCODING,
    is_ignore_content,
    read_marker,
)
from dummyfiles_core.report.models import FileReport
from dummyfiles_core.tree.walker import TreeWalker

logger = logging.getLogger(__name__)


def _ends_with(path: Path, tail: PurePath) -> bool:
    """Segment-wise suffix test, like ``Path.endswith`` in other path APIs."""
    tail_parts = segments(tail)
    if not tail_parts:
        return False
    return segments(path)[-len(tail_parts):] == tail_parts


def make_file_report(
    base_dir: Path,
    file: Path,
    encoding: str = MARKER_ENCODING,
    ignore_prefix: str = IGNORE_PREFIX,
) -> FileReport:
    """Build the report for one marker *file* found beneath *base_dir*.

    A file whose path still ends with its recorded path is neither moved nor
    renamed. Otherwise its location is taken relative to the parent of
    *base_dir*, so the mirror root's own name is part of it.
    """
    report = FileReport(current_name=basename(file))
    try:
        content = read_marker(file, encoding)
    except OSError as e:
        logger.warning("I/O error reporting on %s: %s", file, e)
        report.has_error = True
        return report

    report.content = content
    if is_ignore_content(content, ignore_prefix):
        report.is_ignore = True
        return report

    recorded = PurePath(content)
    report.original_location = dirname(recorded)
    report.original_name = basename(recorded)

    if _ends_with(file, recorded):
        report.current_location = report.original_location
        return report

    report.has_been_renamed = report.current_name != report.original_name
    base_parent = base_dir.parent
    if base_parent == base_dir:
        report.current_location = dirname(file)
    else:
        report.current_location = dirname(file.relative_to(base_parent))
    report.has_been_moved = not report.current_location.endswith(report.original_location)
    return report


def make_file_reports(
    base_dir: str | Path,
    encoding: str = MARKER_ENCODING,
    ignore_prefix: str = IGNORE_PREFIX,
) -> tuple[list[FileReport], int]:
    """Report on every file beneath *base_dir*.

    Returns ``(reports, errors)`` where *errors* counts unreadable directories
    and files. Reports come back in walk order.
    """
    base = Path(base_dir).absolute()
    walked = TreeWalker().walk(base)
    reports = [make_file_report(base, f, encoding, ignore_prefix) for f in walked.files]
    errors = walked.errors + sum(1 for r in reports if r.has_error)
    return reports, errors

"""Exceptions raised by the mirror/restore engine before touching the filesystem."""

from __future__ import annotations

from dummyfiles_core.status import ExitStatus


class DummyFilesError(Exception):
    """Base error; carries the exit status a CLI should report for it."""

    status: ExitStatus = ExitStatus.BAD_ARGUMENTS

    def __init__(self, message: str, path: object | None = None) -> None:
        self.path = path
        super().__init__(message)


class BadArgumentsError(DummyFilesError):
    """A source or destination argument failed its precondition."""

    status = ExitStatus.BAD_ARGUMENTS


class InvalidTargetError(DummyFilesError):
    """The restore target cannot be created or written."""

    status = ExitStatus.REWRITE_PATH_INVALID

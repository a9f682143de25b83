"""Process exit statuses shared by the library wrappers and the CLI."""

from __future__ import annotations

from enum import IntEnum


class ExitStatus(IntEnum):
    """Small negative integers; zero always means full success."""

    OK = 0
    BAD_ARGUMENTS = -65
    REWRITE_PATH_INVALID = -66
    EXCEPTION_DESCENDING = -67
    EXCEPTION_RESTORING = -68
    UNKNOWN_APP_SPECIFIED = -97
    NO_APP_SPECIFIED = -98

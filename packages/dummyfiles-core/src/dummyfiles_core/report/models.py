"""Pydantic models for marker file reports."""

from pydantic import BaseModel


class FileReport(BaseModel):
    """Where a marker file is now, compared with where it was mirrored."""

    current_name: str
    current_location: str = ""
    content: str | None = None
    original_name: str = ""
    original_location: str = ""
    is_ignore: bool = False
    has_error: bool = False
    has_been_moved: bool = False
    has_been_renamed: bool = False

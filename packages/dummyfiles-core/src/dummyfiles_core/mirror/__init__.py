"""Mirror lifecycle: build, flatten and restore marker-file trees."""

from dummyfiles_core.mirror.builder import MirrorBuilder, create_mirror
from dummyfiles_core.mirror.flattener import Flattener, flatten_and_rename
from dummyfiles_core.mirror.markers import (
    IGNORE_PREFIX,
    MARKER_ENCODING,
    is_ignore_content,
    read_marker,
    write_marker,
)
from dummyfiles_core.mirror.restorer import (
    RestoreResult,
    Restorer,
    restore_to_original_names,
)

__all__ = [
    "IGNORE_PREFIX",
    "MARKER_ENCODING",
    "Flattener",
    "MirrorBuilder",
    "RestoreResult",
    "Restorer",
    "create_mirror",
    "flatten_and_rename",
    "is_ignore_content",
    "read_marker",
    "restore_to_original_names",
    "write_marker",
]

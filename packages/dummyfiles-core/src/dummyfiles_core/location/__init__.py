"""Path algebra: basename/dirname, root detection and prefix-eliding joins."""

from dummyfiles_core.location.paths import (
    basename,
    combine_paths,
    dirname,
    is_root_path,
    normalize,
    segments,
)

__all__ = [
    "basename",
    "combine_paths",
    "dirname",
    "is_root_path",
    "normalize",
    "segments",
]

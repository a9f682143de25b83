"""DummyFiles Core - mirror directory trees as marker files, flatten them, and restore them."""

from dummyfiles_core.config import DummyFilesConfig, load_config
from dummyfiles_core.errors import BadArgumentsError, DummyFilesError, InvalidTargetError
from dummyfiles_core.location import combine_paths
from dummyfiles_core.mirror import (
    Flattener,
    MirrorBuilder,
    Restorer,
    create_mirror,
    flatten_and_rename,
    restore_to_original_names,
)
from dummyfiles_core.report import FileReport, make_file_reports
from dummyfiles_core.status import ExitStatus
from dummyfiles_core.tree import TreeWalker
from dummyfiles_core.verify import TreeComparator, verify_mirror

__version__ = "0.1.0"

__all__ = [
    "BadArgumentsError",
    "DummyFilesConfig",
    "DummyFilesError",
    "ExitStatus",
    "FileReport",
    "Flattener",
    "InvalidTargetError",
    "MirrorBuilder",
    "Restorer",
    "TreeComparator",
    "TreeWalker",
    "combine_paths",
    "create_mirror",
    "flatten_and_rename",
    "load_config",
    "make_file_reports",
    "restore_to_original_names",
    "verify_mirror",
]

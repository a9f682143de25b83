"""Tree traversal and filesystem helpers."""

from dummyfiles_core.tree.walker import TreeWalker, WalkResult, walk_tree

__all__ = [
    "TreeWalker",
    "WalkResult",
    "walk_tree",
]

"""Structural tree comparison."""

from dummyfiles_core.verify.comparator import TreeComparator, verify_mirror

__all__ = [
    "TreeComparator",
    "verify_mirror",
]

"""Depth-bounded directory traversal and tree rendering.

This package contains the non-CLI core:
- traversal request, depth-limit and entry datatypes
- the error taxonomy used to contain per-entry and per-subtree failures
- filesystem enumeration/stat helpers
- the recursive walker that prints rows and aggregates sizes
"""

from __future__ import annotations

from .types import (
    MAX_NESTING_LEVELS,
    DepthLimit,
    DirectoryChild,
    DirectoryUnreadable,
    MetadataUnavailable,
    NotADirectory,
    SubtreeFailed,
    TraversalRequest,
    TreeWalkError,
)
from .fs import file_size, is_directory, list_directory_children
from .walker import TreeWalker, walk

__all__ = [
    "MAX_NESTING_LEVELS",
    "DepthLimit",
    "DirectoryChild",
    "DirectoryUnreadable",
    "MetadataUnavailable",
    "NotADirectory",
    "SubtreeFailed",
    "TraversalRequest",
    "TreeWalkError",
    "file_size",
    "is_directory",
    "list_directory_children",
    "TreeWalker",
    "walk",
]

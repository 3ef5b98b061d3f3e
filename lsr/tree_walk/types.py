"""Datatypes and error taxonomy for depth-bounded directory traversal."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

# Applies to unlimited traversals too; bounds recursion depth.
MAX_NESTING_LEVELS = 127


@dataclass(frozen=True)
class DepthLimit:
    """How many more directory levels a traversal may descend into.

    ``remaining is None`` means unlimited. A bounded limit becomes exhausted
    once it has been descended past zero; unlimited never does.
    """

    remaining: int | None

    @classmethod
    def unlimited(cls) -> "DepthLimit":
        return cls(None)

    @classmethod
    def bounded(cls, levels: int) -> "DepthLimit":
        if levels < 0:
            raise ValueError("bounded depth must be >= 0")
        return cls(levels)

    @classmethod
    def from_cli(cls, value: int) -> "DepthLimit":
        """Map the command-line depth convention (negative = no limit)."""
        if value < 0:
            return cls.unlimited()
        return cls.bounded(value)

    @property
    def is_unlimited(self) -> bool:
        return self.remaining is None

    @property
    def exhausted(self) -> bool:
        return self.remaining is not None and self.remaining < 0

    @property
    def at_frontier(self) -> bool:
        """Whether directories listed at this level will not be expanded."""
        return self.remaining == 0

    def descend(self) -> "DepthLimit":
        if self.remaining is None:
            return self
        return DepthLimit(self.remaining - 1)


@dataclass(frozen=True)
class TraversalRequest:
    """One recursive walk call: which directory, how deep, how indented."""

    path: Path
    depth: DepthLimit
    indent: int = 0
    show_hidden: bool = False

    @property
    def exhausted(self) -> bool:
        return self.depth.exhausted or self.indent > MAX_NESTING_LEVELS

    @property
    def at_frontier(self) -> bool:
        """Whether directories listed by this call will not be expanded."""
        return self.depth.at_frontier or self.indent >= MAX_NESTING_LEVELS

    def descend(self, child: Path) -> "TraversalRequest":
        return replace(self, path=child, depth=self.depth.descend(), indent=self.indent + 1)


@dataclass(frozen=True)
class DirectoryChild:
    """One enumerated directory entry."""

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool = False


class TreeWalkError(Exception):
    """Base class for traversal failures carrying the offending path."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class NotADirectory(TreeWalkError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"{path} is not a directory")


class DirectoryUnreadable(TreeWalkError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(path, _describe_os_error(cause, path))
        self.cause = cause


class MetadataUnavailable(TreeWalkError):
    """Metadata for a single entry could not be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(path, _describe_os_error(cause, path))
        self.cause = cause


class SubtreeFailed(TreeWalkError):
    """A recursive walk into ``path`` failed; ``cause`` is the original error."""

    def __init__(self, path: Path, cause: TreeWalkError) -> None:
        super().__init__(path, str(cause))
        self.cause = cause


def _describe_os_error(exc: OSError, path: Path) -> str:
    reason = exc.strerror or str(exc) or type(exc).__name__
    return f"{path}: {reason}"


__all__ = [
    "MAX_NESTING_LEVELS",
    "DepthLimit",
    "TraversalRequest",
    "DirectoryChild",
    "TreeWalkError",
    "NotADirectory",
    "DirectoryUnreadable",
    "MetadataUnavailable",
    "SubtreeFailed",
]

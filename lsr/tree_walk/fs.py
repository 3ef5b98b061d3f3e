"""Filesystem access used by the tree walker.

Every function here is a thin synchronous wrapper over ``os``/``pathlib``
calls. Failures surface as ``OSError`` so the walker can decide how to
contain them. Symlinks are never followed.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import DirectoryChild

HIDDEN_PREFIX = "."

logger = logging.getLogger(__name__)


def is_directory(path: Path) -> bool:
    """Return whether ``path`` is a directory (following a symlinked root)."""
    return path.is_dir()


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def list_directory_children(directory: Path, show_hidden: bool) -> list[DirectoryChild]:
    """List ``directory``'s immediate children in filesystem order.

    Opening the directory raises ``OSError``. Entries that fail while being
    enumerated are dropped; a failure advancing the iterator ends the listing
    with whatever was read so far.
    """
    children: list[DirectoryChild] = []
    with os.scandir(directory) as entries:
        iterator = iter(entries)
        while True:
            try:
                child = next(iterator)
            except StopIteration:
                break
            except OSError as exc:
                logger.debug("stopped enumerating %s: %s", directory, exc)
                break

            name = child.name
            if not show_hidden and is_hidden(name):
                continue
            try:
                is_dir = child.is_dir(follow_symlinks=False)
                is_symlink = child.is_symlink()
            except OSError as exc:
                logger.debug("dropping unreadable entry %s: %s", child.path, exc)
                continue
            children.append(
                DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir, is_symlink=is_symlink)
            )
    return children


def file_size(path: Path) -> int:
    """Return the size in bytes of ``path`` itself (not a symlink target)."""
    return int(path.lstat().st_size)


def link_target(path: Path) -> str:
    """Return the raw target text of symlink ``path``."""
    return os.readlink(path)


__all__ = [
    "HIDDEN_PREFIX",
    "is_directory",
    "is_hidden",
    "list_directory_children",
    "file_size",
    "link_target",
]

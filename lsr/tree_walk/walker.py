"""Depth-bounded recursive directory listing with per-subtree error containment.

``TreeWalker.walk`` prints one row per entry as it goes and returns the byte
total of every regular file it printed, including those in nested calls.
Symlinks are listed with their target and never followed or counted.
A failing subdirectory becomes one inline error row beneath it; a file whose
size cannot be read gets an error label instead of a size. Neither stops the
listing of siblings or ancestors. Only failures of the outermost call reach
the caller.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from ..ansi import pad_to_column
from ..formatting import GLYPH_CLOSE, branch_glyph, format_byte_size
from ..ui_theme import PLAIN_THEME, UITheme
from . import fs
from .types import (
    DepthLimit,
    DirectoryChild,
    DirectoryUnreadable,
    MetadataUnavailable,
    NotADirectory,
    SubtreeFailed,
    TraversalRequest,
    TreeWalkError,
)

INDENT_UNIT = "  "

logger = logging.getLogger(__name__)


class TreeWalker:
    """Render directory trees to ``out`` using ``theme`` for styling.

    ``size_column`` switches file sizes from appended to right-aligned so that
    each size ends at that display column.
    """

    def __init__(self, out: TextIO, theme: UITheme = PLAIN_THEME, size_column: int | None = None) -> None:
        self.out = out
        self.theme = theme
        self.size_column = size_column

    def walk(self, request: TraversalRequest) -> int:
        if not fs.is_directory(request.path):
            raise NotADirectory(request.path)
        if request.exhausted:
            return 0

        try:
            children = fs.list_directory_children(request.path, request.show_hidden)
        except OSError as exc:
            raise DirectoryUnreadable(request.path, exc) from exc

        total_bytes = 0
        count = len(children)
        for index, child in enumerate(children):
            glyph = branch_glyph(index, count, request.indent)
            if child.is_symlink:
                self._render_link(request, child, glyph)
            elif child.is_dir:
                total_bytes += self._walk_directory(request, child, glyph)
            else:
                total_bytes += self._render_file(request, child, glyph)
        return total_bytes

    def _walk_directory(self, request: TraversalRequest, child: DirectoryChild, glyph: str) -> int:
        row = f"{INDENT_UNIT * request.indent}{glyph} {child.name}/"
        # Frontier directories are printed but their contents are not.
        if request.at_frontier:
            self._emit(self.theme.emphasize(row))
        else:
            self._emit(self.theme.de_emphasize(row))

        try:
            return self.walk(request.descend(child.path))
        except TreeWalkError as exc:
            failure = SubtreeFailed(child.path, exc)
            logger.info("listing of %s failed: %s", failure.path, failure.cause)
            self._emit_error_row(request.indent + 1, str(failure))
            return 0

    def _render_file(self, request: TraversalRequest, child: DirectoryChild, glyph: str) -> int:
        row = f"{INDENT_UNIT * request.indent}{self.theme.de_emphasize(glyph)} {child.name}"
        try:
            size = self._entry_size(child.path)
        except MetadataUnavailable as exc:
            logger.info("skipping size of %s: %s", exc.path, exc.cause)
            label = self.theme.paint(self.theme.error, f"<error: {exc}>")
            self._emit(pad_to_column(row, label, self.size_column))
            return 0

        label = self.theme.paint(self.theme.size, format_byte_size(size))
        self._emit(pad_to_column(row, label, self.size_column))
        return size

    def _render_link(self, request: TraversalRequest, child: DirectoryChild, glyph: str) -> None:
        """Links are listed with their target and count toward no total."""
        row = f"{INDENT_UNIT * request.indent}{self.theme.de_emphasize(glyph)} {child.name}"
        try:
            target = fs.link_target(child.path)
        except OSError as exc:
            logger.info("cannot read link %s: %s", child.path, exc)
            self._emit(f"{row} -> {self.theme.paint(self.theme.error, '?')}")
            return
        self._emit(f"{row} -> {self.theme.de_emphasize(target)}")

    def _entry_size(self, path: Path) -> int:
        try:
            return fs.file_size(path)
        except OSError as exc:
            raise MetadataUnavailable(path, exc) from exc

    def _emit_error_row(self, indent: int, message: str) -> None:
        glyph = self.theme.de_emphasize(GLYPH_CLOSE)
        self._emit(f"{INDENT_UNIT * indent}{glyph} {self.theme.paint(self.theme.error, message)}")

    def _emit(self, line: str) -> None:
        self.out.write(line + "\n")


def walk(
    path: Path | str,
    depth: DepthLimit | int,
    indent: int = 0,
    *,
    show_hidden: bool = False,
    out: TextIO | None = None,
    theme: UITheme | None = None,
    size_column: int | None = None,
) -> int:
    """List ``path`` as a tree and return the aggregate size of listed files.

    ``depth`` is either a ``DepthLimit`` or an int using the command-line
    convention where negative means unlimited.
    """
    limit = depth if isinstance(depth, DepthLimit) else DepthLimit.from_cli(depth)
    request = TraversalRequest(path=Path(path), depth=limit, indent=indent, show_hidden=show_hidden)
    walker = TreeWalker(
        out if out is not None else sys.stdout,
        theme if theme is not None else PLAIN_THEME,
        size_column=size_column,
    )
    return walker.walk(request)


__all__ = [
    "INDENT_UNIT",
    "TreeWalker",
    "walk",
]

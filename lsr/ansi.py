"""ANSI-aware text measurement for aligned tree rows.

Escape sequences take no columns, wide characters take two, and tabs expand
to the next 8-column stop, so styled rows line up with what the terminal shows.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
MIN_SIZE_GAP = 2


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return how many terminal columns ``text`` occupies once rendered."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def pad_to_column(line: str, suffix: str, column: int | None) -> str:
    """Append ``suffix`` so that it ends at display ``column``.

    Without a column, or when the line is already too wide, the suffix is
    appended after a fixed two-space gap.
    """
    gap = " " * MIN_SIZE_GAP
    if column is None:
        return f"{line}{gap}{suffix}"
    used = display_width(line) + display_width(suffix)
    if used + MIN_SIZE_GAP > column:
        return f"{line}{gap}{suffix}"
    return f"{line}{' ' * (column - used)}{suffix}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "MIN_SIZE_GAP",
    "strip_ansi",
    "char_display_width",
    "display_width",
    "pad_to_column",
]

"""Pure display helpers for tree rows: branch glyphs and byte-size labels."""

from __future__ import annotations

BYTES_IN_KB = 1024
BYTES_IN_MB = BYTES_IN_KB * 1024
BYTES_IN_GB = BYTES_IN_MB * 1024

GLYPH_FLAT = "─"
GLYPH_OPEN = "╭"
GLYPH_TEE = "├"
GLYPH_CLOSE = "╰"


def branch_glyph(index: int, sibling_count: int, indent: int) -> str:
    """Return the branch glyph for entry ``index`` of ``sibling_count`` siblings.

    The top level uses a flat connector for a lone entry and an opening corner
    for the first of many. Nested levels hang off their parent row, so they use
    the closing corner and tee instead. The last of many always closes.
    """
    if sibling_count < 1:
        raise ValueError("sibling_count must be >= 1")
    if not 0 <= index < sibling_count:
        raise ValueError(f"index {index} out of range for {sibling_count} siblings")
    if indent < 0:
        raise ValueError("indent must be >= 0")

    if sibling_count == 1:
        return GLYPH_FLAT if indent == 0 else GLYPH_CLOSE
    if index == 0:
        return GLYPH_OPEN if indent == 0 else GLYPH_TEE
    if index == sibling_count - 1:
        return GLYPH_CLOSE
    return GLYPH_TEE


def format_byte_size(num_bytes: int) -> str:
    """Render ``num_bytes`` with 1024-based units and two decimals above bytes."""
    if num_bytes < 0:
        raise ValueError("byte size must be >= 0")
    if num_bytes < BYTES_IN_KB:
        return f"{num_bytes}B"
    if num_bytes < BYTES_IN_MB:
        return f"{num_bytes / BYTES_IN_KB:.2f}KB"
    if num_bytes < BYTES_IN_GB:
        return f"{num_bytes / BYTES_IN_MB:.2f}MB"
    return f"{num_bytes / BYTES_IN_GB:.2f}GB"


__all__ = [
    "BYTES_IN_KB",
    "BYTES_IN_MB",
    "BYTES_IN_GB",
    "GLYPH_FLAT",
    "GLYPH_OPEN",
    "GLYPH_TEE",
    "GLYPH_CLOSE",
    "branch_glyph",
    "format_byte_size",
]

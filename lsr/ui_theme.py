"""UI theme definitions and selection helpers.

Themes are ANSI palettes injected into the tree renderer. The plain theme has
empty escapes everywhere, so styling degrades to a no-op when color is off.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    emphasis: str
    dim: str
    size: str
    error: str
    summary: str

    def paint(self, style: str, text: str) -> str:
        """Wrap ``text`` in ``style`` and a reset, or return it untouched."""
        if not style:
            return text
        return f"{style}{text}{self.reset}"

    def emphasize(self, text: str) -> str:
        return self.paint(self.emphasis, text)

    def de_emphasize(self, text: str) -> str:
        return self.paint(self.dim, text)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    emphasis="\033[1;34m",
    dim="\033[2m",
    size="\033[38;5;109m",
    error="\033[38;5;203m",
    summary="\033[1m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    emphasis="\033[1;38;5;45m",
    dim="\033[2;38;5;110m",
    size="\033[38;5;73m",
    error="\033[38;5;215m",
    summary="\033[1;38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    emphasis="",
    dim="",
    size="",
    error="",
    summary="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names; ``plain`` disables styling."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if not candidate:
        return DEFAULT_THEME.name
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    normalized = normalize_theme_name(name)
    return _THEMES.get(normalized, DEFAULT_THEME)


def color_disabled(stream: TextIO, no_color_flag: bool = False) -> bool:
    """Whether output to ``stream`` should be unstyled.

    Color is off when requested explicitly, when ``NO_COLOR`` is set, or when
    the stream is not an interactive terminal.
    """
    if no_color_flag or os.environ.get("NO_COLOR"):
        return True
    isatty = getattr(stream, "isatty", None)
    try:
        return not (isatty is not None and isatty())
    except ValueError:
        return True


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "color_disabled",
]

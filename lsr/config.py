"""Persistent JSON config helpers.

Stores default listing options (hidden files, depth, theme, size alignment).
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lsr"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "LSR_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def config_path() -> Path:
    """Return the config file to read, honoring ``LSR_CONFIG`` when set."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    path = config_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(config: dict[str, object], key: str) -> bool:
    """Only explicit booleans are accepted; anything else reads as ``False``."""
    value = config.get(key)
    return bool(value) if isinstance(value, bool) else False


def load_show_hidden(config: dict[str, object] | None = None) -> bool:
    """Return persisted hidden-file visibility preference."""
    return _load_bool(load_config() if config is None else config, "show_hidden")


def load_align_sizes(config: dict[str, object] | None = None) -> bool:
    """Return whether file sizes should be right-aligned by default."""
    return _load_bool(load_config() if config is None else config, "align_sizes")


def load_depth(config: dict[str, object] | None = None) -> int | None:
    """Load default recursion depth; booleans and non-integers are ignored."""
    value = (load_config() if config is None else config).get("depth")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def load_theme_name(config: dict[str, object] | None = None) -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = (load_config() if config is None else config).get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_PATH",
    "config_path",
    "load_config",
    "load_show_hidden",
    "load_align_sizes",
    "load_depth",
    "load_theme_name",
]

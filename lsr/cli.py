"""Command-line front door for lsr.

Parses CLI options, merges persisted defaults, and resolves the root path.
Then streams the tree for that path to stdout.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .config import load_align_sizes, load_config, load_depth, load_show_hidden, load_theme_name
from .formatting import format_byte_size
from .tree_walk import DepthLimit, TraversalRequest, TreeWalkError, TreeWalker, is_directory
from .ui_theme import UITheme, available_theme_names, color_disabled, resolve_theme

DEFAULT_DEPTH = -1
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _depth_value(value: str) -> int:
    """argparse type for depth values (any integer, negative = unlimited)."""
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc


def _default_render_width() -> int:
    """Resolve the right-alignment column from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def configure_logging(verbose: bool) -> None:
    """Send ``lsr`` log records to stderr, keeping stdout for the tree."""
    package_logger = logging.getLogger("lsr")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in package_logger.handlers:
        if getattr(handler, "_lsr_cli_handler", False):
            return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._lsr_cli_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lsr",
        description="List a directory recursively as a tree with file sizes.",
    )
    parser.add_argument("location", nargs="?", default=".", help="Path to directory. Defaults to current directory.")
    parser.add_argument(
        "-d",
        "--depth",
        type=_depth_value,
        default=None,
        help="Recursive depth for listing of sub directories. Negative value for no limit.",
    )
    parser.add_argument(
        "-a",
        "--all",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show hidden files (--no-all hides them even when the config enables them).",
    )
    parser.add_argument(
        "--align-sizes",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Right-align file sizes to the terminal width.",
    )
    parser.add_argument("-s", "--summary", action="store_true", help="Print the total size of listed files.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries and contained errors to stderr.")
    return parser


def print_summary(total_bytes: int, theme: UITheme) -> None:
    sys.stdout.write(theme.paint(theme.summary, f"total {format_byte_size(total_bytes)}") + "\n")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and list the requested directory.

    Flags override values from the config file. A root that is not a
    directory, or a failure of the top-level listing, exits with status 1
    after printing one line to stderr.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    config = load_config()
    depth_value = args.depth
    if depth_value is None:
        configured_depth = load_depth(config)
        depth_value = DEFAULT_DEPTH if configured_depth is None else configured_depth
    show_hidden = args.all if args.all is not None else load_show_hidden(config)
    align_sizes = args.align_sizes if args.align_sizes is not None else load_align_sizes(config)
    theme_name = args.theme if args.theme is not None else load_theme_name(config)
    theme = resolve_theme(theme_name, no_color=color_disabled(sys.stdout, args.no_color))

    path = Path(args.location)
    if not is_directory(path):
        raise SystemExit(f"{path} is not a directory")

    request = TraversalRequest(
        path=path,
        depth=DepthLimit.from_cli(depth_value),
        show_hidden=show_hidden,
    )
    walker = TreeWalker(sys.stdout, theme, size_column=_default_render_width() if align_sizes else None)
    logger.debug("listing %s with depth=%s show_hidden=%s", path, depth_value, show_hidden)
    try:
        total_bytes = walker.walk(request)
    except TreeWalkError as exc:
        raise SystemExit(str(exc)) from exc

    if args.summary:
        print_summary(total_bytes, theme)


if __name__ == "__main__":
    main()

"""Public package surface for lsr.

Exports ``main`` for programmatic CLI invocation.
Traversal and rendering live in ``lsr.tree_walk`` and ``lsr.formatting``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]

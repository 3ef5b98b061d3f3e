"""Module entrypoint for ``python -m lsr``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and traversal setup happen in ``lsr.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

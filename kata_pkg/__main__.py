"""Main entry point for running kata_pkg as a module.

This allows running Kata with:
    python -m kata_pkg --health-check
    python -m kata_pkg zigzag 4

This is equivalent to running:
    python -m kata_pkg.cli
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())

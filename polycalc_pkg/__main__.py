"""Main entry point for running polycalc_pkg as a module.

This allows running Polycalc with:
    python -m polycalc_pkg show "3x^2 + 2x"
    python -m polycalc_pkg div "x^2 - 1" "x - 1"
    python -m polycalc_pkg --health-check

This is equivalent to running:
    python -m polycalc_pkg.cli
    python polycalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())

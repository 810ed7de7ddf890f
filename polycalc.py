#!/usr/bin/env python3
"""
Polycalc - Polynomial Calculator

Thin wrapper that delegates all functionality to the polycalc_pkg package.

Usage:
    python polycalc.py show "3x^2 + 2x"          # Canonical form
    python polycalc.py mul "3x^2+2x" "4x+1"      # Product
    python polycalc.py eval "3x^2+2x" --at 2     # Evaluate
    python polycalc.py --help                    # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Polycalc.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from polycalc_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())

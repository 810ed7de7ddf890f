"""Textual rendering of polynomials.

The canonical form written by ``format_polynomial`` is accepted back by
``parser.parse_polynomial``, so ``parse_polynomial(format_polynomial(p)) == p``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import config

if TYPE_CHECKING:
    from .polynomial import Polynomial


def superscriptify(input_str: str) -> str:
    """Convert a digit string to Unicode superscript characters (e.g. "12" -> "¹²")."""
    mapping = {
        "0": "⁰",
        "1": "¹",
        "2": "²",
        "3": "³",
        "4": "⁴",
        "5": "⁵",
        "6": "⁶",
        "7": "⁷",
        "8": "⁸",
        "9": "⁹",
    }
    return "".join(mapping.get(char, char) for char in input_str)


def format_number(val: float, precision: int | None = None) -> str:
    """Format a coefficient.

    Args:
        val: Coefficient value
        precision: Significant digits; None keeps the shortest text that
            round-trips to the same float

    Returns:
        Formatted string, without a decimal point for integral values
    """
    if precision is not None:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    val = float(val)
    if val.is_integer() and abs(val) < 1e16:
        return str(int(val))
    return repr(val)


def _render(poly: Polynomial, precision: int | None, unicode: bool) -> str:
    if poly.is_zero():
        return "0"
    parts = []
    for index, term in enumerate(poly.terms):
        coefficient = format_number(term.coefficient, precision)
        if index > 0 and not coefficient.startswith("-"):
            parts.append("+")
        parts.append(coefficient)
        if term.exponent == 1:
            parts.append("x")
        elif term.exponent >= 2:
            exponent = str(term.exponent)
            parts.append("x" + superscriptify(exponent) if unicode else "x^" + exponent)
    return "".join(parts)


def format_polynomial(poly: Polynomial, precision: int | None = None) -> str:
    """Render a polynomial as ``3x^2+2x-1``; the zero polynomial is ``0``.

    ``precision`` defaults to ``config.OUTPUT_PRECISION``.
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    return _render(poly, precision, unicode=False)


def format_unicode(poly: Polynomial, precision: int | None = None) -> str:
    """Render with superscript exponents, e.g. ``3x²+2x``."""
    if precision is None:
        precision = config.OUTPUT_PRECISION
    return _render(poly, precision, unicode=True)

"""Conversion between ``Polynomial`` and SymPy expressions."""

from __future__ import annotations

import sympy as sp
from sympy.polys.polyerrors import PolynomialError

from .polynomial import Polynomial
from .types import ValidationError

X = sp.Symbol("x")


def to_sympy(poly: Polynomial, symbol: sp.Symbol = X) -> sp.Expr:
    """Build a SymPy expression with Float coefficients.

    Args:
        poly: Polynomial to convert
        symbol: Symbol used for the variable (default: x)

    Returns:
        SymPy expression (``0`` for the zero polynomial)
    """
    return sp.Add(
        *(sp.Float(term.coefficient) * symbol**term.exponent for term in poly.terms)
    )


def from_sympy(expr: sp.Expr | str, symbol: sp.Symbol = X) -> Polynomial:
    """Convert a univariate SymPy polynomial with real numeric coefficients.

    Args:
        expr: SymPy expression (or a string SymPy can sympify)
        symbol: The polynomial variable (default: x)

    Returns:
        Canonical Polynomial

    Raises:
        ValidationError: If the expression is not a polynomial in ``symbol``
            with real numeric coefficients
    """
    try:
        expr = sp.sympify(expr)
        free = expr.free_symbols - {symbol}
        if free:
            names = ", ".join(sorted(str(s) for s in free))
            raise ValidationError(
                f"Expression has variables other than {symbol}: {names}",
                code="NOT_A_POLYNOMIAL",
            )
        sp_poly = sp.Poly(sp.expand(expr), symbol)
    except (sp.SympifyError, PolynomialError) as e:
        raise ValidationError(
            f"Not a polynomial in {symbol}: {e}", code="NOT_A_POLYNOMIAL"
        ) from e

    result = Polynomial()
    for (exponent,), coeff in sp_poly.terms():
        if not coeff.is_real:
            raise ValidationError(
                f"Coefficient {coeff} is not a real number", code="NOT_A_POLYNOMIAL"
            )
        result.insert_term(float(coeff), int(exponent))
    return result


def to_latex(poly: Polynomial) -> str:
    """Render a polynomial as LaTeX via SymPy."""
    return sp.latex(to_sympy(poly))

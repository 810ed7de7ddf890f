"""Tests for SymPy conversion, and cross-checks of arithmetic against SymPy."""

import pytest
import sympy as sp

from polycalc_pkg.parser import parse_polynomial
from polycalc_pkg.polynomial import Polynomial
from polycalc_pkg.sympy_bridge import X, from_sympy, to_latex, to_sympy
from polycalc_pkg.types import ValidationError


def _pairs(poly):
    return [(term.coefficient, term.exponent) for term in poly.terms]


def _coeffs(expr):
    return [float(c) for c in sp.Poly(expr, X).all_coeffs()]


class TestToSympy:
    """Test conversion to SymPy expressions."""

    def test_sample(self):
        expr = to_sympy(parse_polynomial("3x^2 + 2x"))
        assert _coeffs(expr) == [3.0, 2.0, 0.0]

    def test_zero(self):
        assert to_sympy(Polynomial.zero()) == 0

    def test_latex(self):
        latex = to_latex(parse_polynomial("3x^2 + 2x"))
        assert "x^{2}" in latex


class TestFromSympy:
    """Test conversion from SymPy expressions."""

    def test_expression(self):
        poly = from_sympy(X**3 - 2 * X + 1)
        assert _pairs(poly) == [(1.0, 3), (-2.0, 1), (1.0, 0)]

    def test_string_is_expanded(self):
        assert _pairs(from_sympy("(x + 1)**2")) == [(1.0, 2), (2.0, 1), (1.0, 0)]

    def test_rational_coefficients(self):
        assert _pairs(from_sympy(sp.Rational(1, 4) * X)) == [(0.25, 1)]

    def test_constant_and_zero(self):
        assert _pairs(from_sympy(sp.Integer(5))) == [(5.0, 0)]
        assert from_sympy(sp.Integer(0)).is_zero()

    @pytest.mark.parametrize("expr", ["x*y", "sin(x)", "1/x"])
    def test_not_a_polynomial(self, expr):
        with pytest.raises(ValidationError) as exc_info:
            from_sympy(expr)
        assert exc_info.value.code == "NOT_A_POLYNOMIAL"

    def test_complex_coefficient_rejected(self):
        with pytest.raises(ValidationError):
            from_sympy(sp.I * X)

    def test_round_trip(self):
        poly = parse_polynomial("-0.5x^4 + 3x - 7")
        assert from_sympy(to_sympy(poly)) == poly


@pytest.mark.parametrize(
    "dividend, divisor, sympy_dividend, sympy_divisor",
    [
        ("3x^2+2x", "4x+1", "3*x**2+2*x", "4*x+1"),
        ("x^5-3x^2+x-9", "2x^2+1", "x**5-3*x**2+x-9", "2*x**2+1"),
        ("x^3", "x-1", "x**3", "x-1"),
        ("6x^4+5x^3-7", "3", "6*x**4+5*x**3-7", "3"),
    ],
)
def test_division_matches_sympy(dividend, divisor, sympy_dividend, sympy_divisor):
    quotient, remainder = parse_polynomial(dividend).divide(parse_polynomial(divisor))
    sp_quotient, sp_remainder = sp.div(
        sp.sympify(sympy_dividend), sp.sympify(sympy_divisor), X
    )
    assert quotient.almost_equal(from_sympy(sp_quotient), 1e-12)
    assert remainder.almost_equal(from_sympy(sp_remainder), 1e-12)


def test_product_matches_sympy():
    a = parse_polynomial("2x^3 - x + 4")
    b = parse_polynomial("x^2 + 3x - 1")
    expected = from_sympy(sp.expand((2 * X**3 - X + 4) * (X**2 + 3 * X - 1)))
    assert a * b == expected

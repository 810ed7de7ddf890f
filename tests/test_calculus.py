"""Unit tests for derivative and integral operations."""

import unittest

from polycalc_pkg.parser import parse_polynomial
from polycalc_pkg.polynomial import Polynomial
from polycalc_pkg.types import ValidationError


def _pairs(poly):
    return [(term.coefficient, term.exponent) for term in poly.terms]


class TestDerivative(unittest.TestCase):
    """Test differentiation."""

    def test_basic_derivative(self):
        self.assertEqual(str(parse_polynomial("3x^2+2x").derivative()), "6x+2")

    def test_constant_term_dropped(self):
        self.assertEqual(_pairs(parse_polynomial("4x+1").derivative()), [(4.0, 0)])

    def test_constant_derivative_is_zero(self):
        self.assertTrue(Polynomial.constant(5.0).derivative().is_zero())

    def test_zero_derivative_is_zero(self):
        self.assertTrue(Polynomial.zero().derivative().is_zero())

    def test_higher_order(self):
        p = parse_polynomial("x^4+x^2")
        self.assertEqual(_pairs(p.derivative(2)), [(12.0, 2), (2.0, 0)])
        self.assertEqual(_pairs(p.derivative(4)), [(24.0, 0)])
        self.assertTrue(p.derivative(5).is_zero())

    def test_order_zero_returns_copy(self):
        p = parse_polynomial("x^2")
        copy = p.derivative(0)
        self.assertEqual(copy, p)
        self.assertIsNot(copy, p)

    def test_invalid_order(self):
        with self.assertRaises(ValidationError) as ctx:
            parse_polynomial("x").derivative(-1)
        self.assertEqual(ctx.exception.code, "INVALID_ORDER")


class TestIntegration(unittest.TestCase):
    """Test indefinite and definite integration."""

    def test_basic_integration(self):
        self.assertEqual(str(parse_polynomial("4x+1").integrate()), "2x^2+1x")

    def test_integration_of_sample(self):
        self.assertEqual(
            _pairs(parse_polynomial("3x^2+2x").integrate()), [(1.0, 3), (1.0, 2)]
        )

    def test_no_constant_of_integration(self):
        integral = parse_polynomial("6x^2").integrate()
        self.assertEqual(integral.coefficient(0), 0.0)
        self.assertEqual(len(integral), 1)

    def test_zero_integral_is_zero(self):
        self.assertTrue(Polynomial.zero().integrate().is_zero())

    def test_derivative_inverts_integral(self):
        p = parse_polynomial("7x^6 - 3.3x^3 + x + 0.25")
        self.assertEqual(p.integrate().derivative(), p)

    def test_definite_integral(self):
        p = parse_polynomial("3x^2")
        self.assertAlmostEqual(p.definite_integral(0.0, 2.0), 8.0)
        self.assertAlmostEqual(p.definite_integral(2.0, 0.0), -8.0)
        self.assertEqual(Polynomial.zero().definite_integral(-1.0, 1.0), 0.0)


if __name__ == "__main__":
    unittest.main()

"""Randomized property tests for canonical form, arithmetic and division."""

import random
import string
import unittest

from polycalc_pkg.formatter import format_polynomial
from polycalc_pkg.parser import parse_polynomial
from polycalc_pkg.polynomial import Polynomial
from polycalc_pkg.types import ParseError

ITERATIONS = 200


def random_int_polynomial(rng, max_degree=6):
    """Integer coefficients keep every test below exact in float arithmetic."""
    poly = Polynomial()
    for _ in range(rng.randint(0, max_degree + 1)):
        poly.insert_term(rng.randint(-9, 9), rng.randint(0, max_degree))
    return poly


def random_divisor(rng, max_degree=3):
    # Power-of-two leading coefficients keep quotients exactly representable
    degree = rng.randint(0, max_degree)
    poly = Polynomial([(rng.choice([1, -1, 2, -2, 4]), degree)])
    for exponent in range(degree):
        poly.insert_term(rng.randint(-5, 5), exponent)
    return poly


class TestCanonicalForm(unittest.TestCase):
    """Random insertions always leave a canonical term list."""

    def test_random_insertions(self):
        rng = random.Random(1234)
        for _ in range(ITERATIONS):
            poly = Polynomial()
            for _ in range(rng.randint(0, 20)):
                coefficient = rng.choice(
                    [rng.uniform(-5, 5), rng.randint(-3, 3), rng.uniform(-1e-9, 1e-9)]
                )
                poly.insert_term(coefficient, rng.randint(0, 8))
            exponents = [term.exponent for term in poly.terms]
            self.assertEqual(exponents, sorted(set(exponents), reverse=True))
            for term in poly.terms:
                self.assertGreaterEqual(abs(term.coefficient), 1e-9)


class TestArithmeticProperties(unittest.TestCase):
    """Identity, inverse and commutativity properties."""

    def setUp(self):
        self.rng = random.Random(42)

    def test_additive_identity_and_inverse(self):
        for _ in range(ITERATIONS):
            p = random_int_polynomial(self.rng)
            self.assertEqual(p.add(Polynomial.zero()), p)
            self.assertTrue(p.subtract(p).is_zero())

    def test_commutativity(self):
        for _ in range(ITERATIONS):
            a = random_int_polynomial(self.rng)
            b = random_int_polynomial(self.rng)
            self.assertEqual(a.add(b), b.add(a))
            self.assertEqual(a.multiply(b), b.multiply(a))

    def test_evaluation_is_a_homomorphism(self):
        for _ in range(ITERATIONS):
            a = random_int_polynomial(self.rng)
            b = random_int_polynomial(self.rng)
            x = self.rng.randint(-3, 3)
            self.assertEqual((a + b).evaluate(x), a.evaluate(x) + b.evaluate(x))
            self.assertEqual((a * b).evaluate(x), a.evaluate(x) * b.evaluate(x))

    def test_derivative_of_integral(self):
        for _ in range(ITERATIONS):
            p = random_int_polynomial(self.rng)
            self.assertEqual(p.integrate().derivative(), p)


class TestDivisionProperties(unittest.TestCase):
    """quotient * divisor + remainder reconstructs the dividend."""

    def test_division_correctness(self):
        rng = random.Random(7)
        for _ in range(ITERATIONS):
            a = random_int_polynomial(rng)
            b = random_divisor(rng)
            quotient, remainder = a.divide(b)
            self.assertEqual(quotient.multiply(b).add(remainder), a)
            self.assertTrue(remainder.is_zero() or remainder.degree < b.degree)


class TestParserFuzzing(unittest.TestCase):
    """Fuzz test parser with random inputs."""

    def test_round_trip(self):
        rng = random.Random(99)
        for _ in range(ITERATIONS):
            poly = Polynomial()
            for _ in range(rng.randint(0, 6)):
                poly.insert_term(rng.uniform(-1000, 1000), rng.randint(0, 12))
            text = format_polynomial(poly, precision=None)
            self.assertEqual(parse_polynomial(text, strict=True), poly, text)

    def test_random_strings(self):
        """Lenient parsing never fails on garbage; strict parsing only raises ParseError."""
        rng = random.Random(2024)
        alphabet = string.ascii_letters + string.digits + "+-^.*/() "
        for _ in range(ITERATIONS):
            text = "".join(rng.choices(alphabet, k=rng.randint(1, 40)))
            try:
                parse_polynomial(text, strict=False)
            except ParseError as e:
                self.assertEqual(e.code, "INVALID_NUMBER")
            try:
                parse_polynomial(text, strict=True)
            except ParseError:
                pass


if __name__ == "__main__":
    unittest.main()

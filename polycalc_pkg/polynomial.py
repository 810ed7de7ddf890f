"""Single-variable polynomials with real coefficients.

A ``Polynomial`` keeps its terms in canonical form:
- exponents strictly decreasing, no duplicates
- no coefficient with magnitude below ``config.EPSILON``
- the empty term list is the zero polynomial

All mutation goes through ``insert_term`` (validated) or ``_accumulate``, which
enforce these rules. Binary operations read both operands and return a new instance.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator

from . import config
from .formatter import format_polynomial
from .logging_config import get_logger
from .term import Term
from .types import CoefficientOverflowError, DivisionByZeroError, ValidationError

logger = get_logger("polynomial")


def _power(x: float, exponent: int) -> float:
    """x ** exponent with IEEE overflow to +/-inf instead of OverflowError."""
    try:
        return x**exponent
    except OverflowError:
        negative = x < 0 and exponent % 2 == 1
        return -math.inf if negative else math.inf


class Polynomial:
    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable[tuple[float, int]] = ()):
        self._terms: list[Term] = []
        for coefficient, exponent in terms:
            self.insert_term(coefficient, exponent)

    @classmethod
    def zero(cls) -> Polynomial:
        return cls()

    @classmethod
    def constant(cls, value: float) -> Polynomial:
        return cls([(value, 0)])

    @classmethod
    def monomial(cls, coefficient: float, exponent: int) -> Polynomial:
        return cls([(coefficient, exponent)])

    # ------------------------------------------------------------------
    # Canonical insertion
    # ------------------------------------------------------------------

    def insert_term(self, coefficient: float, exponent: int) -> None:
        """Add ``coefficient * x^exponent`` in place, keeping canonical form.

        Args:
            coefficient: Finite real coefficient
            exponent: Non-negative integer exponent

        Raises:
            ValidationError: If the exponent is not a non-negative int or the
                coefficient is not a finite real number
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int) or exponent < 0:
            raise ValidationError(
                f"Exponent must be a non-negative integer, got {exponent!r}",
                code="INVALID_EXPONENT",
            )
        if isinstance(coefficient, bool) or not isinstance(coefficient, Real):
            raise ValidationError(
                f"Coefficient must be a real number, got {coefficient!r}",
                code="INVALID_COEFFICIENT",
            )
        coefficient = float(coefficient)
        if not math.isfinite(coefficient):
            raise ValidationError(
                f"Coefficient must be finite, got {coefficient!r}",
                code="INVALID_COEFFICIENT",
            )
        self._accumulate(coefficient, exponent)

    def _accumulate(self, coefficient: float, exponent: int) -> None:
        if abs(coefficient) < config.EPSILON:
            return
        self._check_finite(coefficient, exponent)

        terms = self._terms
        # Fast path: results built in descending order only ever append
        if not terms or terms[-1].exponent > exponent:
            terms.append(Term(coefficient, exponent))
            return

        index = 0
        while index < len(terms) and terms[index].exponent > exponent:
            index += 1
        if terms[index].exponent == exponent:
            merged = terms[index].coefficient + coefficient
            if abs(merged) < config.EPSILON:
                del terms[index]
            else:
                self._check_finite(merged, exponent)
                terms[index] = Term(merged, exponent)
        else:
            terms.insert(index, Term(coefficient, exponent))

    @staticmethod
    def _check_finite(coefficient: float, exponent: int) -> None:
        # NaN also fails the EPSILON test above, so both inf and nan land here
        if not math.isfinite(coefficient):
            raise CoefficientOverflowError(
                f"Coefficient of x^{exponent} overflowed to {coefficient!r}"
            )

    def _discard(self, exponent: int) -> None:
        for index, term in enumerate(self._terms):
            if term.exponent == exponent:
                del self._terms[index]
                return
            if term.exponent < exponent:
                return

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def terms(self) -> tuple[Term, ...]:
        return tuple(self._terms)

    def is_zero(self) -> bool:
        return not self._terms

    @property
    def leading_term(self) -> Term | None:
        return self._terms[0] if self._terms else None

    @property
    def leading_coefficient(self) -> float:
        return self._terms[0].coefficient if self._terms else 0.0

    @property
    def leading_exponent(self) -> int | None:
        return self._terms[0].exponent if self._terms else None

    @property
    def degree(self) -> int | None:
        """Degree of the polynomial, or None for the zero polynomial."""
        return self.leading_exponent

    def coefficient(self, exponent: int) -> float:
        for term in self._terms:
            if term.exponent == exponent:
                return term.coefficient
            if term.exponent < exponent:
                break
        return 0.0

    def copy(self) -> Polynomial:
        result = Polynomial()
        result._terms = list(self._terms)
        return result

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(tuple(self._terms))

    def __bool__(self) -> bool:
        return bool(self._terms)

    def __repr__(self) -> str:
        pairs = ", ".join(f"({t.coefficient!r}, {t.exponent!r})" for t in self._terms)
        return f"Polynomial([{pairs}])"

    def __str__(self) -> str:
        return format_polynomial(self)

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def almost_equal(self, other: Polynomial, tolerance: float | None = None) -> bool:
        """Compare term lists exponent by exponent, coefficients within tolerance."""
        if tolerance is None:
            tolerance = config.EPSILON
        if len(self._terms) != len(other._terms):
            return False
        for mine, theirs in zip(self._terms, other._terms):
            if mine.exponent != theirs.exponent:
                return False
            if not math.isclose(
                mine.coefficient, theirs.coefficient, rel_tol=tolerance, abs_tol=tolerance
            ):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.almost_equal(other)

    __hash__ = None  # mutable through insert_term

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _merge(self, other: Polynomial, sign: float) -> Polynomial:
        result = Polynomial()
        left, right = self._terms, other._terms
        i = j = 0
        while i < len(left) or j < len(right):
            if j >= len(right) or (i < len(left) and left[i].exponent > right[j].exponent):
                result._accumulate(left[i].coefficient, left[i].exponent)
                i += 1
            elif i >= len(left) or right[j].exponent > left[i].exponent:
                result._accumulate(sign * right[j].coefficient, right[j].exponent)
                j += 1
            else:
                result._accumulate(
                    left[i].coefficient + sign * right[j].coefficient, left[i].exponent
                )
                i += 1
                j += 1
        return result

    def add(self, other: Polynomial) -> Polynomial:
        return self._merge(other, 1.0)

    def subtract(self, other: Polynomial) -> Polynomial:
        return self._merge(other, -1.0)

    def multiply(self, other: Polynomial) -> Polynomial:
        result = Polynomial()
        for a in self._terms:
            for b in other._terms:
                result._accumulate(a.coefficient * b.coefficient, a.exponent + b.exponent)
        return result

    def scale(self, factor: float) -> Polynomial:
        result = Polynomial()
        for term in self._terms:
            result._accumulate(*term.scaled(factor))
        return result

    def negate(self) -> Polynomial:
        result = Polynomial()
        for term in self._terms:
            result._accumulate(*term.negated())
        return result

    @staticmethod
    def _coerce(value: object) -> Polynomial | None:
        if isinstance(value, Polynomial):
            return value
        if isinstance(value, Real) and not isinstance(value, bool):
            return Polynomial.constant(value)
        return None

    def __add__(self, other: object) -> Polynomial:
        other_poly = self._coerce(other)
        if other_poly is None:
            return NotImplemented
        return self.add(other_poly)

    __radd__ = __add__

    def __sub__(self, other: object) -> Polynomial:
        other_poly = self._coerce(other)
        if other_poly is None:
            return NotImplemented
        return self.subtract(other_poly)

    def __rsub__(self, other: object) -> Polynomial:
        other_poly = self._coerce(other)
        if other_poly is None:
            return NotImplemented
        return other_poly.subtract(self)

    def __mul__(self, other: object) -> Polynomial:
        if isinstance(other, Polynomial):
            return self.multiply(other)
        if isinstance(other, Real) and not isinstance(other, bool):
            return self.scale(float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Polynomial:
        return self.negate()

    def __pos__(self) -> Polynomial:
        return self.copy()

    # ------------------------------------------------------------------
    # Calculus
    # ------------------------------------------------------------------

    def derivative(self, order: int = 1) -> Polynomial:
        """Differentiate ``order`` times (order 0 returns a copy)."""
        if isinstance(order, bool) or not isinstance(order, int) or order < 0:
            raise ValidationError(
                f"Derivative order must be a non-negative integer, got {order!r}",
                code="INVALID_ORDER",
            )
        result = self.copy()
        for _ in range(order):
            step = Polynomial()
            for term in result._terms:
                if not term.is_constant():
                    step._accumulate(term.coefficient * term.exponent, term.exponent - 1)
            result = step
        return result

    def integrate(self) -> Polynomial:
        """Antiderivative with no constant of integration."""
        result = Polynomial()
        for term in self._terms:
            result._accumulate(term.coefficient / (term.exponent + 1), term.exponent + 1)
        return result

    def definite_integral(self, lower: float, upper: float) -> float:
        antiderivative = self.integrate()
        return antiderivative.evaluate(upper) - antiderivative.evaluate(lower)

    # ------------------------------------------------------------------
    # Division
    # ------------------------------------------------------------------

    def divide(self, divisor: Polynomial) -> tuple[Polynomial, Polynomial]:
        """Polynomial long division.

        Args:
            divisor: Non-zero polynomial

        Returns:
            (quotient, remainder) with ``quotient * divisor + remainder == self``
            and the remainder either zero or of lower degree than the divisor.
            When the next quotient coefficient would fall below
            ``config.EPSILON`` the division stops there and the remainder
            keeps that leading term.

        Raises:
            DivisionByZeroError: If the divisor is the zero polynomial
            CoefficientOverflowError: If a quotient coefficient overflows
        """
        if divisor.is_zero():
            raise DivisionByZeroError()

        quotient = Polynomial()
        remainder = self.copy()
        lead = divisor._terms[0]
        steps = 0
        while remainder._terms and remainder._terms[0].exponent >= lead.exponent:
            head = remainder._terms[0]
            factor = Polynomial()
            factor._accumulate(
                head.coefficient / lead.coefficient, head.exponent - lead.exponent
            )
            if factor.is_zero():
                # Quotient term below EPSILON: head cannot be eliminated, keep it
                logger.debug(
                    "Stopped division at x^%d: quotient term %r below tolerance",
                    head.exponent,
                    head.coefficient / lead.coefficient,
                )
                break
            quotient = quotient.add(factor)
            remainder = remainder.subtract(factor.multiply(divisor))
            # The leading term cancels exactly in real arithmetic; drop any rounding residue
            remainder._discard(head.exponent)
            steps += 1

        logger.debug(
            "Divided degree %s by degree %s in %d steps",
            self.degree,
            divisor.degree,
            steps,
        )
        return quotient, remainder

    def __divmod__(self, other: object) -> tuple[Polynomial, Polynomial]:
        other_poly = self._coerce(other)
        if other_poly is None:
            return NotImplemented
        return self.divide(other_poly)

    def __floordiv__(self, other: object) -> Polynomial:
        other_poly = self._coerce(other)
        if other_poly is None:
            return NotImplemented
        return self.divide(other_poly)[0]

    def __mod__(self, other: object) -> Polynomial:
        other_poly = self._coerce(other)
        if other_poly is None:
            return NotImplemented
        return self.divide(other_poly)[1]

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, x: float) -> float:
        x = float(x)
        total = 0.0
        for term in self._terms:
            total += term.coefficient * _power(x, term.exponent)
        return total

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

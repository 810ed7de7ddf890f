"""Public API for Polycalc - takes polynomial text, returns structured results.

Known failures (``ValidationError``, ``ParseError``, ``DivisionByZeroError``)
are reported through the result's ``ok``/``error``/``error_code`` fields
instead of being raised.
"""

from __future__ import annotations

from .formatter import format_polynomial
from .parser import parse_polynomial
from .polynomial import Polynomial
from .types import (
    CoefficientOverflowError,
    DivisionByZeroError,
    DivisionResult,
    ParseError,
    PolynomialResult,
    ValidationError,
    ValueResult,
)

_KNOWN_ERRORS = (
    ValidationError,
    ParseError,
    DivisionByZeroError,
    CoefficientOverflowError,
)


def _to_float(value: object, name: str) -> float:
    """Convert a numeric argument, reporting bad input as ValidationError."""
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"{name} must be a number, got {value!r}", code="INVALID_INPUT"
        ) from e


def _poly_result(poly: Polynomial, precision: int | None) -> PolynomialResult:
    return PolynomialResult(
        ok=True,
        result=format_polynomial(poly, precision),
        terms=[(term.coefficient, term.exponent) for term in poly.terms],
    )


def _poly_error(e: Exception) -> PolynomialResult:
    return PolynomialResult(ok=False, error=str(e), error_code=e.code)


def parse(
    expression: str,
    strict: bool | None = None,
    precision: int | None = None,
) -> PolynomialResult:
    """Parse and canonicalize a polynomial.

    Example:
        >>> from polycalc_pkg.api import parse
        >>> parse("2x + 3x^2").result
        '3x^2+2x'
    """
    try:
        return _poly_result(parse_polynomial(expression, strict=strict), precision)
    except _KNOWN_ERRORS as e:
        return _poly_error(e)


def add(
    left: str,
    right: str,
    strict: bool | None = None,
    precision: int | None = None,
) -> PolynomialResult:
    """Add two polynomials.

    Example:
        >>> from polycalc_pkg.api import add
        >>> add("3x^2+2x", "4x+1").result
        '3x^2+6x+1'
    """
    try:
        a = parse_polynomial(left, strict=strict)
        b = parse_polynomial(right, strict=strict)
        return _poly_result(a.add(b), precision)
    except _KNOWN_ERRORS as e:
        return _poly_error(e)


def subtract(
    left: str,
    right: str,
    strict: bool | None = None,
    precision: int | None = None,
) -> PolynomialResult:
    """Subtract the second polynomial from the first."""
    try:
        a = parse_polynomial(left, strict=strict)
        b = parse_polynomial(right, strict=strict)
        return _poly_result(a.subtract(b), precision)
    except _KNOWN_ERRORS as e:
        return _poly_error(e)


def multiply(
    left: str,
    right: str,
    strict: bool | None = None,
    precision: int | None = None,
) -> PolynomialResult:
    """Multiply two polynomials.

    Example:
        >>> from polycalc_pkg.api import multiply
        >>> multiply("3x^2+2x", "4x+1").result
        '12x^3+11x^2+2x'
    """
    try:
        a = parse_polynomial(left, strict=strict)
        b = parse_polynomial(right, strict=strict)
        return _poly_result(a.multiply(b), precision)
    except _KNOWN_ERRORS as e:
        return _poly_error(e)


def divide(
    dividend: str,
    divisor: str,
    strict: bool | None = None,
    precision: int | None = None,
) -> DivisionResult:
    """Long-divide two polynomials.

    Returns:
        DivisionResult with quotient and remainder, or an error with code
        ``DIVISION_BY_ZERO`` when the divisor is zero

    Example:
        >>> from polycalc_pkg.api import divide
        >>> result = divide("x^2-1", "x-1")
        >>> result.quotient, result.remainder
        ('1x+1', '0')
    """
    try:
        a = parse_polynomial(dividend, strict=strict)
        b = parse_polynomial(divisor, strict=strict)
        quotient, remainder = a.divide(b)
    except _KNOWN_ERRORS as e:
        return DivisionResult(ok=False, error=str(e), error_code=e.code)
    return DivisionResult(
        ok=True,
        quotient=format_polynomial(quotient, precision),
        remainder=format_polynomial(remainder, precision),
    )


def diff(
    expression: str,
    order: int = 1,
    strict: bool | None = None,
    precision: int | None = None,
) -> PolynomialResult:
    """Differentiate a polynomial ``order`` times.

    Example:
        >>> from polycalc_pkg.api import diff
        >>> diff("3x^2+2x").result
        '6x+2'
    """
    try:
        poly = parse_polynomial(expression, strict=strict)
        return _poly_result(poly.derivative(order), precision)
    except _KNOWN_ERRORS as e:
        return _poly_error(e)


def integrate_expr(
    expression: str,
    strict: bool | None = None,
    precision: int | None = None,
) -> PolynomialResult:
    """Indefinite integral without a constant of integration.

    Example:
        >>> from polycalc_pkg.api import integrate_expr
        >>> integrate_expr("4x+1").result
        '2x^2+1x'
    """
    try:
        poly = parse_polynomial(expression, strict=strict)
        return _poly_result(poly.integrate(), precision)
    except _KNOWN_ERRORS as e:
        return _poly_error(e)


def definite_integral(
    expression: str,
    lower: float,
    upper: float,
    strict: bool | None = None,
) -> ValueResult:
    """Integral of the polynomial over [lower, upper]."""
    try:
        lower = _to_float(lower, "lower")
        upper = _to_float(upper, "upper")
        poly = parse_polynomial(expression, strict=strict)
        value = poly.definite_integral(lower, upper)
    except _KNOWN_ERRORS as e:
        return ValueResult(ok=False, error=str(e), error_code=e.code)
    return ValueResult(ok=True, value=value)


def evaluate(
    expression: str,
    x: float,
    strict: bool | None = None,
) -> ValueResult:
    """Evaluate a polynomial at ``x``.

    Example:
        >>> from polycalc_pkg.api import evaluate
        >>> evaluate("3x^2+2x", 2.0).value
        16.0
    """
    try:
        x = _to_float(x, "x")
        poly = parse_polynomial(expression, strict=strict)
    except _KNOWN_ERRORS as e:
        return ValueResult(ok=False, error=str(e), error_code=e.code)
    return ValueResult(ok=True, value=poly.evaluate(x))


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check that an expression parses in strict mode, without returning it.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from polycalc_pkg.api import validate_expression
        >>> validate_expression("3x^2 + 1")
        (True, None)
        >>> validate_expression("3y")
        (False, "Unexpected 'y' at position 1 in '3y'")
    """
    try:
        parse_polynomial(expression, strict=True)
        return True, None
    except (ValidationError, ParseError) as e:
        return False, str(e)

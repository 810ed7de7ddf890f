"""Polynomial text parsing.

Grammar: a concatenation of signed terms ``[sign][coefficient][x[^exponent]]``
in the single variable ``x``. Whitespace is ignored. Shorthand:
- ``x`` is ``1x^1``, ``-x`` is ``-1x^1``
- a number without ``x`` is a constant (exponent 0)
- superscript exponents (``x²``) are read as ``x^2``

There is no ``*``, no parentheses and no other variable; ``a - b`` is simply
the term ``a`` followed by the negative term ``-b``.

In lenient mode (the default) unrecognised fragments are skipped with a
warning. In strict mode the first one raises ``ParseError``.
"""

from __future__ import annotations

import math
from typing import Iterator

from . import config
from .logging_config import get_logger
from .polynomial import Polynomial
from .types import ParseError, ValidationError

logger = get_logger("parser")

_SUPERSCRIPT_DIGITS = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹", "0123456789")


def preprocess(text: str) -> str:
    """Validate length, strip whitespace and normalize superscript exponents.

    Raises:
        ValidationError: If the input is not a string or is too long
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"Expected polynomial text, got {type(text).__name__}", code="INVALID_INPUT"
        )
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)",
            code="TOO_LONG",
        )
    cleaned = config.WHITESPACE_REGEX.sub("", text)
    return config.SUPERSCRIPT_REGEX.sub(
        lambda m: "^" + m.group(0).translate(_SUPERSCRIPT_DIGITS), cleaned
    )


def _coefficient_value(text: str | None) -> float:
    if text is None or text == "+":
        return 1.0
    if text == "-":
        return -1.0
    try:
        value = float(text)
    except ValueError as e:
        raise ParseError(f"Malformed coefficient {text!r}", code="INVALID_NUMBER") from e
    if not math.isfinite(value):
        raise ParseError(f"Coefficient {text!r} is out of range", code="INVALID_NUMBER")
    return value


def _exponent_value(text: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        raise ParseError(
            f"Exponent with {len(text)} digits is too large", code="INVALID_NUMBER"
        ) from e


def iter_terms(cleaned: str, strict: bool = False) -> Iterator[tuple[float, int]]:
    """Yield (coefficient, exponent) pairs from preprocessed text.

    Args:
        cleaned: Output of ``preprocess``
        strict: Raise on the first unrecognised fragment instead of skipping it

    Raises:
        ParseError: For malformed numbers, or unrecognised fragments in strict mode
    """
    skipped: list[tuple[int, str]] = []
    pos = 0
    while pos < len(cleaned):
        match = config.TERM_REGEX.match(cleaned, pos)
        coeff_text = match.group("coeff")
        var = match.group("var")
        # Empty match, or a bare sign not followed by x
        if match.end() == pos or (var is None and coeff_text in ("+", "-")):
            if strict:
                raise ParseError(
                    f"Unexpected {cleaned[pos]!r} at position {pos} in {cleaned!r}",
                    code="UNEXPECTED_TOKEN",
                    position=pos,
                )
            if skipped and skipped[-1][0] + len(skipped[-1][1]) == pos:
                start, fragment = skipped[-1]
                skipped[-1] = (start, fragment + cleaned[pos])
            else:
                skipped.append((pos, cleaned[pos]))
            pos += 1
            continue

        coefficient = _coefficient_value(coeff_text)
        if var is None:
            exponent = 0
        elif match.group("exp") is None:
            exponent = 1
        else:
            exponent = _exponent_value(match.group("exp"))
        yield coefficient, exponent
        pos = match.end()

    for start, fragment in skipped:
        logger.warning("Ignored unrecognised input %r at position %d", fragment, start)


def parse_into(poly: Polynomial, text: str, strict: bool | None = None) -> Polynomial:
    """Parse ``text`` and insert its terms into an existing polynomial.

    Args:
        poly: Polynomial to populate (mutated in place)
        text: Polynomial text, e.g. "3x^2 + 2x - 1"
        strict: Override ``config.STRICT_PARSING``

    Returns:
        The same ``poly`` instance
    """
    if strict is None:
        strict = config.STRICT_PARSING
    cleaned = preprocess(text)
    # Collect first so a strict-mode failure leaves ``poly`` untouched
    pairs = list(iter_terms(cleaned, strict=strict))
    for coefficient, exponent in pairs:
        poly.insert_term(coefficient, exponent)
    logger.debug("Parsed %r into %d terms", text, len(poly))
    return poly


def parse_polynomial(text: str, strict: bool | None = None) -> Polynomial:
    """Parse polynomial text into a new canonical ``Polynomial``.

    Example:
        >>> from polycalc_pkg.parser import parse_polynomial
        >>> parse_polynomial("3x^2 + 2x").terms
        (Term(3.0, 2), Term(2.0, 1))
    """
    return parse_into(Polynomial(), text, strict=strict)

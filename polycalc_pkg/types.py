"""Exceptions and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class PolynomialResult:
    """Result of an operation that produces a single polynomial."""

    ok: bool
    result: str | None = None
    terms: list[tuple[float, int]] | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.terms is not None:
            result_dict["terms"] = [list(term) for term in self.terms]
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"PolynomialResult(ok=False, error={self.error!r})"
        return f"PolynomialResult(ok=True, result={self.result!r})"


@dataclass
class DivisionResult:
    """Result of polynomial long division."""

    ok: bool
    quotient: str | None = None
    remainder: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.quotient is not None:
            result_dict["quotient"] = self.quotient
        if self.remainder is not None:
            result_dict["remainder"] = self.remainder
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"DivisionResult(ok=False, error={self.error!r})"
        return (
            f"DivisionResult(ok=True, quotient={self.quotient!r}, "
            f"remainder={self.remainder!r})"
        )


@dataclass
class ValueResult:
    """Result of a numeric evaluation."""

    ok: bool
    value: float | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = self.value
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"ValueResult(ok=False, error={self.error!r})"
        return f"ValueResult(ok=True, value={self.value!r})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Raised when polynomial text cannot be parsed."""

    def __init__(
        self, message: str, code: str = "PARSE_ERROR", position: int | None = None
    ):
        self.message = message
        self.code = code
        self.position = position
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DivisionByZeroError(ZeroDivisionError):
    """Raised when dividing by the zero polynomial."""

    def __init__(
        self,
        message: str = "Division by the zero polynomial",
        code: str = "DIVISION_BY_ZERO",
    ):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class CoefficientOverflowError(OverflowError):
    """Raised when an arithmetic result has a coefficient outside the float range."""

    def __init__(self, message: str, code: str = "COEFFICIENT_OVERFLOW"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

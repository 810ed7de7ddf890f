"""A single monomial ``coefficient * x^exponent``."""

from __future__ import annotations

import functools
from dataclasses import dataclass


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class Term:
    """Immutable (coefficient, exponent) pair.

    Terms order by exponent, with the coefficient as a tie breaker, so sorting
    a list of terms in reverse gives the canonical polynomial order.
    """

    coefficient: float
    exponent: int

    def __lt__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return (self.exponent, self.coefficient) < (other.exponent, other.coefficient)

    def __iter__(self):
        yield self.coefficient
        yield self.exponent

    def __repr__(self) -> str:
        return f"Term({self.coefficient!r}, {self.exponent!r})"

    def is_constant(self) -> bool:
        return self.exponent == 0

    def negated(self) -> Term:
        return Term(-self.coefficient, self.exponent)

    def scaled(self, factor: float) -> Term:
        return Term(self.coefficient * factor, self.exponent)

"""Exact rational accumulator for Lagrange terms.

An accumulator is an immutable ``numerator / denominator`` pair kept in
lowest terms with a positive denominator; the numerator carries the sign
and zero is always ``0/1``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from secretsolver.crypto.radix import to_text


@dataclass(frozen=True)
class RationalAccumulator:
    numerator: int = 0
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDivisionError("RationalAccumulator denominator is zero")

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> "RationalAccumulator":
        """Build a reduced accumulator from an arbitrary fraction."""
        if denominator == 0:
            raise ZeroDivisionError("RationalAccumulator denominator is zero")
        if numerator == 0:
            return cls(0, 1)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = math.gcd(numerator, denominator)
        return cls(numerator // g, denominator // g)

    def add(self, numerator: int, denominator: int) -> "RationalAccumulator":
        """Return ``self + numerator/denominator``, reduced."""
        return RationalAccumulator.of(
            self.numerator * denominator + numerator * self.denominator,
            self.denominator * denominator,
        )

    @property
    def is_integral(self) -> bool:
        return self.numerator % self.denominator == 0

    def truncate(self) -> int:
        """Quotient rounded toward zero."""
        q = abs(self.numerator) // self.denominator
        return -q if self.numerator < 0 else q

    def __str__(self) -> str:
        if self.denominator == 1:
            return to_text(self.numerator)
        return f"{to_text(self.numerator)}/{to_text(self.denominator)}"

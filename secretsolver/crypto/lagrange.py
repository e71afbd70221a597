"""Lagrange interpolation at x=0 over the rationals.

API
---
interpolate(points, trace=None)  -> Interpolation

For points (x_i, y_i), i = 0..k-1:

    P(0) = sum_i  y_i * prod_{j != i} (-x_j) / (x_i - x_j)

Each term is built as an unreduced fraction, then folded into a
``RationalAccumulator`` that is reduced after every addition so operand
sizes stay bounded.  When the points lie on an integer-coefficient
polynomial of degree < k the sum is an integer; anything else means the
shares are inconsistent and is reported with ``NonIntegerResultWarning``.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from functools import reduce
from typing import List, Optional, Sequence, Tuple

from secretsolver.crypto.radix import to_text
from secretsolver.crypto.rational import RationalAccumulator
from secretsolver.errors import (
    InconsistentSharesError,
    InsufficientSharesError,
    NonIntegerResultWarning,
)
from secretsolver.models import Point
from secretsolver.trace import Trace


@dataclass(frozen=True)
class LagrangeTerm:
    """y_i * L_i(0) as an unreduced fraction."""

    index: int
    x: int
    y: int
    numerator: int
    denominator: int
    factors: Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class Interpolation:
    value: int
    exact: bool
    numerator: int
    denominator: int
    terms: Tuple[LagrangeTerm, ...]


def lagrange_term(points: Sequence[Point], i: int) -> LagrangeTerm:
    """Compute term *i* of the interpolation at x=0."""
    xi, yi = points[i].x, points[i].y
    num = yi
    den = 1
    factors: List[Tuple[int, int]] = []
    for j, pj in enumerate(points):
        if j == i:
            continue
        diff = xi - pj.x
        if diff == 0:
            raise InconsistentSharesError(f"Duplicate x-coordinate {to_text(xi)} among selected points")
        num *= -pj.x          # (0 - x_j)
        den *= diff           # (x_i - x_j)
        factors.append((-pj.x, diff))
    return LagrangeTerm(index=i, x=xi, y=yi, numerator=num, denominator=den, factors=tuple(factors))


def interpolate(points: Sequence[Point], trace: Optional[Trace] = None) -> Interpolation:
    """Evaluate the interpolating polynomial of *points* at x=0."""
    if not points:
        raise InsufficientSharesError("Need at least one point")

    terms = tuple(lagrange_term(points, i) for i in range(len(points)))

    def _step(acc: RationalAccumulator, term: LagrangeTerm) -> RationalAccumulator:
        acc = acc.add(term.numerator, term.denominator)
        if trace is not None:
            trace.append(
                "term",
                {
                    "index": term.index,
                    "x": term.x,
                    "y": term.y,
                    "factors": [list(pair) for pair in term.factors],
                    "numerator": term.numerator,
                    "denominator": term.denominator,
                },
            )
            trace.append(
                "accumulate",
                {"numerator": acc.numerator, "denominator": acc.denominator},
            )
        return acc

    total = reduce(_step, terms, RationalAccumulator())

    if total.is_integral:
        value = total.numerator // total.denominator
        exact = True
    else:
        value = total.truncate()
        exact = False
        warnings.warn(
            NonIntegerResultWarning(
                f"Interpolation result {total} is not an integer; truncated to {to_text(value)}"
            ),
            stacklevel=2,
        )

    if trace is not None:
        trace.append(
            "result",
            {
                "secret": value,
                "exact": exact,
                "numerator": total.numerator,
                "denominator": total.denominator,
            },
        )

    return Interpolation(
        value=value,
        exact=exact,
        numerator=total.numerator,
        denominator=total.denominator,
        terms=terms,
    )

"""Data model for share documents and solve results."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from secretsolver.crypto.radix import to_text
from secretsolver.trace import jsonable


class Share(BaseModel):
    """One raw share as read from the input document."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)  # x-coordinate
    base: int = Field(ge=2)
    value: str = Field(min_length=1)


class Point(BaseModel):
    """A decoded share."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def __str__(self) -> str:
        return f"({to_text(self.x)}, {to_text(self.y)})"


class Problem(BaseModel):
    """Sharing parameters: *n* shares issued, *k* needed."""

    model_config = ConfigDict(frozen=True)

    n: int
    k: int

    @model_validator(mode="after")
    def _check_threshold(self) -> "Problem":
        if self.k < 1 or self.k > self.n:
            raise ValueError(f"Invalid threshold: k={self.k}, n={self.n}")
        return self

    @property
    def degree(self) -> int:
        return self.k - 1


class SolveResult(BaseModel):
    """Outcome of one solve.

    ``exact`` is False when interpolation did not land on an integer; in
    that case ``secret`` is the truncated quotient and is suspect.
    """

    secret: int
    exact: bool
    numerator: int
    denominator: int
    problem: Problem
    points: List[Point]
    trace: List[Dict[str, Any]] = []

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "secret": to_text(self.secret),
            "exact": self.exact,
            "numerator": to_text(self.numerator),
            "denominator": to_text(self.denominator),
            "n": self.problem.n,
            "k": self.problem.k,
            "points": [{"x": to_text(p.x), "y": to_text(p.y)} for p in self.points],
        }
        if self.trace:
            out["trace"] = jsonable(self.trace)
        return out

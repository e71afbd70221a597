"""Solve pipeline: document -> shares -> points -> selection -> P(0).

Each call works on its own values only; ``solve_batch`` runs independent
documents and keeps one failure from aborting the rest.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from pydantic import BaseModel

from secretsolver.crypto import radix
from secretsolver.crypto.lagrange import interpolate
from secretsolver.errors import SecretSolverError
from secretsolver.models import Point, Share, SolveResult
from secretsolver.parser import Document, parse_document
from secretsolver.selection import select_points
from secretsolver.trace import Trace


class BatchOutcome(BaseModel):
    index: int
    ok: bool
    result: Optional[SolveResult] = None
    error: Optional[str] = None
    detail: Optional[str] = None


def decode_share(share: Share, trace: Optional[Trace] = None) -> Point:
    """Decode one share's value into a point."""
    y = radix.decode(share.value, share.base)
    if trace is not None:
        trace.append(
            "base_conversion",
            {"x": share.id, "base": share.base, "value": share.value, "y": y},
        )
    return Point(x=share.id, y=y)


def solve(document: Document, trace: Optional[Trace] = None) -> SolveResult:
    """Recover the secret from a share document.

    Parsing and decoding errors propagate immediately; no partial secret is
    produced.  A non-integral interpolation still returns, with
    ``exact=False`` and a ``NonIntegerResultWarning``.
    """
    if trace is None:
        trace = Trace()

    problem, shares = parse_document(document)
    trace.append("parameters", {"n": problem.n, "k": problem.k, "degree": problem.degree})

    points = [decode_share(s, trace) for s in shares]
    selected = select_points(points, problem.k)
    trace.append(
        "selection",
        {
            "available": len(points),
            "used": len(selected),
            "points": [[p.x, p.y] for p in selected],
        },
    )

    interp = interpolate(selected, trace)
    return SolveResult(
        secret=interp.value,
        exact=interp.exact,
        numerator=interp.numerator,
        denominator=interp.denominator,
        problem=problem,
        points=selected,
        trace=trace.entries(),
    )


def solve_batch(documents: Iterable[Document]) -> List[BatchOutcome]:
    """Solve each document independently, recording failures per item."""
    outcomes: List[BatchOutcome] = []
    for index, document in enumerate(documents):
        try:
            result = solve(document)
        except SecretSolverError as exc:
            outcomes.append(BatchOutcome(index=index, ok=False, error=exc.kind, detail=str(exc)))
        else:
            outcomes.append(BatchOutcome(index=index, ok=True, result=result))
    return outcomes

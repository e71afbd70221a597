"""Solver FastAPI application.

A thin HTTP surface over ``secretsolver.solver``; all computation is the
in-memory core.

Endpoints:
- POST /solve        – body is a share document; ``?trace=true`` adds events
- POST /solve_batch  – ``{"problems": [doc, ...]}``, failures isolated per item
- GET  /health

Integers in responses are strings (secrets exceed 2**53): decimal, or
``0x`` hex when wider than the interpreter's int-to-str limit.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from secretsolver.crypto.radix import to_text
from secretsolver.errors import (
    InconsistentSharesError,
    InsufficientSharesError,
    InvalidDigitError,
    MalformedInputError,
    SecretSolverError,
)
from secretsolver.models import SolveResult
from secretsolver.solver import solve, solve_batch

app = FastAPI(title="secretsolver")

# error kind -> HTTP status
_STATUS = {
    MalformedInputError: 422,
    InvalidDigitError: 422,
    InsufficientSharesError: 422,
    InconsistentSharesError: 409,
}


class SolveBatchRequest(BaseModel):
    problems: List[Dict[str, Any]]


def _status_for(exc: SecretSolverError) -> int:
    for cls, code in _STATUS.items():
        if isinstance(exc, cls):
            return code
    return 400


def _render(result: SolveResult, with_trace: bool) -> Dict[str, Any]:
    body = result.to_dict()
    if not with_trace:
        body.pop("trace", None)
    if not result.exact:
        body["warning"] = (
            f"non-integer result {to_text(result.numerator)}/{to_text(result.denominator)}; "
            "secret is truncated and suspect"
        )
    return body


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/solve")
async def solve_endpoint(request: Request, trace: bool = False):
    """Solve one share document.

    The raw body is handed to the parser so repeated share keys survive.
    """
    raw = await request.body()
    try:
        result = await run_in_threadpool(solve, raw)
    except SecretSolverError as exc:
        raise HTTPException(_status_for(exc), {"error": exc.kind, "detail": str(exc)})
    return _render(result, trace)


@app.post("/solve_batch")
def solve_batch_endpoint(req: SolveBatchRequest):
    results = []
    for outcome in solve_batch(req.problems):
        if outcome.ok:
            item = _render(outcome.result, with_trace=False)
            item.update({"index": outcome.index, "ok": True})
        else:
            item = {
                "index": outcome.index,
                "ok": False,
                "error": outcome.error,
                "detail": outcome.detail,
            }
        results.append(item)
    return {"results": results}

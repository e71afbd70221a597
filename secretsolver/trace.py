"""Structured trace of a solve.

Each step of a solve (parameters read, base conversions, point selection,
interpolation terms, the final fraction) is appended as an event instead of
being printed.  Callers can read the events afterwards, render them as text,
or subscribe a callback to observe them as they happen.

Event data holds plain ints.  They only become text in ``render()`` and in
``jsonable()``, both through ``radix.to_text`` so that integers wider than
the interpreter's str() limit still format.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from secretsolver.crypto.radix import to_text

Listener = Callable[["TraceEvent"], None]


@dataclass(frozen=True)
class TraceEvent:
    timestamp: float
    event: str
    data: Dict[str, Any]


class Trace:
    """Append-only event log for one solve."""

    def __init__(self) -> None:
        self._events: List[TraceEvent] = []
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def append(self, event: str, data: Dict[str, Any]) -> TraceEvent:
        entry = TraceEvent(timestamp=time.time(), event=event, data=data)
        self._events.append(entry)
        for listener in self._listeners:
            listener(entry)
        return entry

    def __len__(self) -> int:
        return len(self._events)

    def events(self, event: str | None = None) -> List[TraceEvent]:
        if event is None:
            return list(self._events)
        return [e for e in self._events if e.event == event]

    def entries(self) -> List[Dict[str, Any]]:
        return [
            {"timestamp": e.timestamp, "event": e.event, "data": e.data}
            for e in self._events
        ]

    def render(self) -> List[str]:
        """Human-readable lines, one or more per event."""
        lines: List[str] = []
        for e in self._events:
            lines.extend(_RENDERERS.get(e.event, _render_generic)(e.data))
        return lines


def jsonable(obj: Any) -> Any:
    """Copy of *obj* with every int (not bool) replaced by its text form.

    Secrets routinely exceed 2**53, so ints travel as strings in JSON.
    """
    if isinstance(obj, bool) or not isinstance(obj, (int, dict, list, tuple)):
        return obj
    if isinstance(obj, int):
        return to_text(obj)
    if isinstance(obj, dict):
        return {k: jsonable(v) for k, v in obj.items()}
    return [jsonable(v) for v in obj]


# ------------------------------------------------------------------
# Renderers
# ------------------------------------------------------------------

def _render_parameters(d: Dict[str, Any]) -> List[str]:
    return [
        f"Total shares (n): {d['n']}",
        f"Required shares (k): {d['k']}",
        f"Polynomial degree: {d['degree']}",
    ]


def _render_conversion(d: Dict[str, Any]) -> List[str]:
    return [f"x={to_text(d['x'])}: base{to_text(d['base'])}(\"{d['value']}\") = {to_text(d['y'])}"]


def _render_selection(d: Dict[str, Any]) -> List[str]:
    lines = []
    if d["available"] > d["used"]:
        lines.append(f"Using first {d['used']} points out of {d['available']} available")
    lines.append("Points: " + ", ".join(f"({to_text(x)}, {to_text(y)})" for x, y in d["points"]))
    return lines


def _render_term(d: Dict[str, Any]) -> List[str]:
    i = d["index"] + 1
    factors = " x ".join(f"({to_text(num)})/({to_text(den)})" for num, den in d["factors"]) or "1"
    return [
        f"L{i}(0) = {factors}",
        f"Term {i}: {to_text(d['y'])} x L{i}(0) = "
        f"{to_text(d['numerator'])}/{to_text(d['denominator'])}",
    ]


def _render_result(d: Dict[str, Any]) -> List[str]:
    if d["exact"]:
        return [f"Secret: {to_text(d['secret'])}"]
    return [
        f"Warning: result is not an integer "
        f"({to_text(d['numerator'])}/{to_text(d['denominator'])})",
        f"Secret (truncated): {to_text(d['secret'])}",
    ]


def _render_generic(d: Dict[str, Any]) -> List[str]:
    return [", ".join(f"{k}={v}" for k, v in jsonable(d).items())]


_RENDERERS: Dict[str, Callable[[Dict[str, Any]], List[str]]] = {
    "parameters": _render_parameters,
    "base_conversion": _render_conversion,
    "selection": _render_selection,
    "term": _render_term,
    "result": _render_result,
}

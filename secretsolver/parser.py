"""Share document parser.

Document layout (JSON, whitespace-insensitive)::

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2",  "value": "111"},
      ...
    }

Every key other than ``keys`` is a share whose key is its decimal
x-coordinate.  ``base`` is a decimal string (plain ints are accepted too)
and ``value`` holds the y digits in that base.

The parser enforces:
- ``keys.n`` and ``keys.k`` present, integral, and ``1 <= k <= n``
- every share has an integral id, a base and a non-empty value
- resource bounds from ``secretsolver.config``

Repeated share keys are kept (not collapsed as ``dict`` would) so that
duplicate x-coordinates reach selection and are reported there.
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Tuple, Union

from pydantic import ValidationError

from secretsolver.config import KEYS_FIELD, MAX_DIGITS, MAX_ID_DIGITS, MAX_THRESHOLD
from secretsolver.errors import MalformedInputError
from secretsolver.models import Problem, Share

Document = Union[str, bytes, Mapping[str, Any]]
Pairs = List[Tuple[str, Any]]


def parse_document(document: Document) -> Tuple[Problem, List[Share]]:
    """Parse *document* into its ``Problem`` and raw ``Share`` list."""
    pairs = _load(document)

    problem: Problem | None = None
    shares: List[Share] = []
    for key, body in pairs:
        if key == KEYS_FIELD:
            problem = _parse_keys(body)
        else:
            shares.append(_parse_share(key, body))

    if problem is None:
        raise MalformedInputError(f"Missing '{KEYS_FIELD}' section")
    return problem, shares


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _load(document: Document) -> Pairs:
    if isinstance(document, (str, bytes)):
        try:
            loaded = json.loads(document, object_pairs_hook=list)
        except ValueError as exc:
            raise MalformedInputError(f"Invalid JSON: {exc}") from exc
    else:
        loaded = document
    pairs = _as_pairs(loaded)
    if pairs is None:
        raise MalformedInputError("Document must be an object")
    return pairs


def _as_pairs(obj: Any) -> Pairs | None:
    """Object as (key, value) pairs; None if *obj* is not an object."""
    if isinstance(obj, Mapping):
        return list(obj.items())
    if isinstance(obj, list) and all(isinstance(p, tuple) and len(p) == 2 for p in obj):
        return obj
    return None


def _get(pairs: Pairs, name: str, where: str) -> Any:
    for key, value in pairs:
        if key == name:
            return value
    raise MalformedInputError(f"{where}: missing '{name}'")


def _clip(text: str, width: int = 24) -> str:
    return text if len(text) <= width else text[:width] + "..."


def _to_int(raw: Any, where: str) -> int:
    """Parse an id-sized integer (n, k, base, share id) under ``MAX_ID_DIGITS``."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        if abs(raw) >= 10 ** MAX_ID_DIGITS:
            raise MalformedInputError(f"{where}: integer exceeds {MAX_ID_DIGITS} digits")
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if len(text.lstrip("+-")) > MAX_ID_DIGITS:
            raise MalformedInputError(f"{where}: integer exceeds {MAX_ID_DIGITS} digits")
        try:
            return int(text)
        except ValueError:
            pass
        raw = _clip(raw)
    raise MalformedInputError(f"{where}: expected an integer, got {raw!r}")


def _parse_keys(body: Any) -> Problem:
    pairs = _as_pairs(body)
    if pairs is None:
        raise MalformedInputError(f"'{KEYS_FIELD}' must be an object")
    n = _to_int(_get(pairs, "n", KEYS_FIELD), f"{KEYS_FIELD}.n")
    k = _to_int(_get(pairs, "k", KEYS_FIELD), f"{KEYS_FIELD}.k")
    if k > MAX_THRESHOLD:
        raise MalformedInputError(f"k={k} exceeds limit {MAX_THRESHOLD}")
    try:
        return Problem(n=n, k=k)
    except ValidationError as exc:
        raise MalformedInputError(f"Invalid threshold: k={k}, n={n}") from exc


def _parse_share(key: str, body: Any) -> Share:
    x = _to_int(key, "share id")
    where = f"share {x}"
    pairs = _as_pairs(body)
    if pairs is None:
        raise MalformedInputError(f"{where}: must be an object")
    base = _to_int(_get(pairs, "base", where), f"{where}.base")
    value = _get(pairs, "value", where)
    if not isinstance(value, str):
        raise MalformedInputError(f"{where}.value: expected a string, got {type(value).__name__}")
    if len(value) > MAX_DIGITS:
        raise MalformedInputError(f"{where}.value: {len(value)} digits exceeds limit {MAX_DIGITS}")
    try:
        return Share(id=x, base=base, value=value)
    except ValidationError as exc:
        raise MalformedInputError(f"{where}: {exc.errors()[0]['msg']}") from exc

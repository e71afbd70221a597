"""Choose the k points fed to the interpolator.

Points are ordered by ascending x and the lowest k are kept, so the same
share set always reconstructs from the same subset.
"""

from __future__ import annotations

from typing import Iterable, List

from secretsolver.crypto.radix import to_text
from secretsolver.errors import InconsistentSharesError, InsufficientSharesError
from secretsolver.models import Point


def select_points(points: Iterable[Point], k: int) -> List[Point]:
    """Return the *k* points with the lowest x-coordinates."""
    ordered = sorted(points, key=lambda p: p.x)
    if len(ordered) < k:
        raise InsufficientSharesError(f"Only {len(ordered)} shares available, need k={k}")

    selected = ordered[:k]
    # sorted, so duplicates are adjacent
    for prev, cur in zip(selected, selected[1:]):
        if prev.x == cur.x:
            raise InconsistentSharesError(
                f"Duplicate x-coordinate {to_text(cur.x)} among selected points"
            )
    return selected

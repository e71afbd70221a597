"""Error kinds raised while solving a share document.

Every hard failure derives from ``SecretSolverError`` so callers (and the
batch runner) can isolate one bad problem without catching unrelated
exceptions.  ``NonIntegerResultWarning`` is a warning, not an error: the
solve still produces a value, but it must not be treated as authoritative.
"""

from __future__ import annotations


class SecretSolverError(Exception):
    """Base class for all solve failures."""

    kind = "error"


class MalformedInputError(SecretSolverError):
    """Required fields are missing or cannot be parsed."""

    kind = "malformed_input"


class InvalidDigitError(SecretSolverError, ValueError):
    """A share value holds a character outside its base's alphabet."""

    kind = "invalid_digit"

    def __init__(self, char: str, position: int, base: int) -> None:
        self.char = char
        self.position = position
        self.base = base
        if not char:
            super().__init__(f"Empty value for base {base}")
        else:
            super().__init__(f"Invalid digit {char!r} at position {position} for base {base}")


class InsufficientSharesError(SecretSolverError):
    """Fewer than ``k`` shares are available."""

    kind = "insufficient_shares"


class InconsistentSharesError(SecretSolverError):
    """Two selected points share an x-coordinate."""

    kind = "inconsistent_shares"


class NonIntegerResultWarning(UserWarning):
    """Interpolation produced a non-integral rational; the value was truncated."""

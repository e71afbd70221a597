"""Positional radix codec for share values.

Digits use the conventional ``0-9a-z`` alphabet, case-insensitive.  Bases
above 36 reuse the same alphabet, so they only decode when every digit
value in the string happens to be below 36.
"""

from __future__ import annotations

from secretsolver.config import DECIMAL_TEXT_MAX_BITS, DIGIT_ALPHABET, MIN_BASE
from secretsolver.errors import InvalidDigitError, MalformedInputError

_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGIT_ALPHABET)}


def to_text(number: int) -> str:
    """Decimal text for *number*, or ``0x`` hex once it is too wide for str()."""
    if number.bit_length() <= DECIMAL_TEXT_MAX_BITS:
        return str(number)
    return hex(number)


def digit_value(char: str) -> int:
    """Value of a single digit character, or -1 if it is not in the alphabet."""
    return _DIGIT_VALUES.get(char.lower(), -1)


def decode(value: str, base: int) -> int:
    """Decode *value* written in *base* into an int."""
    if base < MIN_BASE:
        raise MalformedInputError(f"Invalid base: {base}")
    if not value:
        raise InvalidDigitError("", 0, base)

    result = 0
    for position, char in enumerate(value):
        digit = digit_value(char)
        if digit == -1 or digit >= base:
            raise InvalidDigitError(char, position, base)
        result = result * base + digit
    return result


def encode(number: int, base: int) -> str:
    """Encode a non-negative *number* in *base* (2..36), lowercase, no padding."""
    if not MIN_BASE <= base <= len(DIGIT_ALPHABET):
        raise ValueError(f"encode supports bases {MIN_BASE}..{len(DIGIT_ALPHABET)}, got {base}")
    if number < 0:
        raise ValueError("Cannot encode a negative number")
    if number == 0:
        return DIGIT_ALPHABET[0]

    digits = []
    while number:
        number, rem = divmod(number, base)
        digits.append(DIGIT_ALPHABET[rem])
    return "".join(reversed(digits))

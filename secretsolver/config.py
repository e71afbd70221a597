"""Global configuration for secretsolver."""

import os

# ---------- Digit alphabet ----------
# Digit value = position in this string (input is lowercased first).
DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2

# ---------- Resource bounds for untrusted input ----------
# Big-integer growth is O(k * digits), so all of these are capped.
MAX_THRESHOLD = int(os.environ.get("SECRETSOLVER_MAX_THRESHOLD", "256"))
MAX_DIGITS = int(os.environ.get("SECRETSOLVER_MAX_DIGITS", "4096"))
# n, k, base and share ids (x-coordinates)
MAX_ID_DIGITS = int(os.environ.get("SECRETSOLVER_MAX_ID_DIGITS", "64"))

# ---------- Text output ----------
# Ints wider than this are shown in hex; decimal str() is capped by the
# interpreter at 4300 digits (~14000 bits).
DECIMAL_TEXT_MAX_BITS = 13000

# ---------- Input document ----------
KEYS_FIELD = "keys"

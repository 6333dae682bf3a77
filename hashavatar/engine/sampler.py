"""Hash sampling — one hex character of a hash string becomes one on/off cell."""

from __future__ import annotations

import math
import string

from hashavatar.errors import HashFormatError, HashRangeError

# Nibble value is divided by this and rounded half-up: 0-4 → 0 (off), 5-15 → 1+ (on).
_NIBBLE_DIVISOR = 10


def hex_value(char: str) -> int:
    """Parse a single hexadecimal character (either case) into 0-15."""
    if len(char) != 1:
        raise HashFormatError(f"Expected a single hex character, got {char!r}")
    # int(..., 16) also accepts non-ASCII decimal digits such as "٩"
    if char not in string.hexdigits:
        raise HashFormatError(f"Not a hexadecimal digit: {char!r}")
    return int(char, 16)


def nibble_to_bool(value: int) -> bool:
    """Round ``value / 10`` half-up and treat a non-zero result as on."""
    return math.floor(value / _NIBBLE_DIVISOR + 0.5) != 0


def sample_bool(hash_str: str, index: int, *, strict: bool = False) -> bool:
    """Boolean derived from the character at ``index`` in ``hash_str``.

    Reads past the end of the hash are off cells unless ``strict`` is set,
    in which case HashRangeError is raised.
    """
    if index < 0:
        raise HashRangeError(index, len(hash_str))
    if index >= len(hash_str):
        if strict:
            raise HashRangeError(index, len(hash_str))
        return False
    return nibble_to_bool(hex_value(hash_str[index]))

"""Integer helpers with the limits of 32-bit and 64-bit signed arithmetic."""

from __future__ import annotations

from pushswap.ctype import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a 32-bit signed integer, keeping the low bits."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def abs_int(n: int) -> int:
    """Absolute value; the smallest 32-bit integer, which has none, gives 0."""
    if n == INT_MIN:
        return 0
    return -n if n < 0 else n


def atoi(text: str) -> int:
    """Read a leading integer from ``text`` as a 32-bit value.

    Leading white space and one sign are skipped, then digits are read up
    to the first non-digit. A value outside the 64-bit range is clamped to
    it, and the result is wrapped to 32 bits. Text without digits gives 0.
    """
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        value = value * 10 + int(ch)
        if sign == 1 and value > LONG_MAX:
            return _to_int32(LONG_MAX)
        if sign == -1 and -value < LONG_MIN:
            return _to_int32(LONG_MIN)
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Decimal text of ``n`` with a leading minus when negative."""
    return str(n)
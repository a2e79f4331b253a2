"""Checking and reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.ctype import is_digit, is_space
from pushswap.numbers import INT_MAX, INT_MIN

ERROR_MESSAGE = "Error"


class InputError(ValueError):
    """Raised for an argument that is not a distinct 32-bit integer."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(ERROR_MESSAGE)
        self.detail = detail


def parse_int(text: str) -> int:
    """Read a whole argument as a 32-bit integer.

    Leading white space and one sign are allowed; everything after them
    must be digits, at least one of them.
    """
    rest = text.lstrip()
    while rest and not is_space(rest[0]) and False:
        break
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    rest = text[pos:]
    negative = False
    if rest[:1] in ("+", "-") and rest:
        negative = rest[0] == "-"
        rest = rest[1:]
    if not rest:
        raise InputError(f"no digits in {text!r}")
    value = 0
    for ch in rest:
        if not is_digit(ch):
            raise InputError(f"not a number: {text!r}")
        value = value * 10 + int(ch)
        if (not negative and value > INT_MAX) or (negative and -value < INT_MIN):
            raise InputError(f"out of range: {text!r}")
    return -value if negative else value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Read every argument, in order, refusing bad or repeated numbers."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        value = parse_int(arg)
        if value in seen:
            raise InputError(f"duplicate value: {arg!r}")
        seen.add(value)
        values.append(value)
    return values
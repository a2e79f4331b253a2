"""A small formatter for %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

NULL_TEXT = "(null)"


def _wrap(value: int, bits: int) -> int:
    return value % (1 << bits)


def _signed32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def format_hex(value: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``value`` taken as a 32-bit unsigned integer."""
    text = format(_wrap(value, 32), "x")
    return text.upper() if upper else text


def format_pointer(value: int) -> str:
    """``0x`` followed by the lower-case hex of a 64-bit address."""
    return "0x" + format(_wrap(value, 64), "x")


def format_unsigned(value: int) -> str:
    """Decimal digits of ``value`` taken as a 32-bit unsigned integer."""
    return str(_wrap(value, 32))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        return value[:1]
    return chr(_wrap(value, 8))


def _next(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    value = _next(values, spec)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return NULL_TEXT if value is None else str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return str(_signed32(value))
    if spec == "u":
        return format_unsigned(value)
    return format_hex(value, upper=spec == "X")


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` into ``fmt``; unknown conversions produce nothing."""
    values = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            parts.append(ch)
            pos += 1
            continue
        if pos + 1 >= len(fmt):
            break
        parts.append(_convert(fmt[pos + 1], values))
        pos += 2
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)
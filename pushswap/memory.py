"""Byte-buffer routines with the conventions of C memory functions.

Buffers are bytes-like objects. Functions that write take a bytearray
and change it in place. A byte value given as an integer is taken
modulo 256, as a C ``unsigned char`` would be.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"count {n} exceeds buffer of {len(buffer)} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value``; return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero; return ``buf``."""
    return memset(buf, 0, n)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    The two regions may overlap; the result is as if the source bytes
    were first copied aside.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("count must not be negative")
    if src + n > len(buf) or dst + n > len(buf):
        raise ValueError("region lies outside the buffer")
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return index if index >= 0 else None


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; the difference of the first mismatch, else 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0
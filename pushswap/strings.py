"""Text helpers with the conventions of C string routines.

Positions are returned as indexes into the text, or None where nothing
is found. A character argument may be a one-character string or an
integer code, which is taken modulo 256 as a C ``char`` would be.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest
from typing import Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def split(s: str, sep: Char) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    return [word for word in s.split(_char(sep)) if word]


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the NUL character matches at the end."""
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the NUL character matches at the end."""
    ch = _char(c)
    if ch == _NUL and _NUL not in s:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strdup(s: str) -> str:
    """A copy of ``s``."""
    return "".join(s)


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``; with a
    size of 0 nothing is copied.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would
    have had. When the buffer is already full ``dst`` is left as it is
    and the length reported is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new text made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(buffer: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` on each character of ``buffer`` up to a NUL.

    A character returned by ``f`` replaces the one in the buffer; None
    leaves it unchanged.
    """
    for index, ch in enumerate(buffer):
        if ch == _NUL:
            break
        replacement = f(index, ch)
        if replacement is not None:
            buffer[index] = replacement


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch.

    A text that ends early compares as if followed by NUL characters.
    """
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    end = min(length, len(haystack))
    index = haystack.find(needle, 0, end)
    return index if index >= 0 else None


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s) or length == 0:
        return ""
    return s[start : start + length]
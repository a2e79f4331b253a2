"""Writing characters, text and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union


def _target(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def put_char(c: Union[str, int], file: Optional[TextIO] = None) -> None:
    """Write one character; an integer is taken as a code modulo 256."""
    ch = chr(c & 0xFF) if isinstance(c, int) else c[:1]
    _target(file).write(ch)


def put_str(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``s``; None writes nothing."""
    if s is None:
        return
    _target(file).write(s)


def put_endl(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes the newline alone."""
    put_str(s, file)
    put_char("\n", file)


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal, with a leading minus when negative."""
    _target(file).write(str(n))
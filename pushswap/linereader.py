"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional, Protocol, Union

BUFFER_SIZE = 100
OPEN_MAX = 1024
ENCODING = "utf-8"
ERRORS = "surrogateescape"


class _HasFileno(Protocol):
    def fileno(self) -> int: ...


Descriptor = Union[int, _HasFileno]


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line keeps its terminating newline; the last line of the input
    may lack one. Text read past a line's end is held for the next call.
    """

    def __init__(self, fd: Descriptor, buffer_size: int = BUFFER_SIZE) -> None:
        if not isinstance(fd, int):
            fd = fd.fileno()
        if fd < 0 or fd > OPEN_MAX:
            raise ValueError(f"file descriptor out of range: {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        """Read until a newline is held or the input is exhausted."""
        if b"\n" in self._pending:
            return
        while True:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk
            if b"\n" in chunk:
                return

    def read_line(self) -> Optional[str]:
        """The next line, or None when there is nothing more to read."""
        self._fill()
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        end = len(self._pending) if newline < 0 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode(ENCODING, ERRORS)

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


def lines(fd: Descriptor, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every line readable from ``fd``."""
    yield from LineReader(fd, buffer_size)
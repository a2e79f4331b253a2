"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import TextIO


class EmptyStackError(IndexError):
    """Raised when an operation needs an element from an empty stack."""


class Stack:
    """A stack of integers that can also be rotated in both directions.

    Iteration runs from the top element downwards.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stack):
            return self._items == other._items
        return NotImplemented

    @property
    def top(self) -> int:
        """The top element."""
        if not self._items:
            raise EmptyStackError("stack is empty")
        return self._items[0]

    def is_sorted(self) -> bool:
        """True when the values ascend from the top down."""
        items = list(self._items)
        return all(a <= b for a, b in zip(items, items[1:]))

    def max(self) -> int:
        """The largest value on the stack."""
        if not self._items:
            raise EmptyStackError("stack is empty")
        return max(self._items)

    def min(self) -> int:
        """The smallest value on the stack."""
        if not self._items:
            raise EmptyStackError("stack is empty")
        return min(self._items)

    def index_of(self, value: int) -> int:
        """Distance of ``value`` from the top; ValueError if absent."""
        try:
            return self._items.index(value)
        except ValueError:
            raise ValueError(f"{value} is not on the stack") from None

    def swap(self) -> bool:
        """Exchange the two top elements; False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top element to the bottom; False if nothing moves."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom element to the top; False if nothing moves."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise EmptyStackError("stack is empty")
        return self._items.popleft()

    def push(self, value: int) -> None:
        """Place ``value`` on top."""
        self._items.appendleft(value)

    def describe(self, name: str) -> str:
        """A one-line listing of the stack from the top down."""
        if not self._items:
            return f"{name} is empty"
        return f"{name}: " + " ".join(str(v) for v in self._items)


class Stacks:
    """Stacks ``a`` and ``b`` with the named puzzle operations.

    Every operation that changes a stack is appended to ``history`` and,
    when ``stream`` is set, written to it on a line of its own.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.history: list[str] = []
        self.stream: TextIO | None = None

    def _emit(self, name: str) -> None:
        self.history.append(name)
        if self.stream is not None:
            self.stream.write(name + "\n")

    def _swap(self, stack: Stack, name: str) -> None:
        if stack.swap():
            self._emit(name)

    def _rotate(self, stack: Stack, name: str) -> None:
        if stack.rotate():
            self._emit(name)

    def _reverse_rotate(self, stack: Stack, name: str) -> None:
        if stack.reverse_rotate():
            self._emit(name)

    def _push(self, source: Stack, target: Stack, name: str) -> None:
        target.push(source.pop())
        self._emit(name)

    def sa(self) -> None:
        self._swap(self.a, "sa")

    def sb(self) -> None:
        self._swap(self.b, "sb")

    def ss(self) -> None:
        self._swap(self.a, "sa")
        self._swap(self.b, "sb")

    def ra(self) -> None:
        self._rotate(self.a, "ra")

    def rb(self) -> None:
        self._rotate(self.b, "rb")

    def rr(self) -> None:
        self._rotate(self.a, "ra")
        self._rotate(self.b, "rb")

    def rra(self) -> None:
        self._reverse_rotate(self.a, "rra")

    def rrb(self) -> None:
        self._reverse_rotate(self.b, "rrb")

    def rrr(self) -> None:
        self._reverse_rotate(self.a, "rra")
        self._reverse_rotate(self.b, "rrb")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; EmptyStackError if ``b`` is empty."""
        self._push(self.b, self.a, "pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; EmptyStackError if ``a`` is empty."""
        self._push(self.a, self.b, "pb")
"""The two named stacks of the puzzle and the operations on them.

Every operation that changes a stack announces itself by passing its
name (``sa``, ``pb``, ``rra``, ``rr`` and so on) to the stack's emitter,
which prints it on standard output unless another one is given.
"""

from __future__ import annotations

from collections import deque
from itertools import pairwise
from typing import Callable, Iterable, Iterator, Optional

Emitter = Callable[[str], None]


def _print_operation(operation: str) -> None:
    print(operation)


class Stack:
    """A stack of integers whose top is the first value."""

    def __init__(
        self,
        name: str,
        values: Iterable[int] = (),
        emit: Optional[Emitter] = None,
    ) -> None:
        if not isinstance(name, str) or len(name) != 1:
            raise ValueError(f"stack name must be a single character, got {name!r}")
        self.name = name
        self._items: deque[int] = deque(values)
        self._emit: Emitter = emit if emit is not None else _print_operation

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {list(self._items)!r})"

    def push_from(self, other: Stack) -> None:
        """Move the top of ``other`` onto this stack; nothing if ``other`` is empty."""
        if not other._items:
            return
        self._items.appendleft(other._items.popleft())
        self._emit(f"p{self.name}")

    def swap(self) -> None:
        """Exchange the two topmost values."""
        if len(self._items) <= 1:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        self._emit(f"s{self.name}")

    def rotate(self, announce: bool = True) -> None:
        """Move the top value to the bottom."""
        if len(self._items) <= 1:
            return
        self._items.rotate(-1)
        if announce:
            self._emit(f"r{self.name}")

    def reverse_rotate(self, announce: bool = True) -> None:
        """Move the bottom value to the top."""
        if len(self._items) <= 1:
            return
        self._items.rotate(1)
        if announce:
            self._emit(f"rr{self.name}")

    def is_sorted(self) -> bool:
        """True when the values never decrease from top to bottom."""
        return all(upper <= lower for upper, lower in pairwise(self._items))


def swap_both(a: Stack, b: Stack) -> None:
    """Swap the tops of both stacks, each announcing itself."""
    a.swap()
    b.swap()


def rotate_both(a: Stack, b: Stack) -> None:
    """Rotate both stacks as the single operation ``rr``."""
    a.rotate(announce=False)
    b.rotate(announce=False)
    a._emit("rr")


def reverse_rotate_both(a: Stack, b: Stack) -> None:
    """Reverse-rotate both stacks as the single operation ``rrr``."""
    a.reverse_rotate(announce=False)
    b.reverse_rotate(announce=False)
    a._emit("rrr")
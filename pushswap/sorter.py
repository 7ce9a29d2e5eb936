"""Sorting stack ``a`` with the help of stack ``b``.

All values but three are pushed onto ``b``, the three are sorted in
place, and then the smallest value left on ``b`` is repeatedly brought
to the top of ``b`` while the value nearest to it in ``a`` is brought
to an end of ``a``, and pushed across.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pushswap.stack import Stack, reverse_rotate_both, rotate_both


def _first(stack: Stack) -> int:
    return next(iter(stack))


def _second(stack: Stack) -> int:
    values = iter(stack)
    next(values)
    return next(values)


def _last(stack: Stack) -> int:
    return list(stack)[-1]


def sort_three(a: Stack) -> None:
    """Sort a stack of at most three values in place."""
    if len(a) > 3:
        raise ValueError(f"sort_three handles at most three values, got {len(a)}")
    while len(a) >= 2:
        values = list(a)
        head, second, tail = values[0], values[1], values[-1]
        if head > tail:
            a.rotate()
        elif head > second:
            a.swap()
        elif second > tail:
            a.rotate()
            a.swap()
            a.reverse_rotate()
        else:
            break


def find_min(b: Stack) -> tuple[int, int]:
    """Return the position and value of the first smallest value in ``b``."""
    if len(b) == 0:
        raise ValueError("cannot find the minimum of an empty stack")
    index, value = min(enumerate(b), key=lambda pair: pair[1])
    return index, value


def closest_index(a: Stack, num: int) -> int:
    """Return the position in ``a`` of the value nearest ``num``.

    On a tie the later position wins; an empty stack gives 0.
    """
    best = 0
    best_diff: Optional[int] = None
    for index, value in enumerate(a):
        diff = abs(value - num)
        if best_diff is None or diff <= best_diff:
            best, best_diff = index, diff
    return best


def _try_push(a: Stack, b: Stack, x: int, y: int) -> bool:
    """Push from ``b`` to ``a`` once both targets sit at an end of their stack."""
    size_a, size_b = len(a), len(b)
    if 0 < x < size_a - 1 or 0 < y < size_b - 1:
        return False
    if x == 0 and y == 1:
        b.swap()
        if _first(a) < _first(b):
            a.rotate()
    if x == size_a - 1 and y == 0 and _last(a) > _first(b):
        a.reverse_rotate()
    if y == size_b - 1 and x == 0:
        b.reverse_rotate()
    a.push_from(b)
    if _first(a) > _second(a):
        a.swap()
    return True


def _bring_and_push(a: Stack, b: Stack, x: int, y: int) -> None:
    """Rotate the targets at ``x`` in ``a`` and ``y`` in ``b`` into place, then push."""
    while not _try_push(a, b, x, y):
        while (len(a) // 2 < x <= len(a) - 1) and (len(b) // 2 < y <= len(b) - 1):
            x += 1
            y += 1
            reverse_rotate_both(a, b)
        while len(b) // 2 < y < len(b) - 1:
            b.reverse_rotate()
            y += 1
        while len(a) // 2 < x < len(a) - 1:
            a.reverse_rotate()
            x += 1
        while 0 < x <= len(a) // 2 and 0 < y <= len(b) // 2:
            x -= 1
            y -= 1
            rotate_both(a, b)
        while 0 < y <= len(b) // 2:
            b.rotate()
            y -= 1
        while 0 < x <= len(a) // 2:
            a.rotate()
            x -= 1


def sort(a: Stack, b: Optional[Stack]) -> None:
    """Sort ``a`` using ``b`` as scratch space, announcing every operation."""
    if a.is_sorted() or b is None:
        return
    while len(a) > 3:
        b.push_from(a)
    sort_three(a)
    while len(b) > 0:
        index_b, num_b = find_min(b)
        index_a = closest_index(a, num_b)
        _bring_and_push(a, b, index_a, index_b)
    while _first(a) > _last(a):
        a.rotate()


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sorting ``values`` performs."""
    operations: list[str] = []
    a = Stack("a", values, operations.append)
    b = Stack("b", (), operations.append)
    sort(a, b)
    return operations
"""Command line entry point: sort the integers given as arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from pushswap.sorter import sort
from pushswap.stack import Stack
from pushswap.textops import parse_int


class InputError(ValueError):
    """Raised when the arguments are not distinct 32-bit integers."""


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Read the arguments as distinct integers, in the order given."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        try:
            value = parse_int(arg)
        except ValueError as exc:
            raise InputError(str(exc)) from exc
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations that sort the arguments; ``Error`` on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 255
    try:
        values = parse_arguments(args)
    except InputError:
        print("Error")
        return 0
    a = Stack("a", values)
    b = Stack("b")
    sort(a, b)
    return 0


if __name__ == "__main__":
    sys.exit(main())
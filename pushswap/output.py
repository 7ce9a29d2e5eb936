"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pushswap.formatting import format_signed


def _target(file: Optional[TextIO]) -> TextIO:
    return file if file is not None else sys.stdout


def put_char(c: str, file: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(file).write(c)


def put_str(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if s is None:
        return
    _target(file).write(s)


def put_endl(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if s is None:
        return
    _target(file).write(s + "\n")


def put_number(n: int, file: Optional[TextIO] = None) -> None:
    """Write a signed 32-bit integer in decimal."""
    _target(file).write(format_signed(n))
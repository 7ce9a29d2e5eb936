"""Integer parsing and formatting, and building new strings from old ones."""

from __future__ import annotations

from typing import Callable, Optional

from pushswap.chars import is_digit
from pushswap.formatting import format_signed

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


def parse_int(text: Optional[str]) -> int:
    """Parse a decimal integer that fits in a signed 32-bit int.

    The text is an optional leading ``-`` followed by ASCII digits and
    nothing else. A lone ``-`` reads as zero. Raises ``ValueError`` for
    empty or malformed text and for values out of range.
    """
    if not text:
        raise ValueError("expected an integer, got empty text")
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not all(is_digit(ch) for ch in digits):
        raise ValueError(f"not an integer: {text!r}")
    magnitude = int(digits) if digits else 0
    value = -magnitude if negative else magnitude
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def int_to_str(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    return format_signed(n)


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    sep = _single_char(sep)
    if sep == "\0":
        return [s] if s else []
    return [piece for piece in s.split(sep) if piece]


def join(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent.

    Returns ``None`` only when both are ``None``.
    """
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end, or a zero length, gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(s):
        return ""
    return s[start:start + length]


def trim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for every character.

    ``func`` is called from the last character to the first.
    """
    mapped = [""] * len(s)
    for index in reversed(range(len(s))):
        mapped[index] = _single_char(func(index, s[index]))
    return "".join(mapped)


def iterate_indexed(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for every character, first to last.

    A character is replaced by what ``func`` returns, or kept when it
    returns ``None``. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        result.append(ch if replacement is None else _single_char(replacement))
    return "".join(result)
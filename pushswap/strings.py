"""Bounded string searching, comparison, copying and concatenation.

Searches return an index into the string, or ``None`` when nothing is
found. A search for the NUL character finds the end of the string, at
index ``len(s)``.
"""

from __future__ import annotations

from typing import Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _as_char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c % 256)


def find_char(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def rfind_char(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they agree, otherwise the difference between the
    codes of the first pair of characters that differ; the end of a
    string counts as code zero.
    """
    if n <= 0 or s1 is s2:
        return 0
    limit = min(n, max(len(s1), len(s2)))
    for a, b in zip(s1[:limit].ljust(limit, _NUL), s2[:limit].ljust(limit, _NUL)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, truncated to ``size - 1`` characters, and
    the length of ``src``, which shows whether truncation happened.
    """
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had. When ``size`` is no larger than ``dst``, nothing is appended and
    the length reported is ``size + len(src)``.
    """
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)
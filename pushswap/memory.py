"""Byte buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

_SIZE_MAX = (1 << 64) - 1


def _check_span(buf: Bytes, n: int, start: int = 0) -> None:
    if n < 0 or start < 0:
        raise ValueError("sizes and offsets must not be negative")
    if start + n > len(buf):
        raise IndexError(f"span of {n} bytes at {start} exceeds buffer of {len(buf)}")


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return fill(buf, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Allocate ``count`` elements of ``size`` bytes, all zero.

    An empty request gives a single byte. Raises ``OverflowError`` when
    the total does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    if _SIZE_MAX // count < size:
        raise OverflowError(f"{count} * {size} bytes is too large")
    return bytearray(count * size)


def find_byte(buf: Bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def compare_bytes(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the first difference or zero."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def copy_bytes(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_span(dest, n)
    _check_span(src, n)
    dest[:n] = src[:n]
    return dest


def move_bytes(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to ``dest``.

    The regions may overlap.
    """
    _check_span(buf, n, dest)
    _check_span(buf, n, src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def fill(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (taken modulo 256)."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf
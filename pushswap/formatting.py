"""A small printf-style formatter supporting %c %s %d %i %u %p %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

_UINT32_RANGE = 1 << 32
_INT32_MIN = -(1 << 31)


def _as_int32(n: int) -> int:
    """Reduce an integer to the range of a signed 32-bit int."""
    return (n - _INT32_MIN) % _UINT32_RANGE + _INT32_MIN


def _as_uint32(n: int) -> int:
    """Reduce an integer to the range of an unsigned 32-bit int."""
    return n % _UINT32_RANGE


def to_hex(value: int, upper: bool = False) -> str:
    """Render a non-negative integer in hexadecimal, without prefix."""
    if value < 0:
        raise ValueError(f"cannot render negative value {value} as hexadecimal")
    return format(value, "X" if upper else "x")


def format_address(address: Any) -> str:
    """Render an address as ``0x...``, or ``(nil)`` for a null address.

    Integers are taken as the address itself; any other object is
    identified by its ``id``.
    """
    if address is None or address == 0:
        return "(nil)"
    value = address if isinstance(address, int) else id(address)
    return "0x" + to_hex(value)


def format_signed(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    return str(_as_int32(n))


def format_unsigned(n: int) -> str:
    """Render an integer as an unsigned 32-bit decimal number."""
    return str(_as_uint32(n))


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(arg % 256)


def _format_str(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "p": format_address,
    "x": lambda n: to_hex(_as_uint32(n)),
    "X": lambda n: to_hex(_as_uint32(n), upper=True),
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    Unknown conversion characters are consumed and produce no output,
    as does a lone ``%`` at the end of the format.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pieces: list[str] = []
    pending = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            arg = next(pending)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(converter(arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)
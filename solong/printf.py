"""A small printf work-alike supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    """Reinterpret an integer as a C signed 32-bit int."""
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _POINTER_MASK
    return "(nil)" if address == 0 else f"0x{address:x}"


_CONVERTERS = {
    "d": lambda v: str(_int32(int(v))),
    "i": lambda v: str(_int32(int(v))),
    "c": _char,
    "s": _string,
    "u": lambda v: str(int(v) & _UINT32_MASK),
    "x": lambda v: format(int(v) & _UINT32_MASK, "x"),
    "X": lambda v: format(int(v) & _UINT32_MASK, "X"),
    "p": _pointer,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            # A lone trailing '%' is printed as is.
            yield "%"
        elif spec == "%":
            yield "%"
        elif spec in _CONVERTERS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format string {fmt!r}"
                ) from None
            yield _CONVERTERS[spec](value)
        # Unknown conversions produce nothing and consume no argument.


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that printf would write for this format and arguments."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
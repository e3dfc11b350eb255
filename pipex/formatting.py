"""printf-style formatting with the %c %s %d %i %u %x %X %p and %% conversions."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Any

_CONVERSION = re.compile(r"%(.)", re.DOTALL)
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _signed32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n >= 1 << 31 else n


def _unsigned32(n: int) -> int:
    return n & 0xFFFFFFFF


def _next(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return _NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & 0xFFFFFFFFFFFFFFFF:x}"


def _convert(spec: str, values: Iterator[Any]) -> str:
    """Render one conversion; unknown specifiers produce nothing and take no argument."""
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next(values))
    if spec == "s":
        value = _next(values)
        return _NULL_STRING if value is None else str(value)
    if spec in "di":
        return str(_signed32(int(_next(values))))
    if spec == "u":
        return str(_unsigned32(int(_next(values))))
    if spec == "x":
        return format(_unsigned32(int(_next(values))), "x")
    if spec == "X":
        return format(_unsigned32(int(_next(values))), "X")
    if spec == "p":
        return _pointer(_next(values))
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    Integers are taken as 32-bit values, as a C ``int`` or ``unsigned int``
    would hold them. A lone ``%`` at the very end is kept as is.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    values = iter(args)
    return _CONVERSION.sub(lambda match: _convert(match.group(1), values), fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
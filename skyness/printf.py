"""A small printf with colour codes: %c %s %p %d %i %u %x %X %% and %r %R %G %Y %B %M %C."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"

_COLORS = {
    "r": RESET,
    "R": RED,
    "G": GREEN,
    "Y": YELLOW,
    "B": BLUE,
    "M": MAGENTA,
    "C": CYAN,
}

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 0x100000000 if value & 0x80000000 else value


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _ULONG_MASK
    if not address:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec in _COLORS:
        return _COLORS[spec]
    if spec == "c":
        return _char(_next_arg(args, spec))
    if spec == "s":
        value = _next_arg(args, spec)
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(_next_arg(args, spec))
    if spec in ("d", "i"):
        return str(_to_int32(operator.index(_next_arg(args, spec))))
    if spec == "u":
        return str(operator.index(_next_arg(args, spec)) & _UINT_MASK)
    if spec == "x":
        return format(operator.index(_next_arg(args, spec)) & _UINT_MASK, "x")
    if spec == "X":
        return format(operator.index(_next_arg(args, spec)) & _UINT_MASK, "X")
    return ""


def render(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` formats to; unknown conversions produce nothing."""
    if fmt is None:
        raise TypeError("format must be a string")
    pending = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, pending))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)
"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from sigtalk.ctext import itoa

__all__ = ["FormatError", "sprintf", "printf"]

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for a bad conversion or when the arguments run out."""


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _signed(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") % 256)


def _format_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p")
    return f"0x{address & _POINTER_MASK:x}"


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return _format_pointer(value)
    if spec in ("d", "i"):
        return itoa(_signed(_as_int(value, spec)))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT_MASK)
    if spec == "x":
        return f"{_as_int(value, spec) & _UINT_MASK:x}"
    if spec == "X":
        return f"{_as_int(value, spec) & _UINT_MASK:X}"
    raise FormatError(f"unknown conversion %{spec}")


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        if spec not in "cspdiuxX":
            raise FormatError(f"unknown conversion %{spec}")
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"not enough arguments for %{spec}") from None
        yield _convert(spec, value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default).

    Returns the number of characters written.  Nothing is written when the
    format is invalid.
    """
    text = sprintf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)
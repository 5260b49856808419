"""Formatted output with a small set of conversions.

Supported conversions:

- ``%c``: one character, given as a one-character string or an integer code
- ``%s``: text up to its terminator, or ``(null)`` for None
- ``%d`` and ``%i``: a signed 32-bit integer
- ``%u``: an unsigned 32-bit integer
- ``%x`` and ``%X``: an unsigned 32-bit integer in lower- or upper-case hexadecimal
- ``%p``: an address in hexadecimal with a ``0x`` prefix, or ``(nil)`` for None or zero
- ``%%``: a literal percent sign

Any other character after ``%`` is written out as is, together with the ``%``.
Integer arguments wider than the conversion are wrapped the way a machine
integer of that width would wrap them.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import TextIO

from .convert import DECIMAL, itoa, ltoa_base, ultoa_base
from .textsearch import strdup

HEX_DIGITS = "0123456789abcdef"
NULL_TEXT = "(null)"
NIL_POINTER = "(nil)"

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _int32(value) -> int:
    wrapped = operator.index(value) & _UINT_MASK
    return wrapped - (1 << 32) if wrapped >> 31 else wrapped


def _uint32(value) -> int:
    return operator.index(value) & _UINT_MASK


def _character(value) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _text(value) -> str:
    if value is None:
        return NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects text or None, got {type(value).__name__}")
    return strdup(value)


def _pointer(value) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    address &= _POINTER_MASK
    if not address:
        return NIL_POINTER
    return "0x" + ultoa_base(HEX_DIGITS, address)


def _convert(flag: str, args: Iterator) -> str:
    if flag == "%":
        return "%"
    if flag not in "csdiuxXp":
        return "%" + flag
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{flag}") from None
    if flag == "c":
        return _character(value)
    if flag == "s":
        return _text(value)
    if flag in "di":
        return itoa(_int32(value))
    if flag == "u":
        return ltoa_base(DECIMAL, _uint32(value))
    if flag == "x":
        return ltoa_base(HEX_DIGITS, _uint32(value))
    if flag == "X":
        return ltoa_base(HEX_DIGITS, _uint32(value)).upper()
    return _pointer(value)


def sprintf(fmt: str, *args) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    The format ends at its first NUL character, if it has one. A ``%`` with
    nothing after it raises ``ValueError``; too few arguments raise ``TypeError``.
    """
    if fmt is None:
        raise TypeError("format must be text, not None")
    if not isinstance(fmt, str):
        raise TypeError(f"format must be text, got {type(fmt).__name__}")
    remaining = iter(args)
    chars = iter(strdup(fmt))
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        flag = next(chars, None)
        if flag is None:
            raise ValueError("format ends with an incomplete conversion")
        pieces.append(_convert(flag, remaining))
    return "".join(pieces)


def printf(fmt: str, *args, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)


__all__ = ["HEX_DIGITS", "NIL_POINTER", "NULL_TEXT", "printf", "sprintf"]
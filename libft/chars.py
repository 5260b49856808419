"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer code.
"""

from __future__ import annotations

_SPACE_CODES = frozenset(map(ord, "\t \r\v\n\f"))


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _as_signed_char(code: int) -> int:
    """The value an integer code takes once narrowed to a signed byte."""
    low = code & 0xFF
    return low - 0x100 if low > 0x7F else low


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or decimal digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 31 < _code(c) < 127


def isspace(c: str | int) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return or space."""
    return _code(c) in _SPACE_CODES


def tolower(c: str | int) -> str | int:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    if isinstance(c, str):
        code = _code(c)
        return chr(code + 32) if ord("A") <= code <= ord("Z") else c
    narrowed = _as_signed_char(_code(c))
    if ord("A") <= narrowed <= ord("Z"):
        return narrowed + 32
    return c


def toupper(c: str | int) -> str | int:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    if isinstance(c, str):
        code = _code(c)
        return chr(code - 32) if ord("a") <= code <= ord("z") else c
    narrowed = _as_signed_char(_code(c))
    if ord("a") <= narrowed <= ord("z"):
        return narrowed - 32
    return c
"""Conversions between integers and their textual forms in arbitrary bases."""

from __future__ import annotations

from .chars import isdigit, isspace

DECIMAL = "0123456789"

_INT_BITS = 32
_LONG_BITS = 64


def _wrap(value: int, bits: int) -> int:
    """Reduce a value to a two's-complement signed integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _check_range(n: int, low: int, high: int, kind: str) -> None:
    if not low <= n <= high:
        raise OverflowError(f"{n} does not fit in {kind}")


def _split_sign(text: str) -> tuple[int, str]:
    """Skip leading whitespace and one sign; return the sign and the rest."""
    rest = text.lstrip(" \t\n\r\v\f")
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    return sign, rest


def _parse(text: str, base: str) -> int:
    sign, rest = _split_sign(text)
    radix = len(base)
    result = 0
    for ch in rest:
        position = base.find(ch)
        if position < 0:
            break
        result = result * radix + position
    return result * sign


def _parse_decimal(text: str) -> int:
    sign, rest = _split_sign(text)
    result = 0
    for ch in rest:
        if not isdigit(ch):
            break
        result = result * 10 + ord(ch) - ord("0")
    return result * sign


def atoi(text: str) -> int:
    """Read a signed decimal number, wrapped to a 32-bit signed integer.

    Leading whitespace and a single sign are accepted; reading stops at the
    first character that is not a digit.
    """
    return _wrap(_parse_decimal(text), _INT_BITS)


def atol(text: str) -> int:
    """Read a signed decimal number, wrapped to a 64-bit signed integer."""
    return _wrap(_parse_decimal(text), _LONG_BITS)


def atoi_base(base: str, text: str) -> int:
    """Read a signed number whose digits are the characters of ``base``.

    A digit's value is the position of its first occurrence in ``base``.
    The result is wrapped to a 32-bit signed integer.
    """
    return _wrap(_parse(text, base), _INT_BITS)


def _format(base: str, n: int) -> str:
    if not base:
        raise ValueError("base must not be empty")
    if len(base) < 2 and n != 0:
        raise ValueError("base must have at least two digits")
    radix = len(base)
    magnitude = abs(n)
    digits = []
    while True:
        magnitude, remainder = divmod(magnitude, radix)
        digits.append(base[remainder])
        if not magnitude:
            break
    sign = "-" if n < 0 else ""
    return sign + "".join(reversed(digits))


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    _check_range(n, -(1 << 31), (1 << 31) - 1, "a 32-bit signed integer")
    return _format(DECIMAL, n)


def itoa_base(base: str, n: int) -> str:
    """Text of a 32-bit signed integer written with the digits of ``base``."""
    _check_range(n, -(1 << 31), (1 << 31) - 1, "a 32-bit signed integer")
    return _format(base, n)


def ltoa_base(base: str, n: int) -> str:
    """Text of a 64-bit signed integer written with the digits of ``base``."""
    _check_range(n, -(1 << 63), (1 << 63) - 1, "a 64-bit signed integer")
    return _format(base, n)


def ultoa_base(base: str, n: int) -> str:
    """Text of a 64-bit unsigned integer written with the digits of ``base``."""
    _check_range(n, 0, (1 << 64) - 1, "a 64-bit unsigned integer")
    return _format(base, n)


__all__ = [
    "DECIMAL",
    "atoi",
    "atoi_base",
    "atol",
    "itoa",
    "itoa_base",
    "ltoa_base",
    "ultoa_base",
    "isspace",
]
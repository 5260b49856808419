"""Byte-buffer primitives: search, compare, copy, fill and zeroed allocation.

Buffers are bytes-like objects. Functions that write need a writable one,
such as a ``bytearray`` or a writable ``memoryview``. Counts larger than a
buffer, or negative, raise ``ValueError``.
"""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memchr(data, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes, or None.

    ``c`` is narrowed to an unsigned byte before the search.
    """
    _check_count(n, data)
    position = bytes(data[:n]).find(c & 0xFF)
    return None if position < 0 else position


def memcmp(s1, s2, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values; return -1, 0 or 1."""
    _check_count(n, s1, s2)
    left = bytes(s1[:n])
    right = bytes(s2[:n])
    return (left > right) - (left < right)


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``.

    The two regions must not overlap; use :func:`memmove` when they might.
    """
    _check_count(n, dest, src)
    if n:
        dest[:n] = src[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dest``, correct even when they overlap."""
    _check_count(n, dest, src)
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memset(buf, c: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` narrowed to a byte."""
    _check_count(n, buf)
    if n:
        buf[:n] = bytes((c & 0xFF,)) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb`` elements of ``size`` bytes each.

    Raises ``OverflowError`` when the total would not fit in a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb > 0 and SIZE_MAX // nmemb < size:
        raise OverflowError(f"{nmemb} elements of {size} bytes overflow the size limit")
    return bytearray(nmemb * size)


__all__ = [
    "SIZE_MAX",
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "memset",
]
"""Length, search, comparison and bounded copy of terminated text.

Text is treated as ending at its first NUL character, if it has one.
Search results are indices into the text, or None when nothing is found.
"""

from __future__ import annotations

from typing import NamedTuple


class BoundedCopy(NamedTuple):
    """Result of a bounded copy: the text produced and the length it aimed for."""

    text: str
    length: int


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")


def _compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_cstr(s))


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``; searching for NUL gives the length."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    position = text.find(ch)
    return None if position < 0 else position


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``; searching for NUL gives the length."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    position = text.rfind(ch)
    return None if position < 0 else position


def strcmp(s1: str, s2: str) -> int:
    """Compare two texts character by character; return -1, 0 or 1."""
    return _compare(_cstr(s1), _cstr(s2))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` leading characters; return -1, 0 or 1."""
    _check_size(n)
    return _compare(_cstr(s1)[:n], _cstr(s2)[:n])


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0.
    """
    _check_size(n)
    wanted = _cstr(needle)
    if not wanted:
        return 0
    position = _cstr(haystack)[:n].find(wanted)
    return None if position < 0 else position


def strdup(s: str) -> str:
    """A copy of the text up to its terminator."""
    return _cstr(s)


def strlcpy(dst: str, src: str, size: int) -> BoundedCopy:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the full length of ``src``. With a size
    of zero nothing is written and ``dst`` is returned unchanged.
    """
    _check_size(size)
    source = _cstr(src)
    if size == 0:
        return BoundedCopy(dst, len(source))
    return BoundedCopy(source[: size - 1], len(source))


def strlcat(dst: str, src: str, size: int) -> BoundedCopy:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have; when ``size`` does not exceed the length of ``dst``, nothing is
    appended and the length reported is ``size`` plus the length of ``src``.
    """
    _check_size(size)
    target = _cstr(dst)
    source = _cstr(src)
    if size > len(target):
        room = size - len(target) - 1
        return BoundedCopy(target + source[:room], len(target) + len(source))
    return BoundedCopy(target, size + len(source))


__all__ = [
    "BoundedCopy",
    "strchr",
    "strcmp",
    "strdup",
    "strlcat",
    "strlcpy",
    "strlen",
    "strncmp",
    "strnstr",
    "strrchr",
]
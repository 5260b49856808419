"""Building new text from existing text: slicing, joining, trimming, splitting, mapping.

Text is treated as ending at its first NUL character, if it has one.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from .textsearch import strdup


def _separator(sep: str | int) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single separator character, got {sep!r}")
        return sep
    if isinstance(sep, int):
        return chr(sep & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(sep).__name__}")


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at index ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The text of ``s1`` followed by the text of ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    chars = strdup(charset)
    if not chars:
        return strdup(s)
    return strdup(s).strip(chars)


def split(s: str, sep: str | int) -> list[str]:
    """The non-empty runs of ``s`` between occurrences of ``sep``."""
    separator = _separator(sep)
    text = strdup(s)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new text whose each character is ``f(index, character)``.

    ``f`` must return exactly one character.
    """
    mapped = []
    for index, ch in enumerate(strdup(s)):
        result = f(index, ch)
        if not isinstance(result, str):
            raise TypeError(f"mapping must return a character, got {type(result).__name__}")
        if len(result) != 1:
            raise ValueError(f"mapping must return a single character, got {result!r}")
        mapped.append(result)
    return "".join(mapped)


def _is_terminator(item) -> bool:
    return item == "\0" or item == 0


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` on each item of ``s`` up to its terminator.

    ``s`` is a mutable sequence of characters, such as a list of one-character
    strings or a ``bytearray``. When ``f`` returns something other than None,
    that value replaces the item in place.
    """
    for index, item in enumerate(s):
        if _is_terminator(item):
            break
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


__all__ = ["split", "strjoin", "striteri", "strmapi", "strtrim", "substr"]
"""Writing characters, text and numbers straight to file descriptors."""

from __future__ import annotations

import os

from .convert import itoa
from .textsearch import strdup


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str | int, fd: int) -> None:
    """Write one character to ``fd``; an integer code is narrowed to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    elif isinstance(c, int):
        _write_all(fd, bytes((c & 0xFF,)))
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def putstr_fd(s: str, fd: int) -> None:
    """Write the text of ``s`` up to its terminator to ``fd``."""
    _write_all(fd, strdup(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write the text of ``s`` followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to ``fd``."""
    putstr_fd(itoa(n), fd)


__all__ = ["putchar_fd", "putendl_fd", "putnbr_fd", "putstr_fd"]
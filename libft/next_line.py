"""Reading a file descriptor one line at a time.

Lines keep their terminating newline; the last line of a file that does
not end with a newline is returned without one. Bytes are decoded as UTF-8,
with undecodable bytes kept as surrogate escapes so nothing is lost.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 8

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineReader:
    """Reads lines from a file descriptor, ``buffer_size`` bytes at a time.

    Once the end of the input has been reached, or a read has failed, the
    reader stays finished and every further call returns None.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()
        self._scanned = 0
        self._ended = False

    @property
    def ended(self) -> bool:
        """True once the reader will return no more lines."""
        return self._ended

    def _take(self, end: int) -> str:
        line = bytes(self._pending[:end])
        del self._pending[:end]
        self._scanned = 0
        return line.decode(_ENCODING, _ERRORS)

    def read_line(self) -> str | None:
        """The next line, or None when the input is exhausted.

        A failed read marks the reader finished, discards any partial line
        and lets the ``OSError`` propagate.
        """
        if self._ended:
            return None
        while True:
            newline = self._pending.find(b"\n", self._scanned)
            if newline >= 0:
                return self._take(newline + 1)
            self._scanned = len(self._pending)
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._ended = True
                self._pending.clear()
                self._scanned = 0
                raise
            if not chunk:
                self._ended = True
                if not self._pending:
                    return None
                return self._take(len(self._pending))
            self._pending += chunk

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """The next line of ``fd``, or None once it is exhausted.

    Unread input past the returned line is kept between calls for each
    descriptor and dropped when that descriptor reaches its end.
    """
    if fd < 0:
        raise ValueError(f"file descriptor must not be negative, got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line


__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line"]
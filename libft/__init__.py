"""Character, number conversion, byte-buffer, text, formatting, linked-list and line-reading helpers."""

__version__ = "1.0.0"
__all__ = [
    "chars",
    "convert",
    "memory",
    "textsearch",
    "textbuild",
    "output",
    "printf",
    "linked_list",
    "next_line",
]
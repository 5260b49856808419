# libft

A set of small helpers with no third-party dependencies. It covers ASCII character
classification, conversion between integers and text in any base, byte-buffer
operations, searching and building text, a minimal `printf`, a singly linked
list and a buffered line reader over file descriptors.

Text functions treat a string as ending at its first NUL character (`"\0"`),
if it has one.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `libft.chars` | `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`, `isspace`, `tolower`, `toupper` |
| `libft.convert` | `atoi`, `atol`, `atoi_base`, `itoa`, `itoa_base`, `ltoa_base`, `ultoa_base`, `DECIMAL` |
| `libft.memory` | `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`, `bzero`, `calloc`, `SIZE_MAX` |
| `libft.textsearch` | `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strdup`, `strlcpy`, `strlcat`, `BoundedCopy` |
| `libft.textbuild` | `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri` |
| `libft.output` | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` |
| `libft.printf` | `sprintf`, `printf` |
| `libft.linked_list` | `Node`, `LinkedList` |
| `libft.next_line` | `LineReader`, `get_next_line`, `BUFFER_SIZE` |

## Characters

The functions in `libft.chars` take a one-character string or an integer code.
`tolower` and `toupper` return a string for a string and an integer for an
integer; anything that is not an ASCII letter of the other case comes back
unchanged.

## Numbers and text

`atoi`, `atol` and `atoi_base` skip leading whitespace, accept one `+` or `-`
and stop at the first character that is not a digit. `atoi` and `atoi_base`
wrap the result to a 32-bit signed integer, `atol` to a 64-bit one. In
`atoi_base`, a digit's value is its position in the base string.

`itoa`, `itoa_base`, `ltoa_base` and `ultoa_base` write an integer in decimal or
in the digits of a base string. A value outside the 32-bit signed, 64-bit
signed or 64-bit unsigned range respectively raises `OverflowError`; an empty
base raises `ValueError`.

```python
from libft.convert import atoi_base, itoa_base, atol

atoi_base("0123456789abcdef", "1f")     # 31
itoa_base("0123456789abcdef", -100)     # "-64"
atol("-3000000000")                     # -3000000000
```

## Byte buffers

`libft.memory` works on bytes-like objects; the writing functions (`memcpy`,
`memmove`, `memset`, `bzero`) need a writable one such as a `bytearray`.
`memchr` returns an index or None. A negative count, or one larger than a
buffer, raises `ValueError`. `calloc` returns a zero-filled `bytearray` and
raises `OverflowError` when the total size would not fit in 64 bits.

## Searching text

`strchr`, `strrchr` and `strnstr` return an index or None. `strcmp` and
`strncmp` return -1, 0 or 1. `strlcpy` and `strlcat` return a `BoundedCopy`
named tuple of the resulting text and the length the full copy would have had:

```python
from libft.textsearch import strlcpy

strlcpy("", "hello", 3)   # BoundedCopy(text='he', length=5)
```

## Building text

```python
from libft.textbuild import split, strtrim, strmapi

split("  hello  world ", " ")                    # ["hello", "world"]
strtrim("xxhixx", "x")                           # "hi"
strmapi("abc", lambda i, ch: ch.upper())         # "ABC"
```

`striteri` calls a function on each item of a mutable sequence (for example a
list of characters or a `bytearray`) up to its terminator, and stores any
non-None return value back in place.

## Writing to file descriptors

`libft.output` writes straight to an operating-system file descriptor with
`os.write`: `putchar_fd`, `putstr_fd`, `putendl_fd` (adds a newline) and
`putnbr_fd` (a 32-bit signed integer in decimal).

## Formatting

`sprintf` returns the formatted text; `printf` writes it to `file` (standard
output by default) and returns the number of characters written. The supported
conversions are `%c %s %d %i %u %x %X %p %%`. There are no widths, precisions
or flags; any other character after `%` is written as is together with the `%`.
`%s` of None gives `(null)`, `%p` of None or zero gives `(nil)`. Too few
arguments raise `TypeError`, and a format ending in a lone `%` raises
`ValueError`.

```python
from libft.printf import sprintf

sprintf("%d items, %x in hex", 42, 255)   # "42 items, ff in hex"
```

## Linked list

```python
from libft.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)   # [0, 2, 4, 6]
len(doubled)    # 4
```

`LinkedList` also has `push_back`, `last` (the last `Node`, or None), `clear`
(optionally passing each content to a delete function) and `iterate`. In `map`,
a mapping that returns None or raises makes the contents produced so far go to
the delete function; a None result then raises `ValueError`.

## Reading lines

`LineReader` reads a file descriptor `buffer_size` bytes at a time (8 by
default) and returns lines with their newline kept; the last line is returned
without one if the input does not end with a newline. Bytes are decoded as
UTF-8, with undecodable bytes kept as surrogate escapes. Once the input ends,
or a read fails, the reader returns None from then on.

```python
import os
from libft.next_line import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 8):
    print(line, end="")
os.close(fd)
```

`get_next_line(fd)` returns the next line of a descriptor, keeping a reader
per descriptor between calls and dropping it once that descriptor is exhausted.

## What it does not do

This is a library only: it installs no command-line program, and its `printf`
is limited to the conversions listed above.
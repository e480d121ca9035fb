# pipex

A collection of small, dependency-free helpers for ASCII characters, byte
buffers, strings, printf-style output and line-by-line reading from file
descriptors.

## Installation

```sh
pip install .
```

## Modules

### `pipex.charclass`

ASCII classification and case conversion. Each function takes a
one-character string or an integer code point.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return a bool.
- `to_upper` and `to_lower` convert ASCII letters only, and return a value of
  the same kind they were given (`to_upper("a") == "A"`, `to_upper(97) == 65`).

### `pipex.byteops`

Operations on `bytearray` (or writable `memoryview`) buffers:

- `memset(buffer, c, n)` and `bzero(buffer, n)` fill the first `n` bytes in place.
- `memcpy(dest, src, n)` copies `n` bytes to the start of `dest`.
- `memmove(buffer, dest, src, n)` copies `n` bytes between two offsets of one
  buffer; the ranges may overlap.
- `memchr(data, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(first, second, n)` returns the difference of the first differing bytes, or 0.
- `calloc(count, size)` returns a zero-filled `bytearray`; it raises
  `OverflowError` when the total exceeds a 64-bit size.

Counts larger than a buffer raise `IndexError`; negative counts raise `ValueError`.

### `pipex.textconv`

- `atoi(text)` parses an optional sign followed by digits. Leading whitespace
  is not skipped, and values outside the 32-bit signed range give 0.
- `itoa(n)` formats a 32-bit signed integer and raises `OverflowError` otherwise.
- `split(text, sep)` splits on one character and drops empty pieces.
- `strtrim(text, charset)`, `substr(text, start, length)`,
  `strjoin(first, second)` and `strdup(text)`.

### `pipex.textsearch`

Search and comparison functions that return indices instead of pointers and
treat a NUL character as the end of a string:

- `strlen`, `strchr`, `strrchr` and `strnstr(haystack, needle, limit)`.
- `strncmp(first, second, n)` returns the difference of the first differing code points.
- `strlcpy(src, size)` and `strlcat(dest, src, size)` return a tuple of the
  resulting text and the length the full result would have had.
- `strmapi(text, func)` builds a new string from `func(index, char)`.
- `striteri(chars, func)` updates a mutable sequence of characters in place.

### `pipex.output`

- `put_char`, `put_str`, `put_endl` and `put_nbr` write to an optional
  `stream` (default `sys.stdout`). `put_str(None)` and `put_endl(None)`
  write nothing.
- `format_printf(fmt, *args)` supports `%c %s %d %i %u %x %X %p %%`. Integers
  are reduced to 32 bits as a C `int` or `unsigned int` would hold them, a
  `None` string prints as `(null)`, and a `None` or 0 pointer prints as
  `(nil)`. Unknown conversions produce nothing and consume no argument.
- `print_formatted(fmt, *args, stream=None)` writes the result and returns
  the number of characters written.

```python
from pipex.output import format_printf

format_printf("%d items at %x", 42, 255)   # '42 items at ff'
format_printf("%s|%u", None, -1)           # '(null)|4294967295'
```

### `pipex.linereader`

`LineReader(fd, buffer_size=5)` reads from a file descriptor or a binary file
object at most `buffer_size` bytes at a time. `read_line()` returns the next
line as `bytes`, newline included, or `None` at the end; iterating over the
reader yields every remaining line. `read_lines(fd, buffer_size)` is a
generator over the same lines.

```python
from pipex.linereader import read_lines

with open("in.txt", "rb") as handle:
    for line in read_lines(handle, 5):
        print(line.decode(), end="")
```

## What this package does not do

The package has no command-line program and does not run commands or
connect them with pipes. It provides only the helper modules listed above.

## Tests

```sh
pip install ".[test]"
pytest
```
"""String searching, comparison, bounded copying and per-character mapping.

Searches return indices into the given text rather than pointers, and None
where nothing is found. A NUL character ends a string for the functions
that compare or measure text, as it does for C strings.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

__all__ = [
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strlcpy",
    "strlcat",
    "strlen",
    "strmapi",
    "striteri",
]

_NUL = "\0"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c)


def _terminated(text: str) -> str:
    """Return the part of ``text`` before its first NUL character."""
    return text.partition(_NUL)[0]


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL of ``text``."""
    return len(_terminated(_require_str(text, "text")))


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    body = _terminated(_require_str(text, "text"))
    target = _char(c)
    if target == _NUL:
        return len(body)
    index = body.find(target)
    return None if index == -1 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    body = _terminated(_require_str(text, "text"))
    target = _char(c)
    if target == _NUL:
        return len(body)
    index = body.rfind(target)
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of the first ``needle`` lying wholly within the first
    ``limit`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    hay = _terminated(_require_str(haystack, "haystack"))
    wanted = _terminated(_require_str(needle, "needle"))
    _check_size(limit)
    if not wanted:
        return 0
    index = hay[:limit].find(wanted)
    return None if index == -1 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points at the first position where
    they differ, the end of a string counting as 0; returns 0 when equal.
    """
    _require_str(first, "first")
    _require_str(second, "second")
    _check_size(n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, at most ``size - 1`` characters, and the length
    of ``src``. A size of 0 copies nothing.
    """
    body = _terminated(_require_str(src, "src"))
    _check_size(size)
    if size == 0:
        return "", len(body)
    return body[:size - 1], len(body)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` is 0 the length of ``src`` is returned; when ``size`` does
    not exceed the length of ``dest`` nothing is appended and
    ``size + strlen(src)`` is returned.
    """
    head = _terminated(_require_str(dest, "dest"))
    tail = _terminated(_require_str(src, "src"))
    _check_size(size)
    if size == 0:
        return head, len(tail)
    if size <= len(head):
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    body = _terminated(_require_str(text, "text"))
    if not callable(func):
        raise TypeError("func must be callable")
    return "".join(_char(func(index, ch)) for index, ch in enumerate(body))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply ``func(index, char)`` to each character of ``text`` in place.

    ``text`` is a mutable sequence of characters. When ``func`` returns a
    character it replaces the one at that index; None leaves it unchanged.
    Processing stops at the first NUL. The sequence is returned.
    """
    if isinstance(text, (str, bytes)) or not isinstance(text, MutableSequence):
        raise TypeError("text must be a mutable sequence of characters")
    if not callable(func):
        raise TypeError("func must be callable")
    for index, ch in enumerate(list(text)):
        if ch == _NUL:
            break
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = _char(replacement)
    return text
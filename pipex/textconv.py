"""String conversion helpers: integer parsing and formatting, splitting,
trimming, slicing and joining."""

from __future__ import annotations

from pipex.charclass import is_digit

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strjoin",
    "strdup",
]

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def atoi(text: str) -> int:
    """Parse the leading integer of ``text``.

    An optional single ``+`` or ``-`` may come first; parsing stops at the
    first non-digit. Leading whitespace is not skipped. A value outside the
    32-bit signed range yields 0, as does text with no leading digits.
    """
    _require_str(text, "text")
    negative = False
    rest = text
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        negative = True
        rest = rest[1:]

    digits = []
    for ch in rest:
        if not is_digit(ch):
            break
        digits.append(ch)
    if not digits:
        return 0

    value = int("".join(digits))
    if negative:
        value = -value
    if value > INT_MAX or value < INT_MIN:
        return 0
    return value


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed integer range")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    _require_str(text, "text")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end of ``text`` yields an empty string.
    """
    _require_str(text, "text")
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of ``first`` and ``second``."""
    return _require_str(first, "first") + _require_str(second, "second")


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(_require_str(text, "text"))
"""Writing characters, strings and numbers to text streams, and a small
printf-style formatter.

Every writer takes an optional ``stream``, any object with a ``write``
method. When it is omitted the current ``sys.stdout`` is used.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, Optional, TextIO

from pipex.textconv import itoa

__all__ = [
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
    "format_printf",
    "print_formatted",
]

_UINT_MODULUS = 2**32
_INT_BIAS = 2**31
_POINTER_MODULUS = 2**64

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _resolve(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(value: Any) -> str:
    """Return ``value`` as a single character; integers keep their low byte."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"expected a character or an int, got {type(value).__name__}")


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def put_char(c: int | str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream``."""
    _resolve(stream).write(_as_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is None:
        return
    _resolve(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _resolve(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of the 32-bit signed integer ``n``."""
    _resolve(stream).write(itoa(n))


def _convert_char(value: Any, spec: str) -> str:
    return _as_char(value)


def _convert_str(value: Any, spec: str) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _convert_signed(value: Any, spec: str) -> str:
    number = _require_int(value, spec)
    wrapped = (number + _INT_BIAS) % _UINT_MODULUS - _INT_BIAS
    return str(wrapped)


def _convert_unsigned(value: Any, spec: str) -> str:
    return str(_require_int(value, spec) % _UINT_MODULUS)


def _convert_hex(value: Any, spec: str) -> str:
    return format(_require_int(value, spec) % _UINT_MODULUS, spec)


def _convert_pointer(value: Any, spec: str) -> str:
    address = value if isinstance(value, int) or value is None else id(value)
    if not address:
        return NULL_POINTER
    return "0x" + format(address % _POINTER_MODULUS, "x")


_CONVERSIONS: dict[str, Callable[[Any, str], str]] = {
    "c": _convert_char,
    "s": _convert_str,
    "d": _convert_signed,
    "i": _convert_signed,
    "u": _convert_unsigned,
    "x": _convert_hex,
    "X": _convert_hex,
    "p": _convert_pointer,
}


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with the conversions %c %s %d %i %u %x %X %p and %%.

    An unknown conversion produces nothing and consumes no argument; a lone
    ``%`` at the end of ``fmt`` is dropped. Integers are reduced to 32 bits
    the way a C ``int`` or ``unsigned int`` would hold them. A pointer that
    is None or 0 prints as ``(nil)``; a non-integer object prints its id.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a str, got {type(fmt).__name__}")
    parts: list[str] = []
    chars = iter(fmt)
    remaining = iter(args)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            parts.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        parts.append(convert(value, spec))
    return "".join(parts)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``format_printf(fmt, *args)`` to ``stream`` and return the
    number of characters written."""
    text = format_printf(fmt, *args)
    _resolve(stream).write(text)
    return len(text)
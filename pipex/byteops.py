"""Byte-buffer primitives: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Union

__all__ = [
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "memset",
]

Buffer = Union[bytearray, memoryview]
ByteData = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def _check_range(buffer: Buffer, start: int, n: int) -> None:
    if start < 0 or start + n > len(buffer):
        raise IndexError(
            f"range [{start}, {start + n}) lies outside a buffer of {len(buffer)} bytes"
        )


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes.

    Raises OverflowError when the total size cannot be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError(f"{count} elements of {size} bytes overflow the size limit")
    return bytearray(count * size)


def memchr(data: ByteData, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` among the first
    ``n`` bytes of ``data``, or None when there is none."""
    _check_count(n, len(data))
    target = c & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index == -1 else index


def memcmp(first: ByteData, second: ByteData, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0 when equal.
    """
    _check_count(n, len(first), len(second))
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Buffer, src: ByteData, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset
    ``dest``; the two ranges may overlap."""
    _check_count(n)
    _check_range(buffer, src, n)
    _check_range(buffer, dest, n)
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with the byte ``c``."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer
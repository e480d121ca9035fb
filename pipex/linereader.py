"""Reading a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import BinaryIO, Optional, Union

__all__ = ["LineReader", "read_lines", "BUFFER_SIZE"]

BUFFER_SIZE = 5

Source = Union[int, BinaryIO]


class LineReader:
    """Return successive lines, newline included, from a file descriptor or
    a binary file object, reading at most ``buffer_size`` bytes at a time.

    Unread bytes after a returned line are kept for the next call.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(fd, bool):
            raise TypeError("fd must be a file descriptor or a binary file")
        if isinstance(fd, int):
            if fd < 0:
                raise ValueError(f"file descriptor must not be negative, got {fd}")
        elif not hasattr(fd, "read"):
            raise TypeError("fd must be a file descriptor or a binary file")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._source = fd
        self._buffer_size = buffer_size
        self._stash = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        chunk = self._source.read(self._buffer_size)
        if chunk is None:
            return b""
        if not isinstance(chunk, (bytes, bytearray)):
            raise TypeError("the file must be opened in binary mode")
        return bytes(chunk)

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None when nothing is left to read."""
        while b"\n" not in self._stash:
            chunk = self._read_chunk()
            if not chunk:
                break
            self._stash += chunk
        if not self._stash:
            return None
        newline = self._stash.find(b"\n")
        end = len(self._stash) if newline == -1 else newline + 1
        line = bytes(self._stash[:end])
        del self._stash[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(fd: Source, buffer_size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd, buffer_size)
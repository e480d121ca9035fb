"""Helpers for ASCII characters, byte buffers, strings, printf-style output and line reading."""

__version__ = "0.1.0"
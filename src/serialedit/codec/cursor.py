"""Byte cursor for reading the envelope body.

This module provides the low-level reader the decoder walks the body with.
Markers are recognized by anchored regular expressions at the current
position; payloads are read by count, never by searching for a delimiter.
"""

from __future__ import annotations

import re


class ByteCursor:
    """Reads markers and fixed-length runs from a byte buffer.

    Example:
        >>> cursor = ByteCursor(b'i:0;s:5:"hello";')
        >>> cursor.match(re.compile(rb"i:(\\d+);")).group(1)
        b'0'
        >>> cursor.position()
        4
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a cursor at the start of ``data``.

        Args:
            data: Byte buffer to read
        """
        self._data = data
        self._position = 0

    def match(self, pattern: re.Pattern[bytes]) -> re.Match[bytes] | None:
        """Match ``pattern`` at the current position and advance past it.

        Args:
            pattern: Compiled bytes pattern

        Returns:
            The match, or None if the pattern does not match here (the
            position is left unchanged)
        """
        found = pattern.match(self._data, self._position)
        if found is not None:
            self._position = found.end()
        return found

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly ``num_bytes`` bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from buffer

        Raises:
            ValueError: If num_bytes is negative
            IndexError: If not enough bytes are available
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")

        if num_bytes > self.bytes_remaining():
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )

        start = self._position
        self._position += num_bytes
        return self._data[start : self._position]

    def expect(self, literal: bytes) -> None:
        """Consume ``literal`` at the current position.

        Raises:
            ValueError: If the buffer does not continue with ``literal``
        """
        end = self._position + len(literal)
        if self._data[self._position : end] != literal:
            found = self._data[self._position : end]
            raise ValueError(f"Expected {literal!r} at byte {self._position}, found {found!r}")
        self._position = end

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current byte position."""
        return self._position

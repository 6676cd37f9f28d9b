"""A ring buffer of previously entered commands."""

from __future__ import annotations


class History:
    """Fixed-capacity command history with a browsing cursor."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("history capacity must be positive")
        self.capacity = capacity
        self._buffer: list[str | None] = [None] * capacity
        self._begin = 0
        self._cursor = 0

    def push(self, command: str) -> None:
        """Store a command, overwriting the oldest one when full."""
        self._buffer[self._begin] = command
        self._begin = (self._begin + 1) % self.capacity
        self._cursor = self._begin

    def current(self) -> str | None:
        """Command under the cursor, or None for an empty slot."""
        return self._buffer[self._cursor]

    def previous(self) -> None:
        """Move the cursor one entry back, wrapping around."""
        self._cursor = (self._cursor - 1) % self.capacity

    def next(self) -> None:
        """Move the cursor one entry forward, wrapping around."""
        self._cursor = (self._cursor + 1) % self.capacity
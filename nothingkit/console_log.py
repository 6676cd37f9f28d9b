"""A scrolling log of coloured console lines."""

from __future__ import annotations

from typing import Any

from .sprite_font import FONT_CHAR_HEIGHT
from .vec import Vec


class ConsoleLog:
    """Ring buffer of the most recent lines, each with its colour."""

    def __init__(self, font_size: Vec, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("console log capacity must be positive")
        self.font_size = font_size
        self.capacity = capacity
        self._lines: list[str | None] = [None] * capacity
        self._colors: list[Any] = [None] * capacity
        self._cursor = 0

    def push_line(self, line: str, color: Any) -> None:
        """Append a line, replacing the oldest one when the log is full."""
        self._lines[self._cursor] = line
        self._colors[self._cursor] = color
        self._cursor = (self._cursor + 1) % self.capacity

    def layout(self, position: Vec) -> list[tuple[str, Any, Vec]]:
        """Lines oldest first with their colour and screen position.

        Each slot of the log has its own row, so the newest line is always
        on the bottom row and unused slots leave rows empty above it.
        """
        row_height = FONT_CHAR_HEIGHT * self.font_size.y
        placed = []
        for i in range(self.capacity):
            j = (i + self._cursor) % self.capacity
            line = self._lines[j]
            if line is not None:
                placed.append((line, self._colors[j],
                               position + Vec(0.0, row_height * i)))
        return placed
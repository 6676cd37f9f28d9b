"""A stack of variable-sized byte frames."""

from __future__ import annotations


class Stack:
    """Last-in first-out store of non-empty byte strings."""

    def __init__(self) -> None:
        self._frames: list[bytes] = []

    def push(self, element: bytes) -> None:
        data = bytes(element)
        if not data:
            raise ValueError("cannot push an empty element")
        self._frames.append(data)

    def _require_top(self) -> bytes:
        if not self._frames:
            raise IndexError("stack is empty")
        return self._frames[-1]

    def top_size(self) -> int:
        """Size in bytes of the top element."""
        return len(self._require_top())

    def top(self) -> bytes:
        return self._require_top()

    def pop(self) -> None:
        """Remove the top element."""
        self._require_top()
        self._frames.pop()

    def __bool__(self) -> bool:
        """True while the stack holds anything."""
        return bool(self._frames)
"""Reading text files line by line through a bounded buffer."""

from __future__ import annotations

from typing import IO

from .log import log_fail


def trim_endline(s: str) -> str:
    """Drop a single trailing newline, if there is one."""
    return s[:-1] if s.endswith("\n") else s


class LineStream:
    """A text file read in chunks of at most ``capacity - 1`` characters.

    A chunk ends at a newline or when the buffer is full; a line longer
    than the buffer therefore arrives as several chunks.
    """

    def __init__(self, filename: str, mode: str = "r", capacity: int = 256) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        try:
            self._stream: IO[str] = open(filename, mode)
        except OSError as error:
            log_fail(f"Could not open file '{filename}': {error.strerror}\n")
            raise
        self.capacity = capacity
        self._unfinished = False

    def next_chunk(self) -> str | None:
        """Next piece of the current line, or None at end of file."""
        chunk = self._stream.readline(self.capacity - 1)
        if not chunk:
            self._unfinished = False
            return None
        self._unfinished = not chunk.endswith("\n")
        return chunk

    def next_line(self) -> str | None:
        """Skip what is left of the current line and return the next chunk."""
        while self._unfinished:
            self.next_chunk()
        return self.next_chunk()

    def collect_n_lines(self, n: int) -> str | None:
        """The next n lines joined together, or None if the file runs out."""
        parts = []
        for _ in range(n):
            line = self.next_line()
            if line is None:
                return None
            parts.append(line)
        return "".join(parts)

    def collect_until_end(self) -> str:
        """All remaining lines joined together."""
        parts = []
        line = self.next_line()
        while line is not None:
            parts.append(line)
            line = self.next_line()
        return "".join(parts)

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> LineStream:
        return self

    def __exit__(self, *args) -> None:
        self.close()
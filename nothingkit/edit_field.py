"""A single-line text field with Emacs-style editing keys."""

from __future__ import annotations

from typing import Any, Callable

from .events import Key, KeyDown, Mod, TextInput
from .rect import Rect
from .sprite_font import FONT_CHAR_HEIGHT, FONT_CHAR_WIDTH
from .vec import Vec

BUFFER_CAPACITY = 256
CURSOR_Y_OVERFLOW = 10.0
CURSOR_WIDTH = 2.0


def _is_emacs_word(c: str) -> bool:
    """Word characters of the Fundamental Mode syntax table (partial)."""
    return ("$" <= c <= "%"
            or "0" <= c <= "9"
            or "A" <= c <= "Z"
            or "a" <= c <= "z")


class EditField:
    """Editable text of at most BUFFER_CAPACITY characters with a cursor."""

    def __init__(self, font_size: Vec, font_color: Any) -> None:
        self.font_size = font_size
        self.font_color = font_color
        self._text = ""
        self._cursor = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        """Position of the cursor as a character index."""
        return self._cursor

    def _insert_char(self, c: str) -> None:
        if len(self._text) >= BUFFER_CAPACITY:
            return
        self._text = self._text[:self._cursor] + c + self._text[self._cursor:]
        self._cursor += 1

    def _forward_char(self) -> None:
        if self._cursor < len(self._text):
            self._cursor += 1

    def _backward_char(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def _move_beginning_of_line(self) -> None:
        self._cursor = 0

    def _move_end_of_line(self) -> None:
        self._cursor = len(self._text)

    def _forward_word(self) -> None:
        while True:
            self._forward_char()
            if self._cursor >= len(self._text):
                break
            current = self._text[self._cursor]
            preceding = self._text[self._cursor - 1]
            if not _is_emacs_word(current) and _is_emacs_word(preceding):
                break

    def _backward_word(self) -> None:
        while True:
            self._backward_char()
            if self._cursor == 0:
                break
            current = self._text[self._cursor]
            preceding = self._text[self._cursor - 1]
            if _is_emacs_word(current) and not _is_emacs_word(preceding):
                break

    def _kill_region(self, start: int, end: int) -> None:
        if end > len(self._text):
            raise ValueError("region ends past the end of the text")
        if end <= start:
            return
        self._text = self._text[:start] + self._text[end:]
        self._cursor = start

    def _delete_char(self) -> None:
        if self._cursor >= len(self._text):
            return
        self._kill_region(self._cursor, self._cursor + 1)

    def _delete_backward_char(self) -> None:
        if self._cursor == 0:
            return
        self._kill_region(self._cursor - 1, self._cursor)

    def _kill_word(self) -> None:
        start = self._cursor
        self._forward_word()
        self._kill_region(start, self._cursor)

    def _backward_kill_word(self) -> None:
        end = self._cursor
        self._backward_word()
        self._kill_region(self._cursor, end)

    def _kill_to_end_of_line(self) -> None:
        self._kill_region(self._cursor, len(self._text))

    _PLAIN_KEYS: dict[Key, Callable[[EditField], None]] = {
        Key.HOME: _move_beginning_of_line,
        Key.END: _move_end_of_line,
        Key.BACKSPACE: _delete_backward_char,
        Key.DELETE: _delete_char,
        Key.RIGHT: _forward_char,
        Key.LEFT: _backward_char,
    }

    _ALT_KEYS: dict[Key, Callable[[EditField], None]] = {
        Key.BACKSPACE: _backward_kill_word,
        Key.DELETE: _backward_kill_word,
        Key.RIGHT: _forward_word,
        Key.F: _forward_word,
        Key.LEFT: _backward_word,
        Key.B: _backward_word,
        Key.D: _kill_word,
    }

    _CTRL_KEYS: dict[Key, Callable[[EditField], None]] = {
        Key.BACKSPACE: _backward_kill_word,
        Key.DELETE: _kill_word,
        Key.RIGHT: _forward_word,
        Key.LEFT: _backward_word,
        Key.A: _move_beginning_of_line,
        Key.E: _move_end_of_line,
        Key.F: _forward_char,
        Key.B: _backward_char,
        Key.D: _delete_char,
        Key.K: _kill_to_end_of_line,
    }

    def handle_event(self, event: object) -> None:
        """Apply a key press or typed text to the field."""
        if isinstance(event, KeyDown):
            if event.mod & Mod.ALT:
                table = self._ALT_KEYS
            elif event.mod & Mod.CTRL:
                table = self._CTRL_KEYS
            else:
                table = self._PLAIN_KEYS
            action = table.get(event.key)
            if action is not None:
                action(self)
        elif isinstance(event, TextInput):
            if event.mod & (Mod.CTRL | Mod.ALT):
                return
            for c in event.text:
                self._insert_char(c)

    def replace(self, text: str | None) -> None:
        """Replace the contents; None leaves the field empty."""
        self.clean()
        if text is None:
            return
        for c in text:
            self._insert_char(c)

    def clean(self) -> None:
        """Empty the field and move the cursor to the start."""
        self._text = ""
        self._cursor = 0

    def restyle(self, font_size: Vec, font_color: Any) -> None:
        self.font_size = font_size
        self.font_color = font_color

    def cursor_rect(self, position: Vec) -> Rect:
        """Rectangle of the cursor when the text is drawn at position."""
        return Rect(
            position.x + self._cursor * FONT_CHAR_WIDTH * self.font_size.x,
            position.y - CURSOR_Y_OVERFLOW,
            CURSOR_WIDTH,
            FONT_CHAR_HEIGHT * self.font_size.y + CURSOR_Y_OVERFLOW * 2.0,
        )
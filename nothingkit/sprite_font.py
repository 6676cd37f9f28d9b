"""Layout of text drawn from a bitmap font sheet."""

from __future__ import annotations

from .rect import Rect
from .vec import Vec

FONT_CHAR_WIDTH = 7
FONT_CHAR_HEIGHT = 9
FONT_ROW_SIZE = 18

_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 126
_FALLBACK = "?"


def char_rect(c: str) -> tuple[int, int, int, int]:
    """Source rectangle (x, y, w, h) of a character on the font sheet.

    Characters outside the printable ASCII range use the glyph of '?'.
    """
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    code = ord(c)
    if not _FIRST_PRINTABLE <= code <= _LAST_PRINTABLE:
        code = ord(_FALLBACK)
    index = code - _FIRST_PRINTABLE
    return ((index % FONT_ROW_SIZE) * FONT_CHAR_WIDTH,
            (index // FONT_ROW_SIZE) * FONT_CHAR_HEIGHT,
            FONT_CHAR_WIDTH,
            FONT_CHAR_HEIGHT)


def boundary_box(position: Vec, size: Vec, text: str) -> Rect:
    """Rectangle covered by the text drawn at position with the given scale."""
    return Rect(position.x, position.y,
                size.x * FONT_CHAR_WIDTH * len(text),
                size.y * FONT_CHAR_HEIGHT)


def glyph_placements(position: Vec, size: Vec,
                     text: str) -> list[tuple[tuple[int, int, int, int], Rect]]:
    """For each character, its source rectangle and its destination rectangle."""
    placements = []
    for i, c in enumerate(text):
        source = char_rect(c)
        dest = Rect(position.x + FONT_CHAR_WIDTH * i * size.x,
                    position.y,
                    source[2] * size.x,
                    source[3] * size.y)
        placements.append((source, dest))
    return placements
import pytest

from nothingkit.sprite_font import (
    FONT_CHAR_HEIGHT,
    FONT_CHAR_WIDTH,
    boundary_box,
    char_rect,
    glyph_placements,
)
from nothingkit.vec import Vec


def test_space_is_first_glyph():
    assert char_rect(" ") == (0, 0, FONT_CHAR_WIDTH, FONT_CHAR_HEIGHT)


def test_unprintable_characters_fall_back_to_question_mark():
    assert char_rect("\x01") == char_rect("?")
    assert char_rect("\x7f") == char_rect("?")
    assert char_rect("\u00e9") == char_rect("?")


def test_printable_characters_have_distinct_glyphs():
    rects = {char_rect(chr(code)) for code in range(32, 127)}
    assert len(rects) == 127 - 32


def test_char_rect_rejects_strings():
    with pytest.raises(ValueError):
        char_rect("ab")


def test_boundary_box_of_empty_text_has_no_width():
    box = boundary_box(Vec(3.0, 4.0), Vec(2.0, 2.0), "")
    assert box.w == 0.0
    assert (box.x, box.y) == (3.0, 4.0)


def test_boundary_box_grows_with_text():
    short = boundary_box(Vec(0.0, 0.0), Vec(1.0, 1.0), "ab")
    long = boundary_box(Vec(0.0, 0.0), Vec(1.0, 1.0), "abcd")
    assert long.w == 2 * short.w
    assert long.h == short.h


def test_glyph_placements_match_boundary_box():
    position = Vec(10.0, 20.0)
    size = Vec(3.0, 2.0)
    text = "Hello"
    placements = glyph_placements(position, size, text)
    box = boundary_box(position, size, text)
    assert len(placements) == len(text)
    first = placements[0][1]
    last = placements[-1][1]
    assert first.x == box.x
    assert last.x + last.w == pytest.approx(box.x + box.w)
    assert all(dest.h == box.h for _, dest in placements)


def test_glyph_placements_use_char_rects():
    placements = glyph_placements(Vec(0.0, 0.0), Vec(1.0, 1.0), "a\x02")
    assert placements[0][0] == char_rect("a")
    assert placements[1][0] == char_rect("?")
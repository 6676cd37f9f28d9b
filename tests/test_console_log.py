import pytest

from nothingkit.console_log import ConsoleLog
from nothingkit.sprite_font import FONT_CHAR_HEIGHT
from nothingkit.vec import Vec


def test_empty_log_lays_out_nothing():
    log = ConsoleLog(Vec(1.0, 1.0), 4)
    assert log.layout(Vec(0.0, 0.0)) == []


def test_lines_come_oldest_first_with_colors():
    log = ConsoleLog(Vec(1.0, 1.0), 3)
    log.push_line("one", "red")
    log.push_line("two", "blue")
    log.push_line("three", "green")
    placed = log.layout(Vec(0.0, 0.0))
    assert [(text, color) for text, color, _ in placed] == [
        ("one", "red"), ("two", "blue"), ("three", "green")]


def test_oldest_lines_are_dropped():
    log = ConsoleLog(Vec(1.0, 1.0), 2)
    for text in ("a", "b", "c"):
        log.push_line(text, None)
    assert [text for text, _, _ in log.layout(Vec(0.0, 0.0))] == ["b", "c"]


def test_newest_line_is_on_bottom_row():
    font = Vec(3.0, 3.0)
    log = ConsoleLog(font, 3)
    log.push_line("only", None)
    (_, _, pos), = log.layout(Vec(5.0, 10.0))
    assert pos.x == 5.0
    assert pos.y == pytest.approx(10.0 + 2 * FONT_CHAR_HEIGHT * font.y)


def test_rows_are_evenly_spaced():
    font = Vec(2.0, 2.0)
    log = ConsoleLog(font, 3)
    for text in ("a", "b", "c"):
        log.push_line(text, None)
    ys = [pos.y for _, _, pos in log.layout(Vec(0.0, 0.0))]
    assert ys[0] == 0.0
    assert ys[1] - ys[0] == pytest.approx(FONT_CHAR_HEIGHT * font.y)
    assert ys[2] - ys[1] == pytest.approx(FONT_CHAR_HEIGHT * font.y)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ConsoleLog(Vec(1.0, 1.0), 0)
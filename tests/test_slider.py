import pytest

from nothingkit.events import KeyDown, Key, MouseButtonDown, MouseButtonUp, MouseMotion
from nothingkit.rect import Rect
from nothingkit.slider import Slider

BOUNDARY = Rect(100.0, 50.0, 200.0, 30.0)


def test_press_inside_starts_drag():
    slider = Slider(max_value=10.0)
    assert slider.handle_event(MouseButtonDown(150, 60), BOUNDARY) is True
    assert slider.drag is True


def test_press_outside_is_ignored():
    slider = Slider(max_value=10.0)
    assert slider.handle_event(MouseButtonDown(10, 10), BOUNDARY) is False
    assert slider.drag is False


def test_motion_without_drag_keeps_value():
    slider = Slider(value=2.0, max_value=10.0)
    assert slider.handle_event(MouseMotion(250, 60), BOUNDARY) is False
    assert slider.value == 2.0


def test_dragging_to_middle_gives_half_value():
    slider = Slider(max_value=10.0)
    slider.handle_event(MouseButtonDown(150, 60), BOUNDARY)
    assert slider.handle_event(MouseMotion(200, 60), BOUNDARY) is True
    assert slider.value == pytest.approx(5.0)


def test_dragging_is_clamped_to_boundary():
    slider = Slider(max_value=10.0)
    slider.handle_event(MouseButtonDown(150, 60), BOUNDARY)
    slider.handle_event(MouseMotion(1000, 60), BOUNDARY)
    assert slider.value == pytest.approx(10.0)
    slider.handle_event(MouseMotion(-1000, 60), BOUNDARY)
    assert slider.value == 0.0


def test_release_ends_drag():
    slider = Slider(max_value=10.0)
    slider.handle_event(MouseButtonDown(150, 60), BOUNDARY)
    assert slider.handle_event(MouseButtonUp(0, 0), BOUNDARY) is True
    assert slider.drag is False


def test_unrelated_event_during_drag_is_ignored():
    slider = Slider(max_value=10.0, drag=True)
    assert slider.handle_event(KeyDown(Key.UP), BOUNDARY) is False
    assert slider.drag is True


def test_layout_cursor_at_ends():
    core, cursor = Slider(value=0.0, max_value=4.0).layout(BOUNDARY)
    assert cursor.x == BOUNDARY.x
    _, cursor = Slider(value=4.0, max_value=4.0).layout(BOUNDARY)
    assert cursor.x + cursor.w == pytest.approx(BOUNDARY.x + BOUNDARY.w)
    assert cursor.h == BOUNDARY.h


def test_layout_core_is_centered():
    core, _ = Slider(value=1.0, max_value=2.0).layout(BOUNDARY)
    assert core.center().y == pytest.approx(BOUNDARY.center().y)
    assert core.w == BOUNDARY.w
    assert core.h < BOUNDARY.h
"""A vertical list of text items picked with keys or the mouse."""

from __future__ import annotations

from typing import Iterable

from .events import Key, KeyDown, MouseButton, MouseButtonDown, MouseMotion
from .rect import Rect
from .sprite_font import FONT_CHAR_HEIGHT, boundary_box
from .vec import Vec


class ListSelector:
    """Items with a highlight cursor and an optional chosen item."""

    def __init__(self, items: Iterable[str], font_scale: Vec,
                 padding_bottom: float) -> None:
        self.items: tuple[str, ...] = tuple(items)
        self.font_scale = font_scale
        self.padding_bottom = padding_bottom
        self.position = Vec(0.0, 0.0)
        self.cursor = 0
        self.selected: int | None = None

    def item_boxes(self) -> list[tuple[str, Rect, bool]]:
        """Each item with its boundary box and whether it is highlighted."""
        step = FONT_CHAR_HEIGHT * self.font_scale.y + self.padding_bottom
        return [
            (item,
             boundary_box(self.position + Vec(0.0, i * step), self.font_scale, item),
             i == self.cursor)
            for i, item in enumerate(self.items)
        ]

    def size(self, font_scale: Vec, padding_bottom: float) -> Vec:
        """Width of the widest item and the accumulated item spacing."""
        width = 0.0
        height = 0.0
        for item in self.items:
            box = boundary_box(Vec(0.0, 0.0), font_scale, item)
            width = max(width, box.w)
            height += box.y + padding_bottom
        return Vec(width, height)

    def update(self, delta_time: float) -> None:
        """Nothing in the list changes over time."""

    def handle_event(self, event: object) -> None:
        if isinstance(event, KeyDown):
            if event.key == Key.UP:
                if self.cursor > 0:
                    self.cursor -= 1
            elif event.key == Key.DOWN:
                if self.cursor < len(self.items) - 1:
                    self.cursor += 1
            elif event.key == Key.RETURN:
                self.selected = self.cursor
        elif isinstance(event, MouseMotion):
            mouse = event.position
            position = self.position
            for i, item in enumerate(self.items):
                box = boundary_box(position, self.font_scale, item)
                if box.contains_point(mouse):
                    self.cursor = i
                position = position + Vec(0.0, box.h + self.padding_bottom)
        elif isinstance(event, MouseButtonDown):
            if event.button == MouseButton.LEFT:
                self.selected = self.cursor

    def clean_selection(self) -> None:
        """Forget the chosen item."""
        self.selected = None

    def move(self, position: Vec) -> None:
        self.position = position
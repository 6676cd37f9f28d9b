"""A horizontal slider dragged with the mouse."""

from __future__ import annotations

from dataclasses import dataclass

from .events import MouseButtonDown, MouseButtonUp, MouseMotion
from .rect import Rect

CORE_COLOR = (0.0, 0.0, 0.0, 1.0)
CURSOR_COLOR = (1.0, 0.0, 0.0, 1.0)

_CORE_HEIGHT_RATIO = 0.33
_CURSOR_WIDTH_RATIO = 0.1


@dataclass
class Slider:
    drag: bool = False
    value: float = 0.0
    max_value: float = 1.0

    def handle_event(self, event: object, boundary: Rect) -> bool:
        """Update the slider from an event; True if the slider took it."""
        if not self.drag:
            if isinstance(event, MouseButtonDown) and boundary.contains_point(event.position):
                self.drag = True
                return True
            return False

        if isinstance(event, MouseButtonUp):
            self.drag = False
            return True
        if isinstance(event, MouseMotion):
            x = min(max(float(event.x) - boundary.x, 0.0), boundary.w)
            self.value = x / boundary.w * self.max_value
            return True
        return False

    def layout(self, boundary: Rect) -> tuple[Rect, Rect]:
        """The track and the cursor rectangles inside the boundary.

        The track is drawn in CORE_COLOR and the cursor in CURSOR_COLOR.
        """
        core_height = boundary.h * _CORE_HEIGHT_RATIO
        core = Rect(boundary.x,
                    boundary.y + boundary.h * 0.5 - core_height * 0.5,
                    boundary.w,
                    core_height)
        ratio = self.value / self.max_value
        cursor_width = boundary.w * _CURSOR_WIDTH_RATIO
        cursor = Rect(boundary.x + ratio * (boundary.w - cursor_width),
                      boundary.y,
                      cursor_width,
                      boundary.h)
        return core, cursor
"""Text whose letters bob up and down, optionally fading out."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .sprite_font import FONT_CHAR_WIDTH, boundary_box
from .vec import PI, Vec

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)

_ANGULAR_SPEED = 10.0
_WAVE_SPREAD = 10.0
_WAVE_AMPLITUDE = 20.0


@dataclass
class WigglyText:
    text: str
    scale: Vec
    color: Color = WHITE
    angle: float = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the wave."""
        self.angle = math.fmod(self.angle + _ANGULAR_SPEED * delta_time, 2 * PI)

    def size(self) -> Vec:
        """Width and height of the text at its scale."""
        box = boundary_box(Vec(0.0, 0.0), self.scale, self.text)
        return Vec(box.w, box.h)

    def glyph_positions(self, position: Vec) -> list[tuple[str, Vec]]:
        """Each character with the screen position it is drawn at."""
        n = len(self.text)
        return [
            (c, position + Vec(i * FONT_CHAR_WIDTH * self.scale.x,
                               math.sin(self.angle + i / n * _WAVE_SPREAD)
                               * _WAVE_AMPLITUDE))
            for i, c in enumerate(self.text)
        ]


@dataclass
class FadingWigglyText:
    """Wiggly text whose opacity runs down over duration seconds."""

    wiggly_text: WigglyText
    duration: float

    def update(self, delta_time: float) -> None:
        r, g, b, alpha = self.wiggly_text.color
        alpha = max(alpha * self.duration - delta_time, 0.0) / self.duration
        self.wiggly_text.color = (r, g, b, alpha)
        self.wiggly_text.update(delta_time)

    def reset(self) -> None:
        """Make the text fully opaque again."""
        r, g, b, _ = self.wiggly_text.color
        self.wiggly_text.color = (r, g, b, 1.0)

    def size(self) -> Vec:
        return self.wiggly_text.size()

    def glyph_positions(self, position: Vec) -> list[tuple[str, Vec]]:
        return self.wiggly_text.glyph_positions(position)
"""Axis-aligned rectangles, lines and collision helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .vec import Vec

_EPSILON = 1e-6
_MIN_IMPACT_SIDE = 10.0


def _roundf(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class RectSide(IntEnum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3


@dataclass(frozen=True)
class Line:
    p1: Vec
    p2: Vec

    def length(self) -> float:
        dx = self.p1.x - self.p2.x
        dy = self.p1.y - self.p2.y
        return math.sqrt(dx * dx + dy * dy)


@dataclass(frozen=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def position(self) -> Vec:
        return Vec(self.x, self.y)

    def center(self) -> Vec:
        return Vec(self.x + self.w * 0.5, self.y + self.h * 0.5)

    def grow(self, d: float) -> Rect:
        """Rectangle expanded by d on every side."""
        return Rect(self.x - d, self.y - d, self.w + d * 2.0, self.h + d * 2.0)

    def contains_point(self, p: Vec) -> bool:
        return (self.x <= p.x <= self.x + self.w
                and self.y <= p.y <= self.y + self.h)

    def side(self, side: RectSide) -> Line:
        x1, y1 = self.x, self.y
        x2, y2 = self.x + self.w, self.y + self.h
        if side == RectSide.LEFT:
            return Line(Vec(x1, y1), Vec(x1, y2))
        if side == RectSide.RIGHT:
            return Line(Vec(x2, y1), Vec(x2, y2))
        if side == RectSide.TOP:
            return Line(Vec(x1, y1), Vec(x2, y1))
        if side == RectSide.BOTTOM:
            return Line(Vec(x1, y2), Vec(x2, y2))
        raise ValueError(f"unknown rectangle side: {side!r}")

    def rounded(self) -> tuple[int, int, int, int]:
        """Integer (x, y, w, h), each rounded half away from zero."""
        return (_roundf(self.x), _roundf(self.y), _roundf(self.w), _roundf(self.h))


def rect_from_vecs(position: Vec, size: Vec) -> Rect:
    return Rect(position.x, position.y, size.x, size.y)


def rect_from_points(p1: Vec, p2: Vec) -> Rect:
    """Smallest rectangle spanned by two corner points."""
    return rect_from_vecs(
        Vec(min(p1.x, p2.x), min(p1.y, p2.y)),
        Vec(abs(p1.x - p2.x), abs(p1.y - p2.y)),
    )


def rects_overlap_area(rect1: Rect, rect2: Rect) -> Rect:
    x1 = max(rect1.x, rect2.x)
    y1 = max(rect1.y, rect2.y)
    x2 = min(rect1.x + rect1.w, rect2.x + rect2.w)
    y2 = min(rect1.y + rect1.h, rect2.y + rect2.h)
    return Rect(x1, y1, max(0.0, x2 - x1), max(0.0, y2 - y1))


def rects_overlap(rect1: Rect, rect2: Rect) -> bool:
    return (rect1.x + rect1.w > rect2.x
            and rect2.x + rect2.w > rect1.x
            and rect2.y + rect2.h > rect1.y
            and rect1.y + rect1.h > rect2.y)


def rect_boundary2(rect1: Rect, rect2: Rect) -> Rect:
    """Smallest rectangle containing both rectangles."""
    return rect_from_points(
        Vec(min(rect1.x, rect2.x), min(rect1.y, rect2.y)),
        Vec(max(rect1.x + rect1.w, rect2.x + rect2.w),
            max(rect1.y + rect1.h, rect2.y + rect2.h)),
    )


def _side_hit(object_side: Line, int_side: Line) -> bool:
    vertical = (abs(object_side.p1.x - object_side.p2.x) < _EPSILON
                and abs(object_side.p1.x - int_side.p1.x) < _EPSILON
                and abs(object_side.p1.x - int_side.p2.x) < _EPSILON)
    horizontal = (abs(object_side.p1.y - object_side.p2.y) < _EPSILON
                  and abs(object_side.p1.y - int_side.p1.y) < _EPSILON
                  and abs(object_side.p1.y - int_side.p2.y) < _EPSILON)
    return vertical or horizontal


def rect_object_impact(object_rect: Rect, obstacle: Rect) -> tuple[bool, ...]:
    """Which sides of the object touch the obstacle, indexed by RectSide."""
    area = rects_overlap_area(object_rect, obstacle)
    if area.w * area.h <= 0.0:
        return tuple(False for _ in RectSide)
    hits = []
    for side in RectSide:
        int_side = area.side(side)
        hits.append(int_side.length() > _MIN_IMPACT_SIDE
                    and _side_hit(object_rect.side(side), int_side))
    return tuple(hits)


def rect_snap(pivot: Rect, r: Rect) -> tuple[Rect, Vec]:
    """Push r out of pivot along the shorter axis.

    Returns the moved rectangle and the velocity mask that the move implies.
    """
    pivot_c = pivot.center()
    r_c = r.center()
    sx = -1.0 if r_c.x < pivot_c.x else 1.0
    sy = -1.0 if r_c.y < pivot_c.y else 1.0
    cx = pivot_c.x + sx * (pivot.w + r.w) * 0.5
    cy = pivot_c.y + sy * (pivot.h + r.h) * 0.5

    if abs(cx - r_c.x) < abs(cy - r_c.y):
        return Rect(cx - r.w * 0.5, r.y, r.w, r.h), Vec(0.0, 1.0)
    return Rect(r.x, cy - r.h * 0.5, r.w, r.h), Vec(1.0, 0.0)


def rect_impulse(r1: Rect, r2: Rect) -> tuple[Rect, Rect, Vec]:
    """Separate two overlapping rectangles along the cheaper axis.

    Returns both moved rectangles and the velocity mask.
    """
    c1 = r1.center()
    c2 = r2.center()
    overlap_center = rects_overlap_area(r1, r2).center()
    dx, dy = overlap_center.x, overlap_center.y
    sx = 1.0 if c1.x < c2.x else -1.0
    sy = 1.0 if c1.y < c2.y else -1.0
    cx1 = dx - sx * r1.w * 0.5
    cy1 = dy - sy * r1.h * 0.5
    cx2 = dx + sx * r2.w * 0.5
    cy2 = dy + sy * r2.h * 0.5

    horizontal_cost = (Vec(cx1, c1.y) - Vec(cx2, c2.y)).sqr_norm()
    vertical_cost = (Vec(c1.x, cy1) - Vec(c2.x, cy2)).sqr_norm()
    if horizontal_cost < vertical_cost:
        return (Rect(cx1 - r1.w * 0.5, r1.y, r1.w, r1.h),
                Rect(cx2 - r2.w * 0.5, r2.y, r2.w, r2.h),
                Vec(0.0, 1.0))
    return (Rect(r1.x, cy1 - r1.h * 0.5, r1.w, r1.h),
            Rect(r2.x, cy2 - r2.h * 0.5, r2.w, r2.h),
            Vec(1.0, 0.0))


def horizontal_thicc_line(x1: float, x2: float, y: float, thiccness: float) -> Rect:
    if x1 > x2:
        x1, x2 = x2, x1
    return Rect(x1 - thiccness * 0.5, y - thiccness * 0.5,
                x2 - x1 + thiccness, thiccness)


def vertical_thicc_line(y1: float, y2: float, x: float, thiccness: float) -> Rect:
    if y1 > y2:
        y1, y2 = y2, y1
    return Rect(x - thiccness * 0.5, y1 - thiccness * 0.5,
                thiccness, y2 - y1 + thiccness)
"""Triangles in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .rect import Rect
from .vec import PI, PI_2, Vec, rand_float, vec_from_polar


@dataclass(frozen=True)
class Triangle:
    p1: Vec
    p2: Vec
    p3: Vec

    def __iter__(self) -> Iterator[Vec]:
        yield self.p1
        yield self.p2
        yield self.p3

    def sorted_by_y(self) -> Triangle:
        """Same triangle with its points in ascending y order."""
        p1, p2, p3 = self.p1, self.p2, self.p3
        if p1.y > p2.y:
            p1, p2 = p2, p1
        if p2.y > p3.y:
            p2, p3 = p3, p2
        if p1.y > p2.y:
            p1, p2 = p2, p1
        return Triangle(p1, p2, p3)


def equilateral_triangle() -> Triangle:
    """Equilateral triangle inscribed in the unit circle."""
    d = PI_2 / 3.0
    return Triangle(
        Vec(math.cos(0.0), math.sin(0.0)),
        Vec(math.cos(d), math.sin(d)),
        Vec(math.cos(2.0 * d), math.sin(2.0 * d)),
    )


def random_triangle(radius: float) -> Triangle:
    """Triangle with random points within the given radius of the origin."""
    return Triangle(*(vec_from_polar(rand_float(2 * PI), rand_float(radius))
                      for _ in range(3)))


def rect_as_triangles(r: Rect) -> tuple[Triangle, Triangle]:
    """Split a rectangle into two triangles."""
    top_left = Vec(r.x, r.y)
    top_right = Vec(r.x + r.w, r.y)
    bottom_left = Vec(r.x, r.y + r.h)
    bottom_right = Vec(r.x + r.w, r.y + r.h)
    return (Triangle(top_left, top_right, bottom_left),
            Triangle(top_right, bottom_left, bottom_right))
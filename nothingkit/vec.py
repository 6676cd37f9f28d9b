"""Two-dimensional vectors and small numeric helpers."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

PI = 3.14159265359
PI_2 = 2.0 * PI

_NORM_EPSILON = 1e-6


@dataclass(frozen=True)
class Vec:
    """An immutable 2D vector, also used as a point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def arg(self) -> float:
        """Angle of the vector in radians."""
        return math.atan2(self.y, self.x)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def sqr_norm(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def norm(self) -> Vec:
        """Unit vector in the same direction, or the zero vector if too short."""
        length = self.length()
        if length < _NORM_EPSILON:
            return Vec(0.0, 0.0)
        return Vec(self.x / length, self.y / length)

    def scale(self, scalar: float) -> Vec:
        return Vec(self.x * scalar, self.y * scalar)

    def entry_mult(self, other: Vec) -> Vec:
        """Component-wise product."""
        return Vec(self.x * other.x, self.y * other.y)

    def entry_div(self, other: Vec) -> Vec:
        """Component-wise quotient."""
        return Vec(self.x / other.x, self.y / other.y)


Point = Vec


def vec_from_polar(arg: float, mag: float) -> Vec:
    """Vector with the given angle and magnitude."""
    return Vec(math.cos(arg), math.sin(arg)).scale(mag)


def vec_from_points(p1: Vec, p2: Vec) -> Vec:
    """Vector pointing from p1 to p2."""
    return Vec(p2.x - p1.x, p2.y - p1.y)


def rad_to_deg(a: float) -> float:
    return 180 / PI * a


def rand_float(max_value: float) -> float:
    """Random float between 0 and max_value inclusive."""
    return random.uniform(0.0, max_value)


def rand_float_range(lower: float, upper: float) -> float:
    """Random float between lower and upper."""
    return rand_float(upper - lower) + lower
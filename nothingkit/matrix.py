"""3x3 matrices for affine transformations in homogeneous coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce

from .triangle import Triangle
from .vec import Vec


@dataclass(frozen=True)
class Mat3:
    """An immutable 3x3 matrix stored as three rows."""

    rows: tuple

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a Mat3 needs exactly three rows of three values")
        object.__setattr__(self, "rows", rows)

    def __matmul__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Mat3(tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self.rows
        ))

    def transform_point(self, p: Vec) -> Vec:
        """Apply the matrix to a point through homogeneous coordinates."""
        hx, hy, hw = (row[0] * p.x + row[1] * p.y + row[2] for row in self.rows)
        return Vec(hx / hw, hy / hw)

    def transform_triangle(self, t: Triangle) -> Triangle:
        return Triangle(*(self.transform_point(p) for p in t))


IDENTITY = Mat3(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)))


def product(*args: Mat3) -> Mat3:
    """Product of the matrices, multiplied from the right."""
    return reduce(lambda acc, m: m @ acc, reversed(args), IDENTITY)


def trans_mat(x: float, y: float) -> Mat3:
    return Mat3(((1.0, 0.0, x), (0.0, 1.0, y), (0.0, 0.0, 1.0)))


def trans_mat_vec(v: Vec) -> Mat3:
    return trans_mat(v.x, v.y)


def rot_mat(angle: float) -> Mat3:
    c, s = math.cos(angle), math.sin(angle)
    return Mat3(((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)))


def scale_mat(factor: float) -> Mat3:
    return Mat3(((factor, 0.0, 0.0), (0.0, factor, 0.0), (0.0, 0.0, 1.0)))
"""Pixel access on raw surfaces and triangle rasterisation."""

from __future__ import annotations

import math
import sys
from typing import Callable

from .triangle import Triangle
from .vec import Vec

DrawLine = Callable[[int, int, int, int], None]

_EPSILON = 1e-6


def _roundf(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Surface:
    """A block of pixel memory with a fixed pixel size and row pitch."""

    def __init__(self, width: int, height: int, bytes_per_pixel: int, *,
                 pitch: int | None = None, pixels: bytes | None = None,
                 byteorder: str = sys.byteorder) -> None:
        if bytes_per_pixel not in (1, 2, 3, 4):
            raise ValueError(f"unsupported bytes per pixel: {bytes_per_pixel}")
        if byteorder not in ("little", "big"):
            raise ValueError(f"unknown byte order: {byteorder!r}")
        if width < 0 or height < 0:
            raise ValueError("surface dimensions must not be negative")
        if pitch is None:
            pitch = width * bytes_per_pixel
        if pitch < width * bytes_per_pixel:
            raise ValueError("pitch is smaller than a row of pixels")
        size = pitch * height
        if pixels is None:
            pixels = bytearray(size)
        elif len(pixels) < size:
            raise ValueError("pixel buffer is smaller than the surface")
        self.width = width
        self.height = height
        self.bytes_per_pixel = bytes_per_pixel
        self.pitch = pitch
        self.byteorder = byteorder
        self.pixels = bytearray(pixels)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the surface")
        return y * self.pitch + x * self.bytes_per_pixel

    def getpixel(self, x: int, y: int) -> int:
        """Pixel value at (x, y)."""
        offset = self._offset(x, y)
        raw = self.pixels[offset:offset + self.bytes_per_pixel]
        return int.from_bytes(raw, self.byteorder)

    def putpixel(self, x: int, y: int, pixel: int) -> None:
        """Set the pixel at (x, y), keeping only the bytes that fit."""
        offset = self._offset(x, y)
        bpp = self.bytes_per_pixel
        value = pixel & ((1 << (8 * bpp)) - 1)
        self.pixels[offset:offset + bpp] = value.to_bytes(bpp, self.byteorder)


def draw_triangle(t: Triangle, draw_line: DrawLine) -> None:
    """Outline a triangle with three lines."""
    for a, b in ((t.p1, t.p2), (t.p2, t.p3), (t.p3, t.p1)):
        draw_line(_roundf(a.x), _roundf(a.y), _roundf(b.x), _roundf(b.y))


def _inv_slope(a: Vec, b: Vec) -> float:
    dy = b.y - a.y
    # A zero height only happens when the scanline range is empty.
    return (b.x - a.x) / dy if dy != 0.0 else 0.0


def _fill_bottom_flat(t: Triangle, draw_line: DrawLine) -> None:
    slope1 = _inv_slope(t.p1, t.p2)
    slope2 = _inv_slope(t.p1, t.p3)
    x1 = x2 = t.p1.x
    for scanline in range(_roundf(t.p1.y), _roundf(t.p2.y)):
        draw_line(_roundf(x1), scanline, _roundf(x2), scanline)
        x1 += slope1
        x2 += slope2


def _fill_top_flat(t: Triangle, draw_line: DrawLine) -> None:
    slope1 = _inv_slope(t.p1, t.p3)
    slope2 = _inv_slope(t.p2, t.p3)
    x1 = x2 = t.p3.x
    for scanline in range(_roundf(t.p3.y), _roundf(t.p1.y), -1):
        draw_line(_roundf(x1), scanline, _roundf(x2), scanline)
        x1 -= slope1
        x2 -= slope2


def fill_triangle(t: Triangle, draw_line: DrawLine) -> None:
    """Fill a triangle with horizontal scanlines."""
    t = t.sorted_by_y()
    if abs(t.p2.y - t.p3.y) < _EPSILON:
        _fill_bottom_flat(t, draw_line)
    elif abs(t.p1.y - t.p2.y) < _EPSILON:
        _fill_top_flat(t, draw_line)
    else:
        p4 = Vec(t.p1.x + ((t.p2.y - t.p1.y) / (t.p3.y - t.p1.y)) * (t.p3.x - t.p1.x),
                 t.p2.y)
        _fill_bottom_flat(Triangle(t.p1, t.p2, p4), draw_line)
        _fill_top_flat(Triangle(t.p2, p4, t.p3), draw_line)
        draw_line(_roundf(t.p2.x), _roundf(t.p2.y), _roundf(p4.x), _roundf(p4.y))
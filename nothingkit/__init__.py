"""Geometry, rigid-body physics, text layout and UI widget state for a small 2D platformer."""

__version__ = "0.1.0"
"""Unit conversions and small geometric helpers."""

from __future__ import annotations

import math

DEFAULT_DPI = 96.0


def pixels_to_points(dpi: float, pixels: float) -> float:
    """Return the number of points for a pixel count at a given DPI."""
    return (pixels * 72.0) / dpi


def points_to_pixels(dpi: float, points: float) -> float:
    """Return the number of pixels for a point count at a given DPI."""
    return (points * dpi) / 72.0


def vector_distance(dx: float, dy: float) -> float:
    """Return the length of the vector (dx, dy)."""
    return math.sqrt(dx * dx + dy * dy)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the distance between two points."""
    return vector_distance(x2 - x1, y2 - y1)


def fixed_to_float(x: int) -> float:
    """Convert a 26.6 fixed-point value to a float."""
    return x / 64


def point_to_float_point(x: int, y: int) -> tuple[float, float]:
    """Convert a fixed-point glyph point to floats, flipping the y axis."""
    return fixed_to_float(x), -fixed_to_float(y)
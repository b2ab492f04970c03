"""Bresenham line rasterisation."""

from __future__ import annotations

from collections.abc import Iterator


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a line from (x0, y0) to (x1, y1), both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def polyline_bresenham(*args: float) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a polyline given as flat x, y, x, y, ... coordinates.

    Each segment is drawn whole, so a shared vertex is yielded once per segment.
    """
    if len(args) % 2:
        raise ValueError("polyline coordinates must come in x, y pairs")
    coords = [int(v + 0.5) for v in args]
    points = list(zip(coords[0::2], coords[1::2]))
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        yield from bresenham(ax, ay, bx, by)
"""Glyph contour drawing and font extents."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .util import point_to_float_point

_ON_CURVE = 0x01


class _PathBuilder(Protocol):
    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None: ...


def draw_contour(
    path: _PathBuilder, points: Sequence[tuple[int, int, int]], dx: float, dy: float
) -> None:
    """Draw a closed glyph contour offset by (dx, dy).

    Points are (x, y, flags) in 26.6 fixed-point units; bit 0 of flags marks
    an on-curve point. The first point is taken to be on the curve.
    """
    if not points:
        return
    start_x, start_y = point_to_float_point(points[0][0], points[0][1])
    path.move_to(start_x + dx, start_y + dy)
    q0x, q0y, on0 = start_x, start_y, True
    for px, py, flags in points[1:]:
        qx, qy = point_to_float_point(px, py)
        on = bool(flags & _ON_CURVE)
        if on:
            if on0:
                path.line_to(qx + dx, qy + dy)
            else:
                path.quad_curve_to(q0x + dx, q0y + dy, qx + dx, qy + dy)
        elif not on0:
            mid_x = (q0x + qx) / 2
            mid_y = (q0y + qy) / 2
            path.quad_curve_to(q0x + dx, q0y + dy, mid_x + dx, mid_y + dy)
        q0x, q0y, on0 = qx, qy, on
    if on0:
        path.line_to(start_x + dx, start_y + dy)
    else:
        path.quad_curve_to(q0x + dx, q0y + dy, start_x + dx, start_y + dy)


@dataclass(frozen=True)
class FontExtents:
    """Font metrics: ascent above the baseline, descent (negative) below it."""

    ascent: float
    descent: float
    height: float

    @classmethod
    def scaled(
        cls, min_y: float, max_y: float, units_per_em: float, size: float
    ) -> FontExtents:
        """Build extents from font bounds in font units, scaled to a size."""
        if units_per_em <= 0:
            raise ValueError("units per em must be positive")
        scale = size / units_per_em
        return cls(
            ascent=max_y * scale,
            descent=min_y * scale,
            height=(max_y - min_y) * scale,
        )
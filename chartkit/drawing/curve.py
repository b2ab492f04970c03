"""Flattening of Bezier curves and arcs into line segments."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

CURVE_RECURSION_LIMIT = 32


class _Liner(Protocol):
    def line_to(self, x: float, y: float) -> None: ...


def subdivide_cubic(c: Sequence[float]) -> tuple[list[float], list[float]]:
    """Split a cubic curve (x1, y1, cx1, cy1, cx2, cy2, x2, y2) at its midpoint."""
    c1 = [0.0] * 8
    c2 = [0.0] * 8
    c1[0], c1[1] = c[0], c[1]
    c2[6], c2[7] = c[6], c[7]

    c1[2] = (c[0] + c[2]) / 2
    c1[3] = (c[1] + c[3]) / 2

    mid_x = (c[2] + c[4]) / 2
    mid_y = (c[3] + c[5]) / 2

    c2[4] = (c[4] + c[6]) / 2
    c2[5] = (c[5] + c[7]) / 2

    c1[4] = (c1[2] + mid_x) / 2
    c1[5] = (c1[3] + mid_y) / 2

    c2[2] = (mid_x + c2[4]) / 2
    c2[3] = (mid_y + c2[5]) / 2

    c1[6] = (c1[4] + c2[2]) / 2
    c1[7] = (c1[5] + c2[3]) / 2

    c2[0], c2[1] = c1[6], c1[7]
    return c1, c2


def trace_cubic(liner: _Liner, cubic: Sequence[float], flattening_threshold: float) -> None:
    """Emit line segments approximating a cubic curve to the liner."""
    stack = [list(cubic[:8])]
    while stack:
        c = stack.pop()
        dx = c[6] - c[0]
        dy = c[7] - c[1]
        d2 = abs((c[2] - c[6]) * dy - (c[3] - c[7]) * dx)
        d3 = abs((c[4] - c[6]) * dy - (c[5] - c[7]) * dx)
        degenerate = dx == 0 and dy == 0 and d2 == 0 and d3 == 0
        flat = (d2 + d3) * (d2 + d3) < flattening_threshold * (dx * dx + dy * dy)
        if flat or degenerate or len(stack) == CURVE_RECURSION_LIMIT - 1:
            liner.line_to(c[6], c[7])
        else:
            first, second = subdivide_cubic(c)
            stack.append(second)
            stack.append(first)


def subdivide_quad(c: Sequence[float]) -> tuple[list[float], list[float]]:
    """Split a quadratic curve (x1, y1, cx, cy, x2, y2) at its midpoint."""
    c1 = [0.0] * 6
    c2 = [0.0] * 6
    c1[0], c1[1] = c[0], c[1]
    c2[4], c2[5] = c[4], c[5]
    c1[2] = (c[0] + c[2]) / 2
    c1[3] = (c[1] + c[3]) / 2
    c2[2] = (c[2] + c[4]) / 2
    c2[3] = (c[3] + c[5]) / 2
    c1[4] = (c1[2] + c2[2]) / 2
    c1[5] = (c1[3] + c2[3]) / 2
    c2[0], c2[1] = c1[4], c1[5]
    return c1, c2


def trace_quad(liner: _Liner, quad: Sequence[float], flattening_threshold: float) -> None:
    """Emit line segments approximating a quadratic curve to the liner.

    Stops at once if a piece has a zero control-point distance.
    """
    stack = [list(quad[:6])]
    while stack:
        c = stack.pop()
        dx = c[4] - c[0]
        dy = c[5] - c[1]
        d = abs((c[2] - c[4]) * dy - (c[3] - c[5]) * dx)
        if d == 0:
            return
        if d * d < flattening_threshold * (dx * dx + dy * dy) or (
            len(stack) == CURVE_RECURSION_LIMIT - 1
        ):
            liner.line_to(c[4], c[5])
        else:
            first, second = subdivide_quad(c)
            stack.append(second)
            stack.append(first)


def trace_arc(
    liner: _Liner,
    x: float,
    y: float,
    rx: float,
    ry: float,
    start: float,
    angle: float,
    scale: float,
) -> tuple[float, float]:
    """Emit line segments along an arc and return its end point."""
    end = start + angle
    clockwise = angle >= 0
    ra = (abs(rx) + abs(ry)) / 2
    da = math.acos(ra / (ra + 0.125 / scale)) * 2
    if not clockwise:
        da = -da
    current = start + da
    while (current < end - da / 4) == clockwise:
        cur_x = x + math.cos(current) * rx
        cur_y = y + math.sin(current) * ry
        current += da
        liner.line_to(cur_x, cur_y)
    return x + math.cos(end) * rx, y + math.sin(end) * ry
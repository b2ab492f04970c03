"""Colour maps for turning values into colours."""

from __future__ import annotations

from .drawing.color import Color, color_channel_from_float


def jet(v: float, vmin: float, vmax: float) -> Color:
    """Map v within [vmin, vmax] to a colour running blue, cyan, yellow, red."""
    dv = vmax - vmin
    if dv == 0:
        raise ValueError("vmin and vmax must differ")
    v = min(max(v, vmin), vmax)
    r = g = b = 0xFF
    if v < vmin + 0.25 * dv:
        r = 0
        g = color_channel_from_float(4 * (v - vmin) / dv)
    elif v < vmin + 0.5 * dv:
        r = 0
        b = color_channel_from_float(1 + 4 * (vmin + 0.25 * dv - v) / dv)
    elif v < vmin + 0.75 * dv:
        r = color_channel_from_float(4 * (v - vmin - 0.5 * dv) / dv)
        b = 0
    else:
        g = color_channel_from_float(1 + 4 * (vmin + 0.75 * dv - v) / dv)
        b = 0
    return Color(r, g, b, 0xFF)
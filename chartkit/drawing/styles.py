"""Drawing style enumerations and style records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .color import Color


class FillRule(IntEnum):
    """How the inside of a shape is decided."""

    EVEN_ODD = 0
    WINDING = 1


class LineCap(IntEnum):
    """Style of line ends."""

    ROUND = 0
    BUTT = 1
    SQUARE = 2


class LineJoin(IntEnum):
    """Style of segment joints."""

    BEVEL = 0
    ROUND = 1
    MITER = 2


class Valign(IntEnum):
    """Vertical text alignment."""

    TOP = 0
    CENTER = 1
    BOTTOM = 2
    BASELINE = 3


class Halign(IntEnum):
    """Horizontal text alignment."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class ScalingPolicy(IntEnum):
    """How an image is scaled into a target rectangle."""

    NONE = 0
    STRETCH = 1
    WIDTH = 2
    HEIGHT = 3
    FIT = 4
    SAME_AREA = 5
    FILL = 6


class ImageFilter(IntEnum):
    """Resampling filter used when drawing images."""

    LINEAR = 0
    BILINEAR = 1
    BICUBIC = 2


@dataclass
class StrokeStyle:
    """Attributes used to stroke a path; an empty dash list draws a plain line."""

    color: Color | None = None
    width: float = 0.0
    line_cap: LineCap = LineCap.ROUND
    line_join: LineJoin = LineJoin.BEVEL
    dash_offset: float = 0.0
    dash: list[float] = field(default_factory=list)


@dataclass
class SolidFillStyle:
    """Attributes of a solid fill."""

    color: Color | None = None
    fill_rule: FillRule = FillRule.EVEN_ODD


@dataclass
class TextStyle:
    """Attributes of drawn text."""

    color: Color | None = None
    size: float = 0.0
    font: Any = None
    halign: Halign = Halign.LEFT
    valign: Valign = Valign.TOP


@dataclass
class ImageScaling:
    """How an image is placed and scaled."""

    halign: Halign = Halign.LEFT
    valign: Valign = Valign.TOP
    width: float = 0.0
    height: float = 0.0
    scaling_policy: ScalingPolicy = ScalingPolicy.NONE
"""A graphic context whose drawing state can be saved and restored."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from .color import COLOR_BLACK, COLOR_WHITE, Color
from .matrix import Matrix
from .path import Path
from .styles import FillRule, LineCap, LineJoin


@dataclass
class ContextStack:
    """One frame of drawing state, linked to the frame saved before it."""

    tr: Matrix = field(default_factory=Matrix.identity)
    path: Path = field(default_factory=Path)
    line_width: float = 1.0
    dash: list[float] = field(default_factory=list)
    dash_offset: float = 0.0
    stroke_color: Color = COLOR_BLACK
    fill_color: Color = COLOR_WHITE
    fill_rule: FillRule = FillRule.EVEN_ODD
    cap: LineCap = LineCap.ROUND
    join: LineJoin = LineJoin.ROUND
    font_size_points: float = 10.0
    font: Any = None
    scale: float = 0.0
    previous: ContextStack | None = None


class StackGraphicContext:
    """Holds the current drawing state and the current path."""

    def __init__(self) -> None:
        self.current = ContextStack()

    @property
    def matrix_transform(self) -> Matrix:
        return self.current.tr

    @matrix_transform.setter
    def matrix_transform(self, tr: Matrix) -> None:
        self.current.tr = tr

    @property
    def stroke_color(self) -> Color:
        return self.current.stroke_color

    @stroke_color.setter
    def stroke_color(self, color: Color) -> None:
        self.current.stroke_color = color

    @property
    def fill_color(self) -> Color:
        return self.current.fill_color

    @fill_color.setter
    def fill_color(self, color: Color) -> None:
        self.current.fill_color = color

    @property
    def fill_rule(self) -> FillRule:
        return self.current.fill_rule

    @fill_rule.setter
    def fill_rule(self, rule: FillRule) -> None:
        self.current.fill_rule = rule

    @property
    def line_width(self) -> float:
        return self.current.line_width

    @line_width.setter
    def line_width(self, width: float) -> None:
        self.current.line_width = width

    @property
    def line_cap(self) -> LineCap:
        return self.current.cap

    @line_cap.setter
    def line_cap(self, cap: LineCap) -> None:
        self.current.cap = cap

    @property
    def line_join(self) -> LineJoin:
        return self.current.join

    @line_join.setter
    def line_join(self, join: LineJoin) -> None:
        self.current.join = join

    @property
    def font_size(self) -> float:
        return self.current.font_size_points

    @font_size.setter
    def font_size(self, size: float) -> None:
        self.current.font_size_points = size

    @property
    def font(self) -> Any:
        return self.current.font

    @font.setter
    def font(self, font: Any) -> None:
        self.current.font = font

    def compose_matrix_transform(self, tr: Matrix) -> None:
        self.current.tr.compose(tr)

    def rotate(self, angle: float) -> None:
        """Rotate the current transform by an angle in radians."""
        self.current.tr.rotate(angle)

    def translate(self, tx: float, ty: float) -> None:
        self.current.tr.translate(tx, ty)

    def scale(self, sx: float, sy: float) -> None:
        self.current.tr.scale(sx, sy)

    def set_line_dash(self, dash: Sequence[float], dash_offset: float) -> None:
        self.current.dash = list(dash)
        self.current.dash_offset = dash_offset

    def begin_path(self) -> None:
        self.current.path.clear()

    def is_empty(self) -> bool:
        return self.current.path.is_empty()

    def last_point(self) -> tuple[float, float]:
        return self.current.path.last_point()

    def move_to(self, x: float, y: float) -> None:
        self.current.path.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self.current.path.line_to(x, y)

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self.current.path.quad_curve_to(cx, cy, x, y)

    def cubic_curve_to(
        self, cx1: float, cy1: float, cx2: float, cy2: float, x: float, y: float
    ) -> None:
        self.current.path.cubic_curve_to(cx1, cy1, cx2, cy2, x, y)

    def arc_to(
        self, cx: float, cy: float, rx: float, ry: float, start_angle: float, delta: float
    ) -> None:
        self.current.path.arc_to(cx, cy, rx, ry, start_angle, delta)

    def close(self) -> None:
        self.current.path.close()

    def save(self) -> None:
        """Push a copy of the current state."""
        cur = self.current
        self.current = ContextStack(
            tr=cur.tr.copy(),
            path=cur.path.copy(),
            line_width=cur.line_width,
            dash=cur.dash,
            dash_offset=cur.dash_offset,
            stroke_color=cur.stroke_color,
            fill_color=cur.fill_color,
            fill_rule=cur.fill_rule,
            cap=cur.cap,
            join=cur.join,
            font_size_points=cur.font_size_points,
            font=cur.font,
            scale=cur.scale,
            previous=cur,
        )

    def restore(self) -> None:
        """Return to the last saved state; does nothing if none was saved."""
        previous = self.current.previous
        if previous is not None:
            self.current.previous = None
            self.current = previous

    @contextmanager
    def saved(self) -> Iterator[StackGraphicContext]:
        """Save the state for the duration of a with block."""
        self.save()
        try:
            yield self
        finally:
            self.restore()
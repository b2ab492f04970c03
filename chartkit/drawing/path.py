"""Vector paths built from move, line, curve and arc commands."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum


class PathComponent(IntEnum):
    """The role of a command, and of its points, in a path."""

    MOVE_TO = 0
    LINE_TO = 1
    QUAD_CURVE_TO = 2
    CUBIC_CURVE_TO = 3
    ARC_TO = 4
    CLOSE = 5


_POINT_COUNTS = {
    PathComponent.MOVE_TO: 2,
    PathComponent.LINE_TO: 2,
    PathComponent.QUAD_CURVE_TO: 4,
    PathComponent.CUBIC_CURVE_TO: 6,
    PathComponent.ARC_TO: 6,
    PathComponent.CLOSE: 0,
}

_LABELS = {
    PathComponent.MOVE_TO: "MoveTo",
    PathComponent.LINE_TO: "LineTo",
    PathComponent.QUAD_CURVE_TO: "QuadCurveTo",
    PathComponent.CUBIC_CURVE_TO: "CubicCurveTo",
    PathComponent.ARC_TO: "ArcTo",
}


@dataclass
class Path:
    """A list of commands with the flat list of points they consume."""

    components: list[PathComponent] = field(default_factory=list)
    points: list[float] = field(default_factory=list)
    _x: float = field(default=0.0, repr=False)
    _y: float = field(default=0.0, repr=False)

    def _append(self, component: PathComponent, *points: float) -> None:
        self.components.append(component)
        self.points.extend(float(p) for p in points)

    def _ensure_started(self) -> None:
        if not self.components:
            self.move_to(0, 0)

    def last_point(self) -> tuple[float, float]:
        """Return the current point of the current sub-path."""
        return self._x, self._y

    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path at (x, y)."""
        self._append(PathComponent.MOVE_TO, x, y)
        self._x, self._y = x, y

    def line_to(self, x: float, y: float) -> None:
        """Add a line to (x, y); starts at the origin if nothing was drawn yet."""
        self._ensure_started()
        self._append(PathComponent.LINE_TO, x, y)
        self._x, self._y = x, y

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Add a quadratic Bezier curve."""
        self._ensure_started()
        self._append(PathComponent.QUAD_CURVE_TO, cx, cy, x, y)
        self._x, self._y = x, y

    def cubic_curve_to(
        self, cx1: float, cy1: float, cx2: float, cy2: float, x: float, y: float
    ) -> None:
        """Add a cubic Bezier curve."""
        self._ensure_started()
        self._append(PathComponent.CUBIC_CURVE_TO, cx1, cy1, cx2, cy2, x, y)
        self._x, self._y = x, y

    def arc_to(
        self, cx: float, cy: float, rx: float, ry: float, start_angle: float, delta: float
    ) -> None:
        """Add an elliptical arc around (cx, cy), sweeping delta radians."""
        end_angle = start_angle + delta
        clockwise = delta >= 0
        if clockwise:
            while end_angle < start_angle:
                end_angle += math.pi * 2.0
        else:
            while start_angle < end_angle:
                start_angle += math.pi * 2.0
        start_x = cx + math.cos(start_angle) * rx
        start_y = cy + math.sin(start_angle) * ry
        if self.components:
            self.line_to(start_x, start_y)
        else:
            self.move_to(start_x, start_y)
        self._append(PathComponent.ARC_TO, cx, cy, rx, ry, start_angle, delta)
        self._x = cx + math.cos(end_angle) * rx
        self._y = cy + math.sin(end_angle) * ry

    def close(self) -> None:
        """Close the current sub-path."""
        self._append(PathComponent.CLOSE)

    def copy(self) -> Path:
        """Return an independent copy."""
        return Path(list(self.components), list(self.points), self._x, self._y)

    def clear(self) -> None:
        """Remove every command and point."""
        self.components.clear()
        self.points.clear()

    def is_empty(self) -> bool:
        return not self.components

    def __str__(self) -> str:
        lines = []
        j = 0
        for component in self.components:
            if component is PathComponent.CLOSE:
                lines.append("Close\n")
                continue
            count = _POINT_COUNTS[component]
            values = ", ".join(f"{p:f}" for p in self.points[j : j + count])
            lines.append(f"{_LABELS[component]}: {values}\n")
            j += count
        return "".join(lines)
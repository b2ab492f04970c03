"""Path flattening into straight segments, with pass-through flatteners."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .curve import trace_arc, trace_cubic, trace_quad
from .matrix import Matrix
from .path import Path, PathComponent


@runtime_checkable
class Liner(Protocol):
    """Receives line segments."""

    def line_to(self, x: float, y: float) -> None: ...


@runtime_checkable
class Flattener(Protocol):
    """Receives flattened path segments."""

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def line_join(self) -> None: ...

    def close(self) -> None: ...

    def end(self) -> None: ...


def flatten(path: Path, flattener: Flattener, scale: float) -> None:
    """Convert a path's curves to straight segments sent to the flattener."""
    points = path.points
    start_x = start_y = 0.0
    i = 0
    for component in path.components:
        if component is PathComponent.MOVE_TO:
            x, y = points[i], points[i + 1]
            start_x, start_y = x, y
            if i != 0:
                flattener.end()
            flattener.move_to(x, y)
            i += 2
        elif component is PathComponent.LINE_TO:
            flattener.line_to(points[i], points[i + 1])
            flattener.line_join()
            i += 2
        elif component is PathComponent.QUAD_CURVE_TO:
            trace_quad(flattener, points[i - 2 :], 0.5)
            flattener.line_to(points[i + 2], points[i + 3])
            i += 4
        elif component is PathComponent.CUBIC_CURVE_TO:
            trace_cubic(flattener, points[i - 2 :], 0.5)
            flattener.line_to(points[i + 4], points[i + 5])
            i += 6
        elif component is PathComponent.ARC_TO:
            x, y = trace_arc(flattener, *points[i : i + 6], scale)
            flattener.line_to(x, y)
            i += 6
        elif component is PathComponent.CLOSE:
            flattener.line_to(start_x, start_y)
            flattener.close()
    flattener.end()


@dataclass
class SegmentedPath:
    """Collects every received point into one flat list.

    Joins, closes and ends are recorded as indices of points (pairs) in
    ``points`` at the moment they were received.
    """

    points: list[float] = field(default_factory=list)
    joins: list[int] = field(default_factory=list)
    closes: list[int] = field(default_factory=list)
    ends: list[int] = field(default_factory=list)

    def _point_count(self) -> int:
        return len(self.points) // 2

    def move_to(self, x: float, y: float) -> None:
        self.points.extend((x, y))

    def line_to(self, x: float, y: float) -> None:
        self.points.extend((x, y))

    def line_join(self) -> None:
        self.joins.append(self._point_count() - 1)

    def close(self) -> None:
        self.closes.append(self._point_count() - 1)

    def end(self) -> None:
        self.ends.append(self._point_count())


@dataclass
class Transformer:
    """Applies a matrix to points before passing them on."""

    tr: Matrix
    flattener: Flattener

    def move_to(self, x: float, y: float) -> None:
        self.flattener.move_to(*self.tr.transform_point(x, y))

    def line_to(self, x: float, y: float) -> None:
        self.flattener.line_to(*self.tr.transform_point(x, y))

    def line_join(self) -> None:
        self.flattener.line_join()

    def close(self) -> None:
        self.flattener.close()

    def end(self) -> None:
        self.flattener.end()


@dataclass
class DemuxFlattener:
    """Forwards every call to each of several flatteners."""

    flatteners: list[Flattener] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        for flattener in self.flatteners:
            flattener.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        for flattener in self.flatteners:
            flattener.line_to(x, y)

    def line_join(self) -> None:
        for flattener in self.flatteners:
            flattener.line_join()

    def close(self) -> None:
        for flattener in self.flatteners:
            flattener.close()

    def end(self) -> None:
        for flattener in self.flatteners:
            flattener.end()
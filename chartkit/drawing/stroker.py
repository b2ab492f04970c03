"""Turning centre lines into outlined stroke polygons."""

from __future__ import annotations

from .flattener import Flattener
from .styles import LineCap, LineJoin
from .util import vector_distance


class LineStroker:
    """Builds the outline of a stroked line and sends it to a flattener on end()."""

    def __init__(self, cap: LineCap, join: LineJoin, flattener: Flattener) -> None:
        self.flattener = flattener
        self.half_line_width = 0.5
        self.cap = cap
        self.join = join
        self._vertices: list[float] = []
        self._rewind: list[float] = []
        self._reset_position()

    def _reset_position(self) -> None:
        self._x = self._y = self._nx = self._ny = 0.0

    def move_to(self, x: float, y: float) -> None:
        self._x, self._y = x, y

    def line_to(self, x: float, y: float) -> None:
        self._line(self._x, self._y, x, y)

    def line_join(self) -> None:
        pass

    def _line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        dx = x2 - x1
        dy = y2 - y1
        d = vector_distance(dx, dy)
        if d == 0:
            return
        nx = dy * self.half_line_width / d
        ny = -(dx * self.half_line_width / d)
        self._vertices.extend((x1 + nx, y1 + ny, x2 + nx, y2 + ny))
        self._rewind.extend((x1 - nx, y1 - ny, x2 - nx, y2 - ny))
        self._x, self._y, self._nx, self._ny = x2, y2, nx, ny

    def close(self) -> None:
        if len(self._vertices) > 1:
            self._vertices.extend(self._vertices[0:2])
            self._rewind.extend(self._rewind[0:2])

    def end(self) -> None:
        vertices = self._vertices
        rewind = self._rewind
        if len(vertices) > 1:
            self.flattener.move_to(vertices[0], vertices[1])
            for x, y in zip(vertices[2::2], vertices[3::2]):
                self.flattener.line_to(x, y)
        back = list(zip(rewind[0::2], rewind[1::2]))
        for x, y in reversed(back):
            self.flattener.line_to(x, y)
        if len(vertices) > 1:
            self.flattener.line_to(vertices[0], vertices[1])
        self.flattener.end()
        self._vertices = []
        self._rewind = []
        self._reset_position()
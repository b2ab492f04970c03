"""Splitting of lines into dashes and gaps."""

from __future__ import annotations

from collections.abc import Sequence

from .flattener import Flattener
from .util import distance


class DashVertexConverter:
    """Cuts incoming lines into dashes before passing them to a flattener.

    Even entries of the dash pattern are drawn lengths, odd entries are gaps.
    """

    def __init__(self, dash: Sequence[float], dash_offset: float, flattener: Flattener) -> None:
        pattern = [float(v) for v in dash]
        if not pattern:
            raise ValueError("dash pattern must not be empty")
        if any(v < 0 for v in pattern):
            raise ValueError("dash lengths must not be negative")
        if sum(pattern) == 0:
            raise ValueError("dash pattern must have a positive total length")
        self.dash = pattern
        self.dash_offset = float(dash_offset)
        self.next = flattener
        self._current = 0
        self._x = 0.0
        self._y = 0.0
        self._distance = 0.0

    def _advance(self) -> None:
        self._current = (self._current + 1) % len(self.dash)

    def _in_gap(self) -> bool:
        return self._current % 2 == 1

    def move_to(self, x: float, y: float) -> None:
        self.next.move_to(x, y)
        self._x, self._y = x, y
        self._distance = self.dash_offset
        self._current = 0

    def line_to(self, x: float, y: float) -> None:
        rest = self.dash[self._current] - self._distance
        while rest < 0:
            self._distance -= self.dash[self._current]
            self._advance()
            rest = self.dash[self._current] - self._distance

        d = distance(self._x, self._y, x, y)
        while d >= rest:
            k = rest / d if d else 0.0
            lx = self._x + k * (x - self._x)
            ly = self._y + k * (y - self._y)
            self._emit(lx, ly)
            d -= rest
            self._x, self._y = lx, ly
            self._advance()
            rest = self.dash[self._current]

        self._distance = d
        self._emit(x, y)
        if self._distance >= self.dash[self._current]:
            self._distance -= self.dash[self._current]
            self._advance()
        self._x, self._y = x, y

    def _emit(self, x: float, y: float) -> None:
        if self._in_gap():
            self.next.end()
            self.next.move_to(x, y)
        else:
            self.next.line_to(x, y)

    def line_join(self) -> None:
        self.next.line_join()

    def close(self) -> None:
        self.next.close()

    def end(self) -> None:
        self.next.end()
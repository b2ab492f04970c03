"""Affine transformation matrices."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence

EPSILON = 1e-6


def _fequals(a: float, b: float) -> bool:
    return abs(a - b) <= EPSILON


def _pairs(points: Sequence[float]) -> Iterator[tuple[float, float]]:
    return zip(points[0::2], points[1::2])


class Matrix:
    """An affine transform stored as (a, b, c, d, tx, ty).

    A point (x, y) maps to (x*a + y*c + tx, x*b + y*d + ty).
    """

    __slots__ = ("_v",)

    def __init__(self, values: Iterable[float]) -> None:
        v = [float(value) for value in values]
        if len(v) != 6:
            raise ValueError(f"a matrix needs 6 values, got {len(v)}")
        self._v = v

    @classmethod
    def identity(cls) -> Matrix:
        return cls((1, 0, 0, 1, 0, 0))

    @classmethod
    def translating(cls, tx: float, ty: float) -> Matrix:
        return cls((1, 0, 0, 1, tx, ty))

    @classmethod
    def scaling_by(cls, sx: float, sy: float) -> Matrix:
        return cls((sx, 0, 0, sy, 0, 0))

    @classmethod
    def rotating(cls, angle: float) -> Matrix:
        """Return a rotation by an angle in radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls((c, s, -s, c, 0, 0))

    @classmethod
    def from_rects(cls, rectangle1: Sequence[float], rectangle2: Sequence[float]) -> Matrix:
        """Return the scale and translation mapping rectangle1 onto rectangle2.

        Rectangles are (x0, y0, x1, y1).
        """
        x_scale = (rectangle2[2] - rectangle2[0]) / (rectangle1[2] - rectangle1[0])
        y_scale = (rectangle2[3] - rectangle2[1]) / (rectangle1[3] - rectangle1[1])
        x_offset = rectangle2[0] - rectangle1[0] * x_scale
        y_offset = rectangle2[1] - rectangle1[1] * y_scale
        return cls((x_scale, 0, 0, y_scale, x_offset, y_offset))

    def __getitem__(self, index: int) -> float:
        return self._v[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._v)

    def __len__(self) -> int:
        return 6

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._v == other._v

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._v!r})"

    def determinant(self) -> float:
        v = self._v
        return v[0] * v[3] - v[1] * v[2]

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        v = self._v
        return x * v[0] + y * v[2] + v[4], x * v[1] + y * v[3] + v[5]

    def transform(self, points: Sequence[float]) -> list[float]:
        """Transform a flat x, y, x, y, ... list; a trailing odd value is kept as is."""
        result: list[float] = []
        for x, y in _pairs(points):
            result.extend(self.transform_point(x, y))
        if len(points) % 2:
            result.append(points[-1])
        return result

    def transform_rectangle(
        self, x0: float, y0: float, x2: float, y2: float
    ) -> tuple[float, float, float, float]:
        """Return the bounding box of a transformed rectangle."""
        p = self.transform([x0, y0, x2, y0, x2, y2, x0, y2])
        p0, p2 = sorted((p[0], p[2]))
        p4, p6 = sorted((p[4], p[6]))
        p1, p3 = sorted((p[1], p[3]))
        p5, p7 = sorted((p[5], p[7]))
        return min(p0, p4), min(p1, p5), max(p2, p6), max(p3, p7)

    def _checked_determinant(self) -> float:
        d = self.determinant()
        if d == 0:
            raise ZeroDivisionError("matrix is not invertible")
        return d

    def inverse_transform_point(self, x: float, y: float) -> tuple[float, float]:
        v = self._v
        d = self._checked_determinant()
        return (
            ((x - v[4]) * v[3] - (y - v[5]) * v[2]) / d,
            ((y - v[5]) * v[0] - (x - v[4]) * v[1]) / d,
        )

    def inverse_transform(self, points: Sequence[float]) -> list[float]:
        """Apply the inverse transform to a flat point list."""
        result: list[float] = []
        for x, y in _pairs(points):
            result.extend(self.inverse_transform_point(x, y))
        if len(points) % 2:
            result.append(points[-1])
        return result

    def vector_transform(self, points: Sequence[float]) -> list[float]:
        """Transform a flat point list, ignoring the translation part."""
        v = self._v
        result: list[float] = []
        for x, y in _pairs(points):
            result.extend((x * v[0] + y * v[2], x * v[1] + y * v[3]))
        if len(points) % 2:
            result.append(points[-1])
        return result

    def inverse(self) -> None:
        """Invert the matrix in place."""
        d = self._checked_determinant()
        t0, t1, t2, t3, t4, t5 = self._v
        self._v = [
            t3 / d,
            -t1 / d,
            -t2 / d,
            t0 / d,
            (t2 * t5 - t3 * t4) / d,
            (t1 * t4 - t0 * t5) / d,
        ]

    def copy(self) -> Matrix:
        return Matrix(self._v)

    def compose(self, other: Matrix) -> None:
        """Replace this matrix with other x self."""
        t0, t1, t2, t3, t4, t5 = self._v
        o = other
        self._v = [
            o[0] * t0 + o[1] * t2,
            o[1] * t3 + o[0] * t1,
            o[2] * t0 + o[3] * t2,
            o[3] * t3 + o[2] * t1,
            o[4] * t0 + o[5] * t2 + t4,
            o[5] * t3 + o[4] * t1 + t5,
        ]

    def scale(self, sx: float, sy: float) -> None:
        v = self._v
        v[0] *= sx
        v[1] *= sx
        v[2] *= sy
        v[3] *= sy

    def translate(self, tx: float, ty: float) -> None:
        v = self._v
        v[4] = tx * v[0] + ty * v[2] + v[4]
        v[5] = ty * v[3] + tx * v[1] + v[5]

    def rotate(self, radians: float) -> None:
        v = self._v
        c = math.cos(radians)
        s = math.sin(radians)
        v[0], v[1], v[2], v[3] = (
            c * v[0] + s * v[2],
            s * v[3] + c * v[1],
            c * v[2] - s * v[0],
            c * v[3] - s * v[1],
        )

    def offset(self) -> tuple[float, float]:
        """Return the translation part."""
        return self._v[4], self._v[5]

    def scale_factors(self) -> tuple[float, float]:
        """Return the diagonal scale entries."""
        return self._v[0], self._v[3]

    def scale_estimate(self) -> float:
        """Return a single scale figure for the matrix."""
        v = self._v
        x = 0.707106781 * v[0] + 0.707106781 * v[1]
        y = 0.707106781 * v[2] + 0.707106781 * v[3]
        return math.sqrt(x * x + y * y)

    def is_close(self, other: Matrix) -> bool:
        """Compare with another matrix within a small tolerance."""
        return all(_fequals(a, b) for a, b in zip(self._v, other))

    def is_identity(self) -> bool:
        return _fequals(self._v[4], 0) and _fequals(self._v[5], 0) and self.is_translation()

    def is_translation(self) -> bool:
        v = self._v
        return _fequals(v[0], 1) and _fequals(v[1], 0) and _fequals(v[2], 0) and _fequals(v[3], 1)
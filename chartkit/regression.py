"""Linear regression over a window of an inner series."""

from __future__ import annotations

import statistics
from dataclasses import dataclass, field
from typing import Any

from .series import ValuesProvider


@dataclass(frozen=True)
class LinearCoefficientSet:
    """Coefficients of y = m*x + b, with the x normalisation used to fit them."""

    m: float = 0.0
    b: float = 0.0
    std_dev: float = 0.0
    avg: float = 0.0

    def coefficients(self) -> tuple[float, float, float, float]:
        """Return (m, b, stdev, avg)."""
        return self.m, self.b, self.std_dev, self.avg


def linear_coefficients(m: float, b: float) -> LinearCoefficientSet:
    """Return a fixed slope and intercept."""
    return LinearCoefficientSet(m=m, b=b)


def normalized_linear_coefficients(
    m: float, b: float, stdev: float, avg: float
) -> LinearCoefficientSet:
    """Return fixed coefficients with their x normalisation."""
    return LinearCoefficientSet(m=m, b=b, std_dev=stdev, avg=avg)


@dataclass
class LinearRegressionSeries:
    """Plots the least-squares line fitted to a window of the inner series."""

    inner_series: ValuesProvider | None = None
    limit: int = 0
    offset: int = 0
    name: str = ""
    style: Any = None
    y_axis: Any = None
    _m: float = field(default=0.0, repr=False)
    _b: float = field(default=0.0, repr=False)
    _avgx: float = field(default=0.0, repr=False)
    _stddevx: float = field(default=0.0, repr=False)

    def _inner(self) -> ValuesProvider:
        if self.inner_series is None:
            raise ValueError("linear regression series requires inner_series to be set")
        return self.inner_series

    def coefficients(self) -> tuple[float, float, float, float]:
        """Return (m, b, stdev, avg), fitting first if needed."""
        if self.is_zero():
            self._compute_coefficients()
        return self._m, self._b, self._stddevx, self._avgx

    def __len__(self) -> int:
        return min(self.effective_limit(), len(self._inner()) - self.offset)

    def effective_limit(self) -> int:
        """The window size; the whole inner series when no limit is set."""
        return self.limit or len(self._inner())

    def end_index(self) -> int:
        """The last index of the window within the inner series."""
        return min(self.offset + self.effective_limit(), len(self._inner()) - 1)

    def _empty(self) -> bool:
        return self.inner_series is None or len(self.inner_series) == 0

    def _fitted_at(self, index: int) -> tuple[float, float]:
        if self.is_zero():
            self._compute_coefficients()
        x, _ = self._inner().values_at(index)
        return x, self._m * self._normalize(x) + self._b

    def values_at(self, index: int) -> tuple[float, float]:
        """Return the x value and the fitted y at a window position."""
        if self._empty():
            return 0.0, 0.0
        return self._fitted_at(min(index + self.offset, len(self._inner())))

    def first_values(self) -> tuple[float, float]:
        if self._empty():
            return 0.0, 0.0
        return self._fitted_at(0)

    def last_values(self) -> tuple[float, float]:
        if self._empty():
            return 0.0, 0.0
        return self._fitted_at(self.end_index())

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        self._inner()

    def is_zero(self) -> bool:
        """Return whether the coefficients have not been computed yet."""
        return self._m == 0 and self._b == 0

    def _normalize(self, x: float) -> float:
        return (x - self._avgx) / self._stddevx

    def _compute_coefficients(self) -> None:
        inner = self._inner()
        start = self.offset
        end = self.end_index()
        p = float(end - start)

        xs = [inner.values_at(index)[0] for index in range(start, end)]
        self._avgx = statistics.fmean(xs) if xs else 0.0
        self._stddevx = statistics.pstdev(xs) if xs else 0.0
        if self._stddevx == 0:
            raise ValueError("regression needs at least two distinct x values")

        sumx = sumy = sumxx = sumxy = 0.0
        for index in range(start, end):
            x, y = inner.values_at(index)
            x = self._normalize(x)
            sumx += x
            sumy += y
            sumxx += x * x
            sumxy += x * y

        denominator = p * sumxx - sumx * sumx
        if denominator == 0:
            raise ValueError("regression needs at least two distinct x values")
        self._m = (p * sumxy - sumx * sumy) / denominator
        self._b = sumy / p - self._m * sumx / p
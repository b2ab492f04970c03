"""Computed series: exponential moving average and histogram."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

DEFAULT_EMA_PERIOD = 12


@runtime_checkable
class ValuesProvider(Protocol):
    """A sequence of (x, y) pairs reachable by index."""

    def __len__(self) -> int: ...

    def values_at(self, index: int) -> tuple[float, float]: ...


@dataclass
class EMASeries:
    """Exponential moving average of an inner series."""

    inner_series: ValuesProvider | None = None
    period: int = 0
    name: str = ""
    style: Any = None
    y_axis: Any = None
    _cache: list[float] = field(default_factory=list, repr=False)

    @property
    def effective_period(self) -> int:
        """The window size, falling back to the default period when unset."""
        return self.period or DEFAULT_EMA_PERIOD

    def __len__(self) -> int:
        if self.inner_series is None:
            return 0
        return len(self.inner_series)

    def sigma(self) -> float:
        """Return the smoothing factor."""
        return 2.0 / (self.effective_period + 1)

    def _ensure_cache(self) -> list[float]:
        if not self._cache:
            assert self.inner_series is not None
            sigma = self.sigma()
            cache: list[float] = []
            for index in range(len(self.inner_series)):
                _, y = self.inner_series.values_at(index)
                if cache:
                    previous = cache[-1]
                    cache.append((y - previous) * sigma + previous)
                else:
                    cache.append(y)
            self._cache = cache
        return self._cache

    def _pair(self, index: int) -> tuple[float, float]:
        if self.inner_series is None:
            return 0.0, 0.0
        cache = self._ensure_cache()
        x, _ = self.inner_series.values_at(index)
        return x, cache[index]

    def values_at(self, index: int) -> tuple[float, float]:
        """Return the x value of the inner series and the average at an index."""
        return self._pair(index)

    def first_values(self) -> tuple[float, float]:
        return self._pair(0)

    def last_values(self) -> tuple[float, float]:
        if self.inner_series is None:
            return 0.0, 0.0
        return self._pair(len(self.inner_series) - 1)

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        if self.inner_series is None:
            raise ValueError("ema series requires inner_series to be set")


@dataclass
class HistogramSeries:
    """Draws an inner series as bars bounded below or above by zero."""

    inner_series: ValuesProvider | None = None
    name: str = ""
    style: Any = None
    y_axis: Any = None

    def _inner(self) -> ValuesProvider:
        if self.inner_series is None:
            raise ValueError("histogram series requires inner_series to be set")
        return self.inner_series

    def __len__(self) -> int:
        return len(self._inner())

    def values_at(self, index: int) -> tuple[float, float]:
        return self._inner().values_at(index)

    def bounded_values_at(self, index: int) -> tuple[float, float, float]:
        """Return (x, y1, y2): a positive y goes in y1, anything else in y2."""
        x, y = self._inner().values_at(index)
        if y > 0:
            return x, y, 0.0
        return x, 0.0, y

    def validate(self) -> None:
        """Raise ValueError if the series cannot be drawn."""
        self._inner()
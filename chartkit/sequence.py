"""Evenly stepped numeric sequences."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class LinearSeq:
    """Values from start to end in fixed steps, counting down if end < start."""

    start: float = 0.0
    end: float = 0.0
    step: float = 1.0

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")

    def __len__(self) -> int:
        if self.start < self.end:
            return int((self.end - self.start) / self.step) + 1
        return int((self.start - self.end) / self.step) + 1

    def value_at(self, index: int) -> float:
        """Return the value at a position in the sequence."""
        if self.start < self.end:
            return self.start + index * self.step
        return self.start - index * self.step

    def __iter__(self) -> Iterator[float]:
        return (self.value_at(index) for index in range(len(self)))

    def values(self) -> list[float]:
        """Return every value of the sequence as a list."""
        return list(self)


def linear_range(start: float, end: float) -> list[float]:
    """Return the values from start to end in steps of 1.0."""
    return LinearSeq(start, end, 1.0).values()


def linear_range_with_step(start: float, end: float, step: float) -> list[float]:
    """Return the values from start to end in steps of the given size."""
    return LinearSeq(start, end, step).values()
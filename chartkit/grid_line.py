"""Grid lines generated from axis ticks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class GridLine:
    """A major or minor line across the chart canvas at an axis value."""

    value: float = 0.0
    is_minor: bool = False
    style: Any = None

    def major(self) -> bool:
        return not self.is_minor

    def minor(self) -> bool:
        return self.is_minor


def generate_grid_lines(
    ticks: Sequence[Any], major_style: Any, minor_style: Any
) -> list[GridLine]:
    """Return lines for every tick but the first and last, alternating major and minor.

    Each tick needs a ``value`` attribute.
    """
    if len(ticks) < 3:
        return []
    return [
        GridLine(
            value=tick.value,
            is_minor=bool(position % 2),
            style=minor_style if position % 2 else major_style,
        )
        for position, tick in enumerate(ticks[1:-1])
    ]
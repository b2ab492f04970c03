"""Charting primitives: data series, sequences, regressions, grid lines and colour maps."""

__version__ = "0.1.0"
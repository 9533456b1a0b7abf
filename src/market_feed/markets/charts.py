"""Price math and chart sampling helpers."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]


def without_zero_values(values: Sequence[float]) -> List[float]:
    """Drop zero placeholders, keeping the order of the remaining points."""
    return [value for value in values if value != 0]


def percent_change(current: float, previous: float) -> float:
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100


def svg_polyline_coords(width: float, height: float, values: Sequence[float]) -> List[Point]:
    """Map values onto a ``width`` x ``height`` box, highest value at the top.

    Points are spaced evenly on x. A 2% padding is kept above and below the
    line. Fewer than two values produce no points; a flat series is drawn
    at mid-height.
    """
    if len(values) < 2:
        return []
    series = np.asarray(values, dtype=float)
    padding = height * 0.02
    usable = height - padding * 2
    xs = np.linspace(0.0, width, num=len(series))
    low, high = series.min(), series.max()
    if high == low:
        ys = np.full_like(series, height / 2)
    else:
        ys = (high - series) / (high - low) * usable + padding
    return [(round(float(x), 2), round(float(y), 2)) for x, y in zip(xs, ys)]


def format_polyline(points: Iterable[Point]) -> str:
    return " ".join(f"{x:.2f},{y:.2f}" for x, y in points)

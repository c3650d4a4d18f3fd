from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math
from typing import Any

from tigercat_chart.adapters.normalize import datum_number
from tigercat_chart.extent import Extent, compute_extent


@dataclass(frozen=True)
class StackedPoint:
    original: Any
    y0: float
    y1: float

    @property
    def value(self) -> float:
        return self.y1 - self.y0


def stack_series(series_list: Sequence[Sequence[Any]], *, value_key: str = "y") -> list[list[StackedPoint]]:
    """Accumulate per-index baselines across series, first series at the bottom.

    Series are aligned by position, not by `x`. Every output series is cut to
    the length of the shortest input series. Non-finite values add nothing.
    """

    if not series_list:
        return []
    length = min(len(series) for series in series_list)
    totals = [0.0] * length
    stacked: list[list[StackedPoint]] = []
    for series in series_list:
        out: list[StackedPoint] = []
        for i in range(length):
            datum = series[i]
            value = datum_number(datum, value_key)
            if not math.isfinite(value):
                value = 0.0
            y0 = totals[i]
            y1 = y0 + value
            totals[i] = y1
            out.append(StackedPoint(original=datum, y0=y0, y1=y1))
        stacked.append(out)
    return stacked


def stacked_extent(stacked: Sequence[Sequence[StackedPoint]], *, include_zero: bool = True) -> Extent:
    values = [v for series in stacked for point in series for v in (point.y0, point.y1)]
    return compute_extent(values, include_zero=include_zero)

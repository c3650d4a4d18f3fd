from __future__ import annotations

from typing import Literal


ValueLabelPosition = Literal["top", "inside"]


def clamp_bar_width(width: float, max_width: float | None = None) -> float:
    if max_width is None or max_width <= 0:
        return width
    return min(width, max_width)


def ensure_bar_min_height(bar_y: float, bar_height: float, baseline: float, min_height: float) -> tuple[float, float]:
    """Grow a near-zero bar to `min_height` while keeping it on the baseline.

    Returns the adjusted `(y, height)`. Bars above the baseline grow upward,
    bars hanging below it grow downward. Zero-height bars are left alone.
    """

    if min_height <= 0 or bar_height == 0 or bar_height >= min_height:
        return (bar_y, bar_height)
    if bar_y < baseline:
        return (baseline - min_height, min_height)
    return (baseline, min_height)


def bar_value_label_y(bar_y: float, bar_height: float, position: ValueLabelPosition = "top", offset: float = 8.0) -> float:
    if position == "inside":
        return bar_y + bar_height / 2
    return bar_y - offset

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any

from tigercat_chart.adapters.normalize import datum_number


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def format_number(value: float, *, decimals: int = 6) -> str:
    """Render a path coordinate without float noise (`10` not `10.0`, no `-0`)."""

    if not math.isfinite(value):
        return str(value)
    out = f"{value:.{decimals}f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_xy(x: float, y: float) -> str:
    return f"{format_number(x)} {format_number(y)}"


def as_point(value: Any) -> Point:
    """Accept a `Point`, an `(x, y)` pair, or a datum exposing `x`/`y`."""

    if isinstance(value, Point):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Point(x=float(value[0]), y=float(value[1]))
    return Point(x=datum_number(value, "x"), y=datum_number(value, "y"))

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tigercat_chart.curves import CurveStrategy, get_curve
from tigercat_chart.geometry import Point, as_point, format_number, format_xy


def create_line_path(points: Iterable[Any], curve: str | CurveStrategy = "linear") -> str:
    pts = [as_point(p) for p in points]
    if not pts:
        return ""
    head = f"M {format_xy(pts[0].x, pts[0].y)}"
    if len(pts) == 1:
        return head
    return " ".join([head, *get_curve(curve)(pts)])


def create_area_path(points: Iterable[Any], baseline: float, curve: str | CurveStrategy = "linear") -> str:
    """Line path through `points`, closed straight along the `baseline` y value."""

    pts = [as_point(p) for p in points]
    line = create_line_path(pts, curve)
    if not line:
        return ""
    base = format_number(baseline)
    return f"{line} L {format_number(pts[-1].x)} {base} L {format_number(pts[0].x)} {base} Z"


def create_band_area_path(upper: Iterable[Any], lower: Iterable[Any], curve: str | CurveStrategy = "linear") -> str:
    """Closed area between two index-aligned point lists (stacked area slices).

    The lower edge is walked back from the last point to the first using the
    same curve kind as the upper edge.
    """

    top = [as_point(p) for p in upper]
    bottom = [as_point(p) for p in lower]
    n = min(len(top), len(bottom))
    if n == 0:
        return ""
    top, bottom = top[:n], bottom[:n]
    line = create_line_path(top, curve)
    back = bottom[::-1]
    parts = [line, f"L {format_xy(back[0].x, back[0].y)}"]
    if n > 1:
        parts.extend(get_curve(curve)(back))
    parts.append("Z")
    return " ".join(parts)


def create_polygon_path(points: Iterable[Any]) -> str:
    pts = [as_point(p) for p in points]
    if len(pts) < 3:
        return ""
    return " ".join([f"M {format_xy(pts[0].x, pts[0].y)}", *(f"L {format_xy(p.x, p.y)}" for p in pts[1:]), "Z"])


def finite_points(points: Iterable[Any]) -> list[Point]:
    """Drop points with nan/inf coordinates (e.g. categories missing from a scale)."""

    return [p for p in (as_point(q) for q in points) if p.is_finite]

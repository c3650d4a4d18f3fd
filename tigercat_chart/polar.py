from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import math
from typing import Any, Literal

from tigercat_chart.adapters.normalize import datum_number
from tigercat_chart.geometry import Point, clamp, format_number, format_xy


LOGGER = logging.getLogger(__name__)

FULL_TURN = math.tau
RADAR_START_ANGLE = -math.pi / 2
FULL_CIRCLE_EPSILON = 1e-9


@dataclass(frozen=True)
class Arc:
    index: int
    data: Any
    value: float
    start_angle: float
    end_angle: float
    pad_angle: float = 0.0

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


@dataclass(frozen=True)
class RadarPoint:
    index: int
    data: Any
    value: float
    angle: float
    radius: float
    x: float
    y: float


@dataclass(frozen=True)
class PieLabelLine:
    anchor: Point
    elbow: Point
    label: Point
    text_anchor: Literal["start", "end"]


def polar_to_cartesian(cx: float, cy: float, r: float, angle: float) -> Point:
    return Point(x=cx + r * math.cos(angle), y=cy + r * math.sin(angle))


def compute_pie_arcs(
    data: Sequence[Any],
    *,
    start_angle: float = 0.0,
    end_angle: float = FULL_TURN,
    pad_angle: float = 0.0,
    value_key: str = "value",
) -> list[Arc]:
    """Partition `[start_angle, end_angle]` into arcs proportional to each value.

    Negative and non-finite values count as zero but still produce a zero-width
    arc so arc indices line up with `data`. Padding sits only between
    neighbouring arcs. A zero total collapses every arc onto `start_angle`.
    """

    values = [_non_negative(datum_number(datum, value_key)) for datum in data]
    total = sum(values)
    n = len(values)
    if total <= 0:
        if n:
            LOGGER.debug("pie values sum to %s; collapsing %d arcs", total, n)
        return [
            Arc(index=i, data=datum, value=values[i], start_angle=start_angle, end_angle=start_angle)
            for i, datum in enumerate(data)
        ]

    pad = max(0.0, pad_angle) if n > 1 else 0.0
    available = max(0.0, (end_angle - start_angle) - pad * (n - 1))

    arcs: list[Arc] = []
    current = start_angle
    for i, datum in enumerate(data):
        span = available * values[i] / total
        arcs.append(
            Arc(index=i, data=datum, value=values[i], start_angle=current, end_angle=current + span, pad_angle=pad)
        )
        current += span + pad
    return arcs


def create_arc_path(
    *,
    cx: float,
    cy: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    inner_radius: float = 0.0,
) -> str:
    """Filled pie slice (`inner_radius == 0`) or donut segment as an SVG path."""

    outer = max(0.0, outer_radius)
    inner = clamp(inner_radius, 0.0, outer)
    sweep = end_angle - start_angle
    if sweep <= 0 or outer <= 0:
        return ""
    if sweep >= FULL_TURN - FULL_CIRCLE_EPSILON:
        return _full_circle_path(cx, cy, inner, outer, start_angle)

    large_arc = 1 if sweep > math.pi else 0
    start_outer = polar_to_cartesian(cx, cy, outer, start_angle)
    end_outer = polar_to_cartesian(cx, cy, outer, end_angle)
    r_out = format_number(outer)

    if inner <= 0:
        return " ".join(
            [
                f"M {format_xy(cx, cy)}",
                f"L {format_xy(start_outer.x, start_outer.y)}",
                f"A {r_out} {r_out} 0 {large_arc} 1 {format_xy(end_outer.x, end_outer.y)}",
                "Z",
            ]
        )

    start_inner = polar_to_cartesian(cx, cy, inner, start_angle)
    end_inner = polar_to_cartesian(cx, cy, inner, end_angle)
    r_in = format_number(inner)
    return " ".join(
        [
            f"M {format_xy(start_outer.x, start_outer.y)}",
            f"A {r_out} {r_out} 0 {large_arc} 1 {format_xy(end_outer.x, end_outer.y)}",
            f"L {format_xy(end_inner.x, end_inner.y)}",
            f"A {r_in} {r_in} 0 {large_arc} 0 {format_xy(start_inner.x, start_inner.y)}",
            "Z",
        ]
    )


def compute_radar_angles(count: int, start_angle: float = RADAR_START_ANGLE) -> list[float]:
    if count <= 0:
        return []
    step = FULL_TURN / count
    return [start_angle + step * i for i in range(count)]


def compute_radar_points(
    data: Sequence[Any],
    *,
    cx: float,
    cy: float,
    radius: float,
    start_angle: float = RADAR_START_ANGLE,
    max_value: float | None = None,
    value_key: str = "value",
) -> list[RadarPoint]:
    if not data:
        return []
    values = [datum_number(datum, value_key) for datum in data]
    if max_value is None:
        finite = [v for v in values if math.isfinite(v)]
        max_value = max(finite) if finite else 0.0
    resolved_max = max_value if math.isfinite(max_value) and max_value > 0 else 1.0

    points: list[RadarPoint] = []
    for i, (datum, angle) in enumerate(zip(data, compute_radar_angles(len(data), start_angle), strict=True)):
        value = _non_negative(values[i])
        r = radius * clamp(value / resolved_max, 0.0, 1.0)
        point = polar_to_cartesian(cx, cy, r, angle)
        points.append(RadarPoint(index=i, data=datum, value=value, angle=angle, radius=r, x=point.x, y=point.y))
    return points


def pie_hover_offset(start_angle: float, end_angle: float, offset: float) -> tuple[float, float]:
    """Translation that pushes a slice outward along its bisector."""

    mid = (start_angle + end_angle) / 2
    return (offset * math.cos(mid), offset * math.sin(mid))


def pie_label_line(
    cx: float,
    cy: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    offset: float | None = None,
) -> PieLabelLine:
    mid = (start_angle + end_angle) / 2
    gap = offset if offset is not None else max(12.0, outer_radius * 0.15)
    anchor = polar_to_cartesian(cx, cy, outer_radius, mid)
    elbow = polar_to_cartesian(cx, cy, outer_radius + gap * 0.6, mid)
    is_right = math.cos(mid) >= 0
    label = Point(x=elbow.x + (gap * 0.8 if is_right else -gap * 0.8), y=elbow.y)
    return PieLabelLine(anchor=anchor, elbow=elbow, label=label, text_anchor="start" if is_right else "end")


def _full_circle_path(cx: float, cy: float, inner: float, outer: float, start_angle: float) -> str:
    # A single arc command cannot end where it starts, so each ring is two half arcs.
    parts = _ring(cx, cy, outer, start_angle, sweep_flag=1)
    if inner > 0:
        parts += _ring(cx, cy, inner, start_angle, sweep_flag=0)
    return " ".join(parts)


def _ring(cx: float, cy: float, r: float, start_angle: float, *, sweep_flag: int) -> list[str]:
    first = polar_to_cartesian(cx, cy, r, start_angle)
    half = polar_to_cartesian(cx, cy, r, start_angle + math.pi)
    rr = format_number(r)
    return [
        f"M {format_xy(first.x, first.y)}",
        f"A {rr} {rr} 0 1 {sweep_flag} {format_xy(half.x, half.y)}",
        f"A {rr} {rr} 0 1 {sweep_flag} {format_xy(first.x, first.y)}",
        "Z",
    ]


def _non_negative(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return max(0.0, value)

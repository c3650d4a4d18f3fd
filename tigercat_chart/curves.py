from __future__ import annotations

from collections.abc import Callable, Sequence
import logging

import numpy as np

from tigercat_chart.errors import ChartConfigError
from tigercat_chart.geometry import Point, format_number, format_xy


LOGGER = logging.getLogger(__name__)

# A curve turns >= 2 points into the path commands that follow the initial move-to.
CurveStrategy = Callable[[Sequence[Point]], list[str]]

DEFAULT_CURVE = "linear"

_ALIASES = {
    "stepBefore": "step_before",
    "stepAfter": "step_after",
}


def linear_curve(points: Sequence[Point]) -> list[str]:
    return [f"L {format_xy(p.x, p.y)}" for p in points[1:]]


def step_curve(points: Sequence[Point]) -> list[str]:
    return _step_segments(points, 0.5)


def step_before_curve(points: Sequence[Point]) -> list[str]:
    return _step_segments(points, 0.0)


def step_after_curve(points: Sequence[Point]) -> list[str]:
    return _step_segments(points, 1.0)


def monotone_curve(points: Sequence[Point]) -> list[str]:
    """Monotone cubic interpolation in x (Fritsch-Carlson), as cubic Beziers.

    The curve passes through every point and never overshoots between two
    consecutive points, so monotone data stays monotone.
    """

    xs, ys = _coords(points)
    h = np.diff(xs)
    secants = _safe_divide(np.diff(ys), h)
    tangents = _monotone_tangents(h, secants)
    return _hermite_segments(xs, ys, tangents)


def natural_curve(points: Sequence[Point]) -> list[str]:
    """Natural cubic spline (zero second derivative at both ends)."""

    if len(points) < 3:
        return linear_curve(points)
    xs, ys = _coords(points)
    h = np.diff(xs)
    if np.any(h == 0):
        LOGGER.debug("natural curve needs distinct x values; using monotone interpolation")
        return monotone_curve(points)

    n = xs.size - 1
    secants = np.diff(ys) / h
    system = np.zeros((n + 1, n + 1), dtype=np.float64)
    rhs = np.zeros(n + 1, dtype=np.float64)
    system[0, 0] = 1.0
    system[n, n] = 1.0
    for i in range(1, n):
        system[i, i - 1] = h[i - 1]
        system[i, i] = 2.0 * (h[i - 1] + h[i])
        system[i, i + 1] = h[i]
        rhs[i] = 6.0 * (secants[i] - secants[i - 1])
    second = np.linalg.solve(system, rhs)

    tangents = np.empty(n + 1, dtype=np.float64)
    tangents[:n] = secants - h * (2.0 * second[:n] + second[1:]) / 6.0
    tangents[n] = secants[-1] + h[-1] * (second[-2] + 2.0 * second[-1]) / 6.0
    return _hermite_segments(xs, ys, tangents)


_CURVES: dict[str, CurveStrategy] = {
    "linear": linear_curve,
    "monotone": monotone_curve,
    "natural": natural_curve,
    "step": step_curve,
    "step_before": step_before_curve,
    "step_after": step_after_curve,
}


def register_curve(name: str, strategy: CurveStrategy, *, replace: bool = False) -> None:
    """Add a named curve to the process-wide registry.

    This registry is the one piece of shared state in the engine: a name
    registered here is visible to every chart in the process. To use a custom
    curve for a single path without registering it, pass the strategy itself
    as `curve=` to the path builders.
    """

    if not isinstance(name, str) or not name.strip():
        raise ChartConfigError("curve name must be a non-empty string")
    if not callable(strategy):
        raise ChartConfigError(f"curve `{name}` strategy must be callable")
    if name in _CURVES and not replace:
        raise ChartConfigError(f"curve `{name}` is already registered")
    _CURVES[name] = strategy


def get_curve(name: str | CurveStrategy | None) -> CurveStrategy:
    if callable(name):
        return name
    key = _ALIASES.get(name or DEFAULT_CURVE, name or DEFAULT_CURVE)
    strategy = _CURVES.get(key)
    if strategy is None:
        LOGGER.debug("unknown curve %r; falling back to %s", name, DEFAULT_CURVE)
        return _CURVES[DEFAULT_CURVE]
    return strategy


def curve_names() -> tuple[str, ...]:
    return tuple(_CURVES)


def _coords(points: Sequence[Point]) -> tuple[np.ndarray, np.ndarray]:
    xs = np.asarray([p.x for p in points], dtype=np.float64)
    ys = np.asarray([p.y for p in points], dtype=np.float64)
    return xs, ys


def _safe_divide(num: np.ndarray, den: np.ndarray) -> np.ndarray:
    out = np.zeros_like(num)
    np.divide(num, den, out=out, where=den != 0)
    return out


def _monotone_tangents(h: np.ndarray, secants: np.ndarray) -> np.ndarray:
    n = secants.size + 1
    tangents = np.zeros(n, dtype=np.float64)
    tangents[0] = secants[0]
    tangents[-1] = secants[-1]
    for i in range(1, n - 1):
        d0, d1 = secants[i - 1], secants[i]
        h0, h1 = h[i - 1], h[i]
        if d0 * d1 <= 0:
            continue
        # Weighted harmonic mean keeps the tangent between both secants.
        denom = (2.0 * h1 + h0) / d0 + (h1 + 2.0 * h0) / d1
        if denom != 0:
            tangents[i] = 3.0 * (h0 + h1) / denom

    for i in range(n - 1):
        d = secants[i]
        if abs(d) < 1e-12:
            tangents[i] = 0.0
            tangents[i + 1] = 0.0
            continue
        alpha = tangents[i] / d
        beta = tangents[i + 1] / d
        if alpha < 0:
            tangents[i] = 0.0
            alpha = 0.0
        if beta < 0:
            tangents[i + 1] = 0.0
            beta = 0.0
        s = alpha * alpha + beta * beta
        if s > 9.0:
            t = 3.0 / np.sqrt(s)
            tangents[i] = t * alpha * d
            tangents[i + 1] = t * beta * d
    return tangents


def _hermite_segments(xs: np.ndarray, ys: np.ndarray, tangents: np.ndarray) -> list[str]:
    segments: list[str] = []
    for i in range(xs.size - 1):
        dx = xs[i + 1] - xs[i]
        cp1x = xs[i] + dx / 3.0
        cp1y = ys[i] + tangents[i] * dx / 3.0
        cp2x = xs[i + 1] - dx / 3.0
        cp2y = ys[i + 1] - tangents[i + 1] * dx / 3.0
        segments.append(
            f"C {format_xy(cp1x, cp1y)}, {format_xy(cp2x, cp2y)}, {format_xy(xs[i + 1], ys[i + 1])}"
        )
    return segments


def _step_segments(points: Sequence[Point], t: float) -> list[str]:
    segments: list[str] = []
    prev = points[0]
    for point in points[1:]:
        if t == 0.0:
            segments += [f"V {format_number(point.y)}", f"H {format_number(point.x)}"]
        elif t == 1.0:
            segments += [f"H {format_number(point.x)}", f"V {format_number(point.y)}"]
        else:
            mid_x = prev.x + (point.x - prev.x) * t
            segments += [f"H {format_number(mid_x)}", f"V {format_number(point.y)}", f"H {format_number(point.x)}"]
        prev = point
    return segments

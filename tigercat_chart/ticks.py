from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
import logging
import math
import numbers
from typing import Any

import numpy as np

from tigercat_chart.scales import ChartScale, LinearScale
from tigercat_chart.style.theme import DEFAULT_THEME, ChartTheme


LOGGER = logging.getLogger(__name__)

TickFormatter = Callable[[Any], str]

DEFAULT_TICK_COUNT = DEFAULT_THEME.tick_count

# (upper bound of the mantissa, nice mantissa); anything past the last bound rounds up to 10.
_NICE_MANTISSAS = ((1.5, 1.0), (3.0, 2.0), (7.0, 5.0))
_FREE_PLACES = 6
_MAX_STEP_PLACES = 12


@dataclass(frozen=True)
class Tick:
    value: Any
    position: float
    label: str


def compute_axis_ticks(
    scale: ChartScale,
    *,
    tick_count: int | None = None,
    tick_values: Sequence[Any] | None = None,
    tick_format: TickFormatter | None = None,
    theme: ChartTheme = DEFAULT_THEME,
) -> list[Tick]:
    """Ticks for one axis, `position == scale.map(value)` for every tick.

    Linear scales get a nice grid of roughly `tick_count` steps (the theme's
    count when omitted) and every label carries the decimals of that step.
    Explicit `tick_values` are kept as given and each one is labelled at its
    own precision. Categorical scales get one tick per category.
    """

    step: float | None = None
    if tick_values is not None:
        values = list(tick_values)
    elif isinstance(scale, LinearScale):
        count = theme.tick_count if tick_count is None else tick_count
        grid, step = _linear_tick_grid(scale, count)
        values = [float(v) for v in grid]
    else:
        values = list(scale.domain)

    labels = [tick_format(v) for v in values] if tick_format is not None else format_tick_labels(values, step=step)
    return [Tick(value=v, position=scale.map(v), label=label) for v, label in zip(values, labels, strict=True)]


def nice_step(raw_step: float) -> float:
    """Round a raw step to the closest 1, 2 or 5 times a power of ten."""

    if not math.isfinite(raw_step) or raw_step <= 0:
        return 1.0
    magnitude = 10.0 ** math.floor(math.log10(raw_step))
    mantissa = raw_step / magnitude
    for bound, nice in _NICE_MANTISSAS:
        if mantissa < bound:
            return nice * magnitude
    return 10.0 * magnitude


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    """Ticks on a nice step grid covering `[vmin, vmax]`, ascending."""

    return _tick_grid(vmin, vmax, target)[0]


def nice_domain(domain: Sequence[float], count: int = DEFAULT_TICK_COUNT) -> tuple[float, float]:
    """Expand a linear domain outward so both ends land on the tick grid."""

    d0, d1 = float(domain[0]), float(domain[1])
    ticks = generate_nice_ticks(d0, d1, count)
    if ticks.size < 2:
        return (d0, d1)
    lo, hi = float(ticks[0]), float(ticks[-1])
    return (lo, hi) if d0 <= d1 else (hi, lo)


def format_tick(value: float, *, step: float | None = None) -> str:
    """Plain decimal label for a numeric tick value.

    With a grid `step` the label is rounded to the decimals that step needs and
    float noise around zero prints as "0". Without one, up to six decimals are
    kept. Trailing fractional zeros are dropped either way. Magnitudes from
    1e15 up, or below 1e-6, use scientific notation.
    """

    if not math.isfinite(value):
        return str(value)
    on_grid = step is not None and math.isfinite(step) and step > 0
    if on_grid and abs(value) <= step * 1e-9:
        value = 0.0
    magnitude = abs(value)
    if magnitude and not 1e-6 <= magnitude < 1e15:
        return f"{value:.4e}"

    places = _step_places(step) if on_grid else _FREE_PLACES
    text = format(Decimal(repr(float(value))).quantize(Decimal(1).scaleb(-places)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_tick_labels(values: Iterable[Any], *, step: float | None = None) -> list[str]:
    """Default labels: numbers through `format_tick`, anything else through `str`."""

    return [format_tick(float(v), step=step) if _is_number(v) else str(v) for v in values]


def _tick_grid(vmin: float, vmax: float, target: int) -> tuple[np.ndarray, float | None]:
    if target <= 0 or not np.isfinite(vmin) or not np.isfinite(vmax):
        return np.empty(0, dtype=np.float64), None
    lo, hi = min(vmin, vmax), max(vmin, vmax)
    if lo == hi:
        return np.asarray([lo], dtype=np.float64), None

    step = nice_step((hi - lo) / target)
    first = np.floor(lo / step)
    last = np.ceil(hi / step)
    ticks = np.arange(first, last + 1.0, dtype=np.float64) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks, step


def _linear_tick_grid(scale: LinearScale, tick_count: int) -> tuple[np.ndarray, float | None]:
    if tick_count <= 0:
        LOGGER.debug("tick_count must be > 0, got %s; emitting no ticks", tick_count)
        return np.empty(0, dtype=np.float64), None
    d0, d1 = scale.domain
    ticks, step = _tick_grid(d0, d1, tick_count)
    if d0 > d1:
        ticks = ticks[::-1]
    return ticks, step


def _step_places(step: float) -> int:
    exponent = Decimal(repr(float(step))).normalize().as_tuple().exponent
    return min(_MAX_STEP_PLACES, max(0, -int(exponent)))


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

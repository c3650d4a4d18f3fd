from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from tigercat_chart.adapters.normalize import datum_field
from tigercat_chart.geometry import Point, clamp
from tigercat_chart.style.theme import DEFAULT_THEME, ChartTheme


_NAN = float("nan")


@dataclass(frozen=True)
class LinearScale:
    domain: tuple[float, float]
    range: tuple[float, float]
    kind: Literal["linear"] = field(default="linear", init=False)

    @property
    def span(self) -> float:
        return self.domain[1] - self.domain[0]

    def map(self, value: Any) -> float:
        d0, _ = self.domain
        r0, r1 = self.range
        if self.span == 0:
            return (r0 + r1) / 2
        numeric = _to_float(value)
        return r0 + (numeric - d0) / self.span * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2
        return d0 + (float(pixel) - r0) / (r1 - r0) * self.span


@dataclass(frozen=True)
class _CategoricalScale:
    domain: tuple[Hashable, ...]
    range: tuple[float, float]
    step: float
    offset: float
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, int] = {}
        for i, category in enumerate(self.domain):
            index.setdefault(str(category), i)
        object.__setattr__(self, "_index", index)

    @property
    def direction(self) -> float:
        return 1.0 if self.range[1] >= self.range[0] else -1.0

    def index_of(self, value: Any) -> int | None:
        return self._index.get(str(value))

    def map(self, value: Any) -> float:
        """Position of `value`; categories outside the domain map to nan."""

        index = self.index_of(value)
        if index is None:
            return _NAN
        return self.range[0] + self.direction * (self.offset + self.step * index)


@dataclass(frozen=True)
class PointScale(_CategoricalScale):
    padding: float = 0.5
    kind: Literal["point"] = field(default="point", init=False)


@dataclass(frozen=True)
class BandScale(_CategoricalScale):
    bandwidth: float = 0.0
    padding_inner: float = 0.1
    padding_outer: float = 0.1
    kind: Literal["band"] = field(default="band", init=False)


ChartScale = Union[LinearScale, PointScale, BandScale]


def create_linear_scale(domain: Sequence[float], range: Sequence[float]) -> LinearScale:
    d0, d1 = domain
    r0, r1 = range
    return LinearScale(domain=(float(d0), float(d1)), range=(float(r0), float(r1)))


def create_point_scale(
    categories: Iterable[Hashable],
    range: Sequence[float],
    *,
    padding: float | None = None,
    theme: ChartTheme = DEFAULT_THEME,
) -> PointScale:
    """Evenly spaced positions for `categories`, `padding` steps in from each end.

    Categories are matched by `str(category)`, so `1` and `"1"` are the same
    category: both map to the first one's position, while the later duplicate
    still takes up a slot in the spacing. `padding` defaults to
    `theme.point_padding`.
    """

    domain = tuple(categories)
    r0, r1 = float(range[0]), float(range[1])
    padding = clamp(float(theme.point_padding if padding is None else padding), 0.0, 1.0)
    length = abs(r1 - r0)
    n = len(domain)
    step = length / max(1.0, n - 1 + padding * 2) if n > 1 else 0.0
    offset = length / 2 if n <= 1 else step * padding
    return PointScale(domain=domain, range=(r0, r1), step=step, offset=offset, padding=padding)


def create_band_scale(
    categories: Iterable[Hashable],
    range: Sequence[float],
    *,
    padding_inner: float | None = None,
    padding_outer: float | None = None,
    align: float = 0.5,
    theme: ChartTheme = DEFAULT_THEME,
) -> BandScale:
    """Equal-width bands for `categories`.

    Categories are matched by `str(category)` as in `create_point_scale`, so
    colliding keys both map to the first band. Paddings left as `None` come from
    `theme.band_padding_inner` and `theme.band_padding_outer`.
    """

    domain = tuple(categories)
    r0, r1 = float(range[0]), float(range[1])
    if padding_inner is None:
        padding_inner = theme.band_padding_inner
    if padding_outer is None:
        padding_outer = theme.band_padding_outer
    padding_inner = clamp(float(padding_inner), 0.0, 1.0)
    padding_outer = clamp(float(padding_outer), 0.0, 1.0)
    align = clamp(float(align), 0.0, 1.0)
    length = abs(r1 - r0)
    n = len(domain)
    step = length / max(1.0, n - padding_inner + padding_outer * 2) if n > 0 else 0.0
    bandwidth = step * (1 - padding_inner)
    # Leftover space (non-zero when the denominator was floored at 1) is split by `align`.
    offset = (length - step * (n - padding_inner)) * align if n > 0 else 0.0
    return BandScale(
        domain=domain,
        range=(r0, r1),
        step=step,
        offset=offset,
        bandwidth=bandwidth,
        padding_inner=padding_inner,
        padding_outer=padding_outer,
    )


def band_center(scale: ChartScale, value: Any) -> float:
    if isinstance(scale, BandScale):
        return scale.map(value) + scale.direction * scale.bandwidth / 2
    return scale.map(value)


def project_points(
    data: Iterable[Any],
    x_scale: ChartScale,
    y_scale: ChartScale,
    *,
    x_key: str = "x",
    y_key: str = "y",
    center_bands: bool = False,
) -> list[Point]:
    """Map raw datums into pixel points, index-aligned with `data`.

    With `center_bands`, band scale positions are the band centers instead of
    the leading edges (line or scatter series drawn over a bar axis).
    """

    locate = band_center if center_bands else _map
    return [
        Point(
            x=locate(x_scale, datum_field(datum, x_key)),
            y=locate(y_scale, datum_field(datum, y_key)),
        )
        for datum in data
    ]


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return _NAN


def _map(scale: ChartScale, value: Any) -> float:
    return scale.map(value)

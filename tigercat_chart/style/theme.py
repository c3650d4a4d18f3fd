from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any, Literal, Mapping

from tigercat_chart.errors import ChartConfigError


GridLineStyle = Literal["solid", "dashed", "dotted"]

DEFAULT_CHART_COLORS: tuple[str, ...] = (
    "var(--tiger-chart-1,#2563eb)",
    "var(--tiger-chart-2,#22c55e)",
    "var(--tiger-chart-3,#f97316)",
    "var(--tiger-chart-4,#a855f7)",
    "var(--tiger-chart-5,#0ea5e9)",
    "var(--tiger-chart-6,#ef4444)",
)

_GRID_LINE_STYLES = ("solid", "dashed", "dotted")
_UNIT_OPTIONS = ("point_padding", "band_padding_inner", "band_padding_outer", "active_opacity", "inactive_opacity")


@dataclass(frozen=True)
class ChartTheme:
    """Engine defaults shared by every chart type.

    Scale constructors, `compute_axis_ticks`, `resolve_opacity` and
    `resolve_chart_palette` take a `theme=` argument and fall back to these
    values whenever the matching keyword is left as `None`.
    """

    colors: tuple[str, ...] = DEFAULT_CHART_COLORS
    point_padding: float = 0.5
    band_padding_inner: float = 0.1
    band_padding_outer: float = 0.1
    tick_count: int = 5
    active_opacity: float = 1.0
    inactive_opacity: float = 0.25
    grid_line_style: GridLineStyle = "solid"

    @property
    def grid_dasharray(self) -> str | None:
        return grid_line_dasharray(self.grid_line_style)


DEFAULT_THEME = ChartTheme()


def grid_line_dasharray(style: GridLineStyle) -> str | None:
    if style == "dashed":
        return "4 4"
    if style == "dotted":
        return "1 4"
    return None


def validate_chart_theme(overrides: Mapping[str, Any] | None = None) -> ChartTheme:
    """Validate and merge theme overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartConfigError(f"Unknown chart theme option: {key}")
            raw[key] = value

    colors = raw["colors"]
    if isinstance(colors, str) or not isinstance(colors, Sequence) or not colors:
        raise ChartConfigError("Option `colors` must be a non-empty sequence of color strings")
    if not all(isinstance(c, str) and c.strip() for c in colors):
        raise ChartConfigError("Option `colors` must contain only non-empty strings")

    for key in _UNIT_OPTIONS:
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0.0 <= float(value) <= 1.0:
            raise ChartConfigError(f"Option `{key}` must be a number in [0, 1]")

    tick_count = raw["tick_count"]
    if isinstance(tick_count, bool) or not isinstance(tick_count, int) or tick_count <= 0:
        raise ChartConfigError("Option `tick_count` must be a positive integer")

    if raw["grid_line_style"] not in _GRID_LINE_STYLES:
        raise ChartConfigError(f"Option `grid_line_style` must be one of {', '.join(_GRID_LINE_STYLES)}")

    return ChartTheme(
        colors=tuple(str(c) for c in colors),
        point_padding=float(raw["point_padding"]),
        band_padding_inner=float(raw["band_padding_inner"]),
        band_padding_outer=float(raw["band_padding_outer"]),
        tick_count=int(tick_count),
        active_opacity=float(raw["active_opacity"]),
        inactive_opacity=float(raw["inactive_opacity"]),
        grid_line_style=raw["grid_line_style"],
    )

from __future__ import annotations

from collections.abc import Sequence

from tigercat_chart.style.theme import DEFAULT_CHART_COLORS, DEFAULT_THEME, ChartTheme


def resolve_chart_palette(
    colors: Sequence[str] | None = None,
    fallback_color: str | None = None,
    *,
    theme: ChartTheme = DEFAULT_THEME,
) -> tuple[str, ...]:
    """Pick the palette: explicit `colors`, else one `fallback_color`, else the theme."""

    if colors:
        return tuple(colors)
    if fallback_color:
        return (fallback_color,)
    return theme.colors


def palette_color(palette: Sequence[str], index: int) -> str:
    if not palette:
        return DEFAULT_CHART_COLORS[index % len(DEFAULT_CHART_COLORS)]
    return palette[index % len(palette)]

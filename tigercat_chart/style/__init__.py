from .palette import palette_color, resolve_chart_palette
from .theme import (
    DEFAULT_CHART_COLORS,
    DEFAULT_THEME,
    ChartTheme,
    GridLineStyle,
    grid_line_dasharray,
    validate_chart_theme,
)

__all__ = [
    "ChartTheme",
    "DEFAULT_CHART_COLORS",
    "DEFAULT_THEME",
    "GridLineStyle",
    "grid_line_dasharray",
    "palette_color",
    "resolve_chart_palette",
    "validate_chart_theme",
]

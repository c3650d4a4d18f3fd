"""Chart geometry and scale engine shared by the Tigercat UI bindings."""

from tigercat_chart.bars import bar_value_label_y, clamp_bar_width, ensure_bar_min_height
from tigercat_chart.curves import CurveStrategy, curve_names, get_curve, register_curve
from tigercat_chart.errors import ChartConfigError
from tigercat_chart.extent import Extent, compute_extent
from tigercat_chart.geometry import Point
from tigercat_chart.highlight import resolve_active_index, resolve_opacity
from tigercat_chart.layout import InnerRect, Padding, compute_inner_rect, normalize_padding
from tigercat_chart.paths import (
    create_area_path,
    create_band_area_path,
    create_line_path,
    create_polygon_path,
    finite_points,
)
from tigercat_chart.polar import (
    Arc,
    PieLabelLine,
    RadarPoint,
    compute_pie_arcs,
    compute_radar_angles,
    compute_radar_points,
    create_arc_path,
    pie_hover_offset,
    pie_label_line,
    polar_to_cartesian,
)
from tigercat_chart.scales import (
    BandScale,
    ChartScale,
    LinearScale,
    PointScale,
    band_center,
    create_band_scale,
    create_linear_scale,
    create_point_scale,
    project_points,
)
from tigercat_chart.stack import StackedPoint, stack_series, stacked_extent
from tigercat_chart.style.palette import palette_color, resolve_chart_palette
from tigercat_chart.style.theme import (
    DEFAULT_CHART_COLORS,
    DEFAULT_THEME,
    ChartTheme,
    grid_line_dasharray,
    validate_chart_theme,
)
from tigercat_chart.ticks import Tick, compute_axis_ticks, format_tick_labels, nice_domain

__all__ = [
    "Arc",
    "BandScale",
    "ChartConfigError",
    "ChartScale",
    "ChartTheme",
    "CurveStrategy",
    "DEFAULT_CHART_COLORS",
    "DEFAULT_THEME",
    "Extent",
    "InnerRect",
    "LinearScale",
    "Padding",
    "PieLabelLine",
    "Point",
    "PointScale",
    "RadarPoint",
    "StackedPoint",
    "Tick",
    "band_center",
    "bar_value_label_y",
    "clamp_bar_width",
    "compute_axis_ticks",
    "compute_extent",
    "compute_inner_rect",
    "compute_pie_arcs",
    "compute_radar_angles",
    "compute_radar_points",
    "create_arc_path",
    "create_area_path",
    "create_band_area_path",
    "create_band_scale",
    "create_line_path",
    "create_linear_scale",
    "create_point_scale",
    "create_polygon_path",
    "curve_names",
    "ensure_bar_min_height",
    "finite_points",
    "format_tick_labels",
    "get_curve",
    "grid_line_dasharray",
    "nice_domain",
    "normalize_padding",
    "palette_color",
    "pie_hover_offset",
    "pie_label_line",
    "polar_to_cartesian",
    "project_points",
    "register_curve",
    "resolve_active_index",
    "resolve_chart_palette",
    "resolve_opacity",
    "stack_series",
    "stacked_extent",
    "validate_chart_theme",
]

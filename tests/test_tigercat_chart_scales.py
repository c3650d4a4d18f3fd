from __future__ import annotations

import math
import unittest

from tigercat_chart.scales import (
    BandScale,
    LinearScale,
    PointScale,
    band_center,
    create_band_scale,
    create_linear_scale,
    create_point_scale,
    project_points,
)
from tigercat_chart.style.theme import validate_chart_theme


class LinearScaleTests(unittest.TestCase):
    def test_maps_midpoint(self) -> None:
        self.assertEqual(create_linear_scale([0, 10], [0, 100]).map(5), 50.0)

    def test_domain_ends_map_to_range_ends(self) -> None:
        for domain, range_ in (([0, 10], [0, 100]), ([-3.5, 7.25], [480, 20]), ([1e-3, 2e-3], [0, 1])):
            scale = create_linear_scale(domain, range_)
            self.assertAlmostEqual(scale.map(domain[0]), range_[0])
            self.assertAlmostEqual(scale.map(domain[1]), range_[1])

    def test_inverted_range(self) -> None:
        scale = create_linear_scale([0, 100], [200, 0])
        self.assertEqual(scale.map(0), 200.0)
        self.assertEqual(scale.map(100), 0.0)

    def test_zero_span_domain_maps_to_range_midpoint(self) -> None:
        scale = create_linear_scale([50, 50], [0, 100])
        self.assertEqual(scale.map(50), 50.0)
        self.assertEqual(scale.map(-1000), 50.0)

    def test_numeric_strings_are_coerced(self) -> None:
        self.assertEqual(create_linear_scale([0, 100], [0, 200]).map("25"), 50.0)

    def test_non_numeric_value_maps_to_nan(self) -> None:
        self.assertTrue(math.isnan(create_linear_scale([0, 1], [0, 1]).map("abc")))

    def test_invert_round_trips_pixels(self) -> None:
        scale = create_linear_scale([0, 10], [0, 100])
        self.assertAlmostEqual(scale.invert(50), 5.0)

    def test_tagged_variant(self) -> None:
        scale = create_linear_scale([10, 20], [100, 200])
        self.assertIsInstance(scale, LinearScale)
        self.assertEqual(scale.kind, "linear")
        self.assertEqual(scale.domain, (10.0, 20.0))
        self.assertEqual(scale.range, (100.0, 200.0))
        self.assertFalse(hasattr(scale, "bandwidth"))
        self.assertFalse(hasattr(scale, "step"))


class PointScaleTests(unittest.TestCase):
    def test_even_spacing_without_padding(self) -> None:
        scale = create_point_scale(["a", "b", "c"], [0, 100], padding=0)
        self.assertEqual([scale.map(c) for c in "abc"], [0.0, 50.0, 100.0])
        self.assertEqual(scale.step, 50.0)

    def test_padding_insets_from_edges(self) -> None:
        scale = create_point_scale(["a", "b"], [0, 100], padding=0.5)
        self.assertEqual(scale.map("a"), 25.0)
        self.assertEqual(scale.map("b"), 75.0)

    def test_padding_defaults_to_theme(self) -> None:
        theme = validate_chart_theme({"point_padding": 0})
        scale = create_point_scale(["a", "b", "c"], [0, 100], theme=theme)
        self.assertEqual([scale.map(c) for c in "abc"], [0.0, 50.0, 100.0])
        self.assertEqual(create_point_scale(["a", "b"], [0, 100], padding=0.5, theme=theme).map("a"), 25.0)

    def test_colliding_string_keys_map_to_first_slot(self) -> None:
        scale = create_point_scale([1, "1", 2], [0, 100], padding=0)
        self.assertEqual(scale.map(1), 0.0)
        self.assertEqual(scale.map("1"), 0.0)
        self.assertEqual(scale.map(2), 100.0)

    def test_single_category_is_centered(self) -> None:
        self.assertEqual(create_point_scale(["only"], [0, 100]).map("only"), 50.0)

    def test_reversed_range(self) -> None:
        scale = create_point_scale(["a", "b", "c"], [100, 0], padding=0)
        self.assertEqual([scale.map(c) for c in "abc"], [100.0, 50.0, 0.0])

    def test_padding_is_clamped(self) -> None:
        self.assertEqual(create_point_scale(["a", "b"], [0, 100], padding=-3).padding, 0.0)
        self.assertEqual(create_point_scale(["a", "b"], [0, 100], padding=7).padding, 1.0)

    def test_unknown_category_is_nan_not_error(self) -> None:
        scale = create_point_scale(["a", "b"], [0, 100])
        self.assertTrue(math.isnan(scale.map("unknown")))

    def test_point_scale_has_no_bandwidth(self) -> None:
        scale = create_point_scale(["a"], [0, 10])
        self.assertIsInstance(scale, PointScale)
        self.assertEqual(scale.kind, "point")
        self.assertFalse(hasattr(scale, "bandwidth"))

    def test_empty_domain(self) -> None:
        scale = create_point_scale([], [0, 100])
        self.assertEqual(scale.step, 0.0)
        self.assertTrue(math.isnan(scale.map("a")))


class BandScaleTests(unittest.TestCase):
    def test_bands_fill_range_without_padding(self) -> None:
        scale = create_band_scale(["a", "b"], [0, 100], padding_inner=0, padding_outer=0)
        self.assertEqual(scale.bandwidth, 50.0)
        self.assertEqual(scale.map("a"), 0.0)
        self.assertEqual(scale.map("b"), 50.0)

    def test_paddings_default_to_theme(self) -> None:
        theme = validate_chart_theme({"band_padding_inner": 0, "band_padding_outer": 0})
        scale = create_band_scale(["a", "b"], [0, 100], theme=theme)
        self.assertEqual(scale.bandwidth, 50.0)
        self.assertEqual(scale.map("b"), 50.0)
        padded = create_band_scale(["a", "b"], [0, 100], padding_inner=0.5, theme=theme)
        self.assertEqual(padded.padding_inner, 0.5)
        self.assertEqual(padded.padding_outer, 0.0)

    def test_construction_identity_holds(self) -> None:
        for n, inner, outer, width in ((3, 0.1, 0.1, 300.0), (5, 0.3, 0.2, 640.0), (1, 0.5, 0.5, 80.0)):
            scale = create_band_scale([f"c{i}" for i in range(n)], [0, width], padding_inner=inner, padding_outer=outer)
            inner_gap = scale.step * inner
            outer_gap = scale.step * outer
            total = n * scale.bandwidth + (n - 1) * inner_gap + 2 * outer_gap
            self.assertAlmostEqual(total, width)

    def test_first_band_starts_after_outer_gap(self) -> None:
        scale = create_band_scale(["a", "b", "c"], [0, 300], padding_inner=0.1, padding_outer=0.1)
        self.assertAlmostEqual(scale.map("a"), scale.step * 0.1)
        self.assertAlmostEqual(scale.map("b") - scale.map("a"), scale.step)

    def test_inner_padding_narrows_bands(self) -> None:
        no_pad = create_band_scale(["a", "b"], [0, 100], padding_inner=0, padding_outer=0)
        padded = create_band_scale(["a", "b"], [0, 100], padding_inner=0.5, padding_outer=0)
        self.assertLess(padded.bandwidth, no_pad.bandwidth)

    def test_band_center(self) -> None:
        scale = create_band_scale(["a", "b"], [0, 100], padding_inner=0, padding_outer=0)
        self.assertEqual(band_center(scale, "a"), 25.0)
        reversed_scale = create_band_scale(["a", "b"], [100, 0], padding_inner=0, padding_outer=0)
        self.assertEqual(reversed_scale.map("a"), 100.0)
        self.assertEqual(band_center(reversed_scale, "a"), 75.0)

    def test_band_center_is_plain_map_for_other_scales(self) -> None:
        scale = create_point_scale(["a", "b"], [0, 100], padding=0)
        self.assertEqual(band_center(scale, "b"), 100.0)

    def test_unknown_category_is_nan(self) -> None:
        scale = create_band_scale(["a"], [0, 100])
        self.assertIsInstance(scale, BandScale)
        self.assertEqual(scale.kind, "band")
        self.assertTrue(math.isnan(scale.map("z")))

    def test_categories_match_by_string_form(self) -> None:
        scale = create_band_scale([2023, 2024], [0, 100], padding_inner=0, padding_outer=0)
        self.assertEqual(scale.map("2024"), 50.0)
        self.assertEqual(scale.map(2024), 50.0)


class ProjectPointsTests(unittest.TestCase):
    def test_projects_datums_through_both_scales(self) -> None:
        x_scale = create_point_scale(["a", "b"], [0, 100], padding=0)
        y_scale = create_linear_scale([0, 10], [100, 0])
        points = project_points([{"x": "a", "y": 0}, {"x": "b", "y": 10}, {"x": "zz", "y": 5}], x_scale, y_scale)
        self.assertEqual((points[0].x, points[0].y), (0.0, 100.0))
        self.assertEqual((points[1].x, points[1].y), (100.0, 0.0))
        self.assertFalse(points[2].is_finite)

    def test_center_bands_option(self) -> None:
        x_scale = create_band_scale(["a", "b"], [0, 100], padding_inner=0, padding_outer=0)
        y_scale = create_linear_scale([0, 1], [0, 1])
        edge = project_points([{"x": "b", "y": 1}], x_scale, y_scale)
        centered = project_points([{"x": "b", "y": 1}], x_scale, y_scale, center_bands=True)
        self.assertEqual(edge[0].x, 50.0)
        self.assertEqual(centered[0].x, 75.0)


if __name__ == "__main__":
    unittest.main()

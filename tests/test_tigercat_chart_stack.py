from __future__ import annotations

import math
from types import SimpleNamespace
import unittest

from tigercat_chart.stack import StackedPoint, stack_series, stacked_extent


class StackSeriesTests(unittest.TestCase):
    def test_two_series_single_category(self) -> None:
        a = {"x": "a", "y": 2}
        b = {"x": "a", "y": 3}
        stacked = stack_series([[a], [b]])
        self.assertEqual(stacked[0], [StackedPoint(original=a, y0=0.0, y1=2.0)])
        self.assertEqual(stacked[1], [StackedPoint(original=b, y0=2.0, y1=5.0)])

    def test_stack_partitions_without_gaps(self) -> None:
        values = [[1.0, 4.0, 2.5], [3.0, 0.0, 1.5], [2.0, 6.0, -1.0]]
        series = [[{"x": i, "y": v} for i, v in enumerate(row)] for row in values]
        stacked = stack_series(series)
        for k, row in enumerate(stacked):
            for i, point in enumerate(row):
                self.assertAlmostEqual(point.y1 - point.y0, values[k][i])
                self.assertAlmostEqual(point.value, values[k][i])
                if k > 0:
                    self.assertEqual(point.y0, stacked[k - 1][i].y1)
                else:
                    self.assertEqual(point.y0, 0.0)

    def test_alignment_is_by_index_not_x(self) -> None:
        stacked = stack_series([[{"x": "a", "y": 1}], [{"x": "b", "y": 2}]])
        self.assertEqual((stacked[1][0].y0, stacked[1][0].y1), (1.0, 3.0))

    def test_unequal_lengths_truncate_to_shortest(self) -> None:
        stacked = stack_series([[{"y": 1}, {"y": 2}, {"y": 3}], [{"y": 4}, {"y": 5}]])
        self.assertEqual([len(s) for s in stacked], [2, 2])
        self.assertEqual(stacked[1][1].y1, 7.0)

    def test_empty_input(self) -> None:
        self.assertEqual(stack_series([]), [])
        self.assertEqual(stack_series([[], [{"y": 1}]]), [[], []])

    def test_non_finite_values_contribute_nothing(self) -> None:
        stacked = stack_series([[{"y": math.nan}], [{"y": 4}]])
        self.assertEqual((stacked[0][0].y0, stacked[0][0].y1), (0.0, 0.0))
        self.assertEqual((stacked[1][0].y0, stacked[1][0].y1), (0.0, 4.0))

    def test_attribute_datums_and_custom_value_key(self) -> None:
        first = SimpleNamespace(label="q1", revenue=10)
        second = SimpleNamespace(label="q1", revenue=5)
        stacked = stack_series([[first], [second]], value_key="revenue")
        self.assertIs(stacked[1][0].original, second)
        self.assertEqual(stacked[1][0].y1, 15.0)

    def test_stacked_extent(self) -> None:
        stacked = stack_series([[{"y": 2}, {"y": -1}], [{"y": 3}, {"y": -2}]])
        self.assertEqual(stacked_extent(stacked), (-3.0, 5.0))
        self.assertEqual(stacked_extent([]), (0.0, 1.0))


if __name__ == "__main__":
    unittest.main()

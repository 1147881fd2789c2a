from __future__ import annotations

import os
import unittest
from unittest import mock

from luvatrix_data import DownsamplePolicy, downsample, downsample_visible


class DownsampleTests(unittest.TestCase):
    def test_short_series_is_returned_whole(self) -> None:
        data = list(range(10))
        self.assertEqual(downsample(data, 10), data)
        self.assertEqual(downsample([], 5), [])

    def test_result_never_exceeds_max_points(self) -> None:
        data = list(range(1000))
        for max_points in (1, 3, 7, 100, 333, 999):
            with self.subTest(max_points=max_points):
                for offset in (0, 5, 250):
                    self.assertLessEqual(len(downsample(data, max_points, offset)), max_points)

    def test_stride_is_a_power_of_two(self) -> None:
        out = downsample(list(range(1000)), 100)
        self.assertEqual(out[:3], [0, 16, 32])

    def test_overlapping_windows_keep_the_same_points(self) -> None:
        series = list(range(1000))
        first = downsample(series[0:500], 100, 0)
        second = downsample(series[250:750], 100, 250)
        overlap_first = [v for v in first if 250 <= v < 500]
        overlap_second = [v for v in second if 250 <= v < 500]
        self.assertTrue(overlap_first)
        self.assertEqual(overlap_first, overlap_second)

    def test_invalid_arguments_raise(self) -> None:
        with self.assertRaises(ValueError):
            downsample([1, 2, 3], 0)
        with self.assertRaises(ValueError):
            downsample([1, 2, 3], 2, -1)

    def test_max_points_defaults_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {"LUVATRIX_DATA_MAX_POINTS": "10"}):
            self.assertEqual(DownsamplePolicy.from_env().max_points, 10)
            self.assertEqual(downsample(list(range(100))), [0, 16, 32, 48, 64, 80, 96])
        with mock.patch.dict(os.environ, {"LUVATRIX_DATA_MAX_POINTS": "many"}):
            self.assertEqual(DownsamplePolicy.from_env().max_points, 1000)
        with mock.patch.dict(os.environ, {"LUVATRIX_DATA_MAX_POINTS": "-4"}):
            self.assertEqual(DownsamplePolicy.from_env().max_points, 1000)

    def test_visible_window_uses_absolute_offsets(self) -> None:
        data = [{"_x": float(i), "_y": i % 7} for i in range(1000)]
        left = downsample_visible(data, (0, 499), 100)
        right = downsample_visible(data, (749, 250), 100)
        self.assertEqual(right[0]["_x"], 256.0)
        shared_left = [d["_x"] for d in left if 250 <= d["_x"] < 500]
        shared_right = [d["_x"] for d in right if 250 <= d["_x"] < 500]
        self.assertEqual(shared_left, shared_right)

    def test_visible_window_outside_data_is_empty(self) -> None:
        data = [{"_x": float(i)} for i in range(10)]
        self.assertEqual(downsample_visible(data, (20, 30), 5), [])


if __name__ == "__main__":
    unittest.main()

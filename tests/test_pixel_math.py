"""Tests for PixelMath rounding and scaling helpers (no Qt needed)."""

import math
import os
import sys
import unittest

_root = os.path.join(os.path.dirname(__file__), "..")
if _root not in sys.path:
    sys.path.insert(0, _root)

from drawsurface import PixelMath  # noqa: E402


class TestRoundHalfUp(unittest.TestCase):
    """round_half_up() is floor(x + 0.5)."""

    def test_positive_halves_go_up(self):
        self.assertEqual(PixelMath.round_half_up(0.5), 1)
        self.assertEqual(PixelMath.round_half_up(1.5), 2)
        self.assertEqual(PixelMath.round_half_up(2.5), 3)

    def test_below_half_goes_down(self):
        self.assertEqual(PixelMath.round_half_up(2.49), 2)
        self.assertEqual(PixelMath.round_half_up(7.0), 7)

    def test_negative_values_are_not_symmetric(self):
        """-0.5 rounds to 0, not -1."""
        self.assertEqual(PixelMath.round_half_up(-0.4), 0)
        self.assertEqual(PixelMath.round_half_up(-0.5), 0)
        self.assertEqual(PixelMath.round_half_up(-0.6), -1)
        self.assertEqual(PixelMath.round_half_up(-1.5), -1)

    def test_matches_floor_rule(self):
        for x in (-3.75, -2.5, -0.01, 0.0, 0.49, 3.5, 10.999, 1e6 + 0.5):
            self.assertEqual(PixelMath.round_half_up(x), math.floor(x + 0.5))

    def test_returns_int(self):
        self.assertIsInstance(PixelMath.round_half_up(3.2), int)


class TestRoundFloat(unittest.TestCase):
    """round_float() keeps `precision` decimals using round_half_up."""

    def test_default_precision_is_two(self):
        self.assertEqual(PixelMath.round_float(3.14159), 3.14)
        self.assertEqual(PixelMath.round_float(2.675001), 2.68)

    def test_custom_precision(self):
        self.assertEqual(PixelMath.round_float(3.14159, 3), 3.142)
        self.assertEqual(PixelMath.round_float(3.6, 0), 4.0)

    def test_float_representation_is_not_corrected(self):
        """1.005 * 100 is just below 100.5, so the result is 1.0."""
        expected = PixelMath.round_half_up(1.005 * 100) / 100
        self.assertEqual(PixelMath.round_float(1.005, 2), expected)
        self.assertEqual(PixelMath.round_float(1.005, 2), 1.0)


class TestScaling(unittest.TestCase):

    def test_scale_point(self):
        self.assertEqual(PixelMath.scale_point([10, 20], 2), (20, 40))
        self.assertEqual(PixelMath.scale_point((1.5, -2), 0.5), (0.75, -1.0))

    def test_scale_points_in_place(self):
        """Items are replaced in the caller's list."""
        points = [[1, 2], [3, 4], (5, 6)]
        result = PixelMath.scale_points(points, 3)
        self.assertIs(result, points)
        self.assertEqual(points, [(3, 6), (9, 12), (15, 18)])

    def test_scale_points_empty(self):
        points = []
        PixelMath.scale_points(points, 2)
        self.assertEqual(points, [])


class TestRotationGeometry(unittest.TestCase):

    def test_rotation_center(self):
        self.assertEqual(PixelMath.rotation_center(0, 0, 10, 10), (5, 5))
        self.assertEqual(PixelMath.rotation_center(4, 6, 3, 5), (5.5, 8.5))

    def test_centered_origin(self):
        self.assertEqual(PixelMath.centered_origin(10, 4), (-5, -2))


if __name__ == "__main__":
    unittest.main()

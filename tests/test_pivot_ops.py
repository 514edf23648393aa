"""
Tests for pivot resolution.

Tests cover:
- Default geometric center
- Per-axis overrides
- Zero-as-unset handling
- Center option parsing
"""

import unittest

from PIL import Image

from RA_Libs.errors import InvalidInputError
from RA_Libs.ImageEditingLib.image_models import Point
from RA_Libs.ImageEditingLib.pivot_ops import parse_center_option, resolve_pivot


class TestResolvePivot(unittest.TestCase):
    """Test resolve_pivot."""

    def test_default_center(self):
        self.assertEqual(resolve_pivot((100, 50)), Point(50, 25))

    def test_default_center_uses_floor_division(self):
        self.assertEqual(resolve_pivot((101, 51)), Point(50, 25))

    def test_accepts_image(self):
        image = Image.new("RGBA", (100, 50))

        self.assertEqual(resolve_pivot(image), Point(50, 25))

    def test_x_override_only(self):
        self.assertEqual(resolve_pivot((100, 50), {"x": 10}), Point(10, 25))

    def test_y_override_only(self):
        self.assertEqual(resolve_pivot((100, 50), {"y": 7}), Point(50, 7))

    def test_both_overrides(self):
        self.assertEqual(resolve_pivot((100, 50), {"x": 1, "y": 2}), Point(1, 2))

    def test_override_outside_bounds_used_verbatim(self):
        self.assertEqual(resolve_pivot((100, 50), {"x": -20, "y": 500}), Point(-20, 500))

    def test_zero_is_unset_by_default(self):
        self.assertEqual(resolve_pivot((100, 50), {"x": 0, "y": 0}), Point(50, 25))

    def test_zero_is_coordinate_when_requested(self):
        pivot = resolve_pivot((100, 50), {"x": 0}, zero_is_unset=False)

        self.assertEqual(pivot, Point(0, 25))

    def test_none_value_is_unset(self):
        pivot = resolve_pivot((100, 50), {"x": None, "y": 3}, zero_is_unset=False)

        self.assertEqual(pivot, Point(50, 3))

    def test_unknown_keys_ignored(self):
        self.assertEqual(resolve_pivot((100, 50), {"z": 9}), Point(50, 25))


class TestParseCenterOption(unittest.TestCase):
    """Test parse_center_option."""

    def test_empty(self):
        self.assertEqual(parse_center_option(None), {})
        self.assertEqual(parse_center_option(""), {})

    def test_both_keys(self):
        self.assertEqual(parse_center_option("x=10,y=20"), {"x": 10, "y": 20})

    def test_single_key_with_spaces(self):
        self.assertEqual(parse_center_option(" Y = 5 "), {"y": 5})

    def test_missing_equals(self):
        with self.assertRaises(InvalidInputError):
            parse_center_option("x10")

    def test_unknown_key(self):
        with self.assertRaises(InvalidInputError):
            parse_center_option("z=1")

    def test_non_integer_value(self):
        with self.assertRaises(InvalidInputError):
            parse_center_option("x=abc")

"""
Tests for rotation operations.

Tests cover:
- Frame count from rotation rate
- Rotation spec angles
- Resample filter lookup
- Single-frame rotation geometry and background fill
- Soft edges keep their color instead of darkening toward the background
"""

import math
import unittest

import numpy as np
from PIL import Image

from RA_Libs.errors import InvalidInputError
from RA_Libs.ImageEditingLib.image_models import Point, RotationSpec
from RA_Libs.ImageEditingLib.rotation_ops import (
    build_rotation_specs,
    compute_frame_count,
    get_resample_filter,
    rotate_frame,
)


class TestComputeFrameCount(unittest.TestCase):
    """Test compute_frame_count."""

    def test_one_rotation_per_second(self):
        self.assertEqual(compute_frame_count(1.0, 50.0), 50)

    def test_rounds_to_nearest(self):
        self.assertEqual(compute_frame_count(3.0, 50.0), 17)
        self.assertEqual(compute_frame_count(0.3, 50.0), 167)

    def test_slow_rotation(self):
        self.assertEqual(compute_frame_count(0.5, 50.0), 100)

    def test_fast_rotation_clamped_to_one_frame(self):
        self.assertEqual(compute_frame_count(1000.0, 50.0), 1)

    def test_non_positive_rate_rejected(self):
        for rate in (0, -1.0):
            with self.assertRaises(InvalidInputError):
                compute_frame_count(rate)

    def test_non_finite_rate_rejected(self):
        with self.assertRaises(InvalidInputError):
            compute_frame_count(float("nan"))
        with self.assertRaises(InvalidInputError):
            compute_frame_count(1.0, float("inf"))


class TestBuildRotationSpecs(unittest.TestCase):
    """Test build_rotation_specs."""

    def setUp(self):
        self.pivot = Point(5, 5)

    def test_count_and_angles(self):
        for frame_count in (1, 2, 3, 7, 50):
            specs = build_rotation_specs(frame_count, self.pivot)

            self.assertEqual(len(specs), frame_count)
            for i, spec in enumerate(specs):
                self.assertEqual(spec.index, i)
                self.assertTrue(math.isclose(spec.angle, i * (360.0 / frame_count)))
                self.assertEqual(spec.pivot, self.pivot)

    def test_single_frame_at_zero(self):
        specs = build_rotation_specs(1, self.pivot)

        self.assertEqual(specs[0].angle, 0.0)

    def test_angles_stay_below_full_turn(self):
        specs = build_rotation_specs(3, self.pivot)

        self.assertLess(specs[-1].angle, 360.0)

    def test_zero_frames_rejected(self):
        with self.assertRaises(InvalidInputError):
            build_rotation_specs(0, self.pivot)


class TestGetResampleFilter(unittest.TestCase):

    def test_known_names(self):
        self.assertEqual(get_resample_filter("bilinear"), Image.Resampling.BILINEAR)
        self.assertEqual(get_resample_filter("NEAREST"), Image.Resampling.NEAREST)
        self.assertEqual(get_resample_filter("bicubic"), Image.Resampling.BICUBIC)

    def test_unknown_name(self):
        with self.assertRaises(InvalidInputError):
            get_resample_filter("lanczos")


class TestRotateFrame(unittest.TestCase):
    """Test rotate_frame."""

    def setUp(self):
        # Opaque 21x21 image with a single red pixel right of the center
        self.image = Image.new("RGBA", (21, 21), (255, 255, 255, 255))
        self.image.putpixel((15, 10), (255, 0, 0, 255))
        self.pivot = Point(10, 10)

    def test_keeps_bounds(self):
        for angle in (0.0, 33.0, 90.0, 180.0):
            spec = RotationSpec(index=0, angle=angle, pivot=self.pivot)
            result = rotate_frame(self.image, spec)

            self.assertEqual(result.size, self.image.size)
            self.assertEqual(result.mode, "RGBA")

    def test_returns_new_image(self):
        spec = RotationSpec(index=0, angle=45.0, pivot=self.pivot)
        result = rotate_frame(self.image, spec)

        self.assertIsNot(result, self.image)
        self.assertEqual(self.image.getpixel((15, 10)), (255, 0, 0, 255))

    def test_rotates_clockwise(self):
        spec = RotationSpec(index=0, angle=90.0, pivot=self.pivot)
        result = rotate_frame(self.image, spec, resample="nearest")

        # The pivot is a pixel corner and y grows downward, so clockwise
        # carries the pixel at (15, 10) to (9, 15)
        self.assertEqual(result.getpixel((9, 15)), (255, 0, 0, 255))
        self.assertEqual(result.getpixel((15, 10)), (255, 255, 255, 255))

    def test_uncovered_corners_are_transparent(self):
        spec = RotationSpec(index=0, angle=45.0, pivot=self.pivot)
        result = rotate_frame(self.image, spec)

        self.assertEqual(result.getpixel((0, 0))[3], 0)
        self.assertEqual(result.getpixel((10, 10))[3], 255)

    def test_soft_edges_keep_color(self):
        white = Image.new("RGBA", (21, 21), (255, 255, 255, 255))
        spec = RotationSpec(index=0, angle=45.0, pivot=self.pivot)

        pixels = np.asarray(rotate_frame(white, spec, resample="bilinear"))
        alpha = pixels[..., 3]
        soft = (alpha > 0) & (alpha < 255)

        self.assertTrue(soft.any())
        self.assertGreaterEqual(int(pixels[soft][:, :3].min()), 250)

    def test_custom_background(self):
        spec = RotationSpec(index=0, angle=45.0, pivot=self.pivot)
        result = rotate_frame(self.image, spec, background=(0, 255, 0, 255))

        self.assertEqual(result.getpixel((0, 0)), (0, 255, 0, 255))

    def test_converts_rgb_input(self):
        spec = RotationSpec(index=0, angle=10.0, pivot=self.pivot)
        result = rotate_frame(self.image.convert("RGB"), spec)

        self.assertEqual(result.mode, "RGBA")

    def test_invalid_input_type(self):
        spec = RotationSpec(index=0, angle=10.0, pivot=self.pivot)
        with self.assertRaises(TypeError):
            rotate_frame("not_an_image", spec)

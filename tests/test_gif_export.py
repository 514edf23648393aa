"""
Tests for GIF export.

Tests cover:
- Export configuration
- Output path derivation
- Written GIF frame count, timing, disposal and loop metadata
- Decoded frames match the assembled frames pixel for pixel
- Overwrite protection and write failures
"""

import tempfile
import unittest
from pathlib import Path

import numpy as np
from PIL import Image

from conftest import make_arrow_image
from RA_Libs.errors import EncodeError
from RA_Libs.IOLib.gif_export import GifExportConfig, build_output_path, export_gif
from RA_Libs.PipelineLib.rotation_pipeline import RotationConfig, build_rotation_animation


class TestGifExportConfig(unittest.TestCase):
    """Test GifExportConfig dataclass."""

    def test_defaults(self):
        config = GifExportConfig()

        self.assertEqual(config.output_path, "out.gif")
        self.assertTrue(config.create_directories)
        self.assertTrue(config.overwrite)

    def test_from_dict(self):
        config = GifExportConfig.from_dict({"output_path": "a.gif", "overwrite": False, "extra": 1})

        self.assertEqual(config.output_path, "a.gif")
        self.assertFalse(config.overwrite)
        self.assertEqual(config.to_dict()["output_path"], "a.gif")


class TestBuildOutputPath(unittest.TestCase):

    def test_beside_input(self):
        self.assertEqual(build_output_path("images/logo.png"), Path("images/logo.gif"))

    def test_in_output_dir(self):
        self.assertEqual(build_output_path("images/logo.png", "out"), Path("out/logo.gif"))


class TestExportGif(unittest.TestCase):
    """Test export_gif."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)
        self.record = build_rotation_animation(
            make_arrow_image(24, 18), RotationConfig(rotations_per_second=5)
        )

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_writes_all_frames(self):
        output = export_gif(self.record, GifExportConfig(output_path=str(self.temp_path / "spin.gif")))

        self.assertTrue(output.exists())
        with Image.open(output) as gif:
            self.assertEqual(gif.format, "GIF")
            self.assertEqual(gif.size, (24, 18))
            self.assertEqual(gif.n_frames, self.record.frame_count)

    def test_timing_loop_and_disposal(self):
        output = export_gif(self.record, GifExportConfig(output_path=str(self.temp_path / "spin.gif")))

        with Image.open(output) as gif:
            self.assertEqual(gif.info["loop"], 0)
            self.assertEqual(gif.info["duration"], 20)
            gif.seek(1)
            self.assertEqual(gif.disposal_method, 3)

    def test_creates_directories(self):
        target = self.temp_path / "nested" / "dir" / "spin.gif"

        output = export_gif(self.record, GifExportConfig(output_path=str(target)))

        self.assertTrue(output.exists())

    def test_overwrite_disabled(self):
        target = self.temp_path / "spin.gif"
        target.write_bytes(b"existing")

        with self.assertRaises(EncodeError):
            export_gif(self.record, GifExportConfig(output_path=str(target), overwrite=False))

        self.assertEqual(target.read_bytes(), b"existing")

    def test_overwrite_enabled(self):
        target = self.temp_path / "spin.gif"
        target.write_bytes(b"existing")

        export_gif(self.record, GifExportConfig(output_path=str(target)))

        self.assertNotEqual(target.read_bytes(), b"existing")

    def test_unwritable_destination(self):
        blocker = self.temp_path / "blocker"
        blocker.write_text("not a directory")

        with self.assertRaises(EncodeError):
            export_gif(self.record, GifExportConfig(output_path=str(blocker / "spin.gif")))


def _decoded_frames(path):
    frames = []
    with Image.open(path) as gif:
        for index in range(gif.n_frames):
            gif.seek(index)
            frames.append(np.asarray(gif.convert("RGBA")))
    return frames


class TestExportGifFrameContent(unittest.TestCase):
    """Decoded GIF frames must equal the assembled frames."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.output = Path(self.temp_dir.name) / "spin.gif"

    def tearDown(self):
        self.temp_dir.cleanup()

    def assertFramesMatch(self, record):
        decoded = _decoded_frames(export_gif(record, GifExportConfig(output_path=str(self.output))))

        self.assertEqual(len(decoded), record.frame_count)
        for index, (actual, frame) in enumerate(zip(decoded, record.frames)):
            expected = np.asarray(frame.image.convert("RGBA"))
            opaque = expected[..., 3] > 0
            np.testing.assert_array_equal(
                actual[..., 3], expected[..., 3], err_msg=f"alpha differs in frame {index}"
            )
            np.testing.assert_array_equal(
                actual[opaque][:, :3], expected[opaque][:, :3], err_msg=f"color differs in frame {index}"
            )

    def test_off_center_pivot_frames_are_not_cropped(self):
        image = Image.new("RGBA", (60, 40), (255, 0, 0, 255))
        record = build_rotation_animation(
            image,
            RotationConfig(rotations_per_second=5, center={"x": 1, "y": 39}, resample="nearest"),
        )

        self.assertFramesMatch(record)

    def test_arrow_frames_round_trip(self):
        record = build_rotation_animation(make_arrow_image(), RotationConfig(rotations_per_second=5))

        self.assertFramesMatch(record)

    def test_identical_frames_are_kept(self):
        # Quarter turns of a uniform square about its center repeat the same pixels
        image = Image.new("RGBA", (40, 40), (255, 255, 255, 255))
        record = build_rotation_animation(
            image, RotationConfig(rotations_per_second=12.5, resample="nearest")
        )
        self.assertEqual(record.frame_count, 4)

        output = export_gif(record, GifExportConfig(output_path=str(self.output)))

        with Image.open(output) as gif:
            self.assertEqual(gif.n_frames, 4)
            for index in range(4):
                gif.seek(index)
                self.assertEqual(gif.info["duration"], 20)

    def test_single_frame_record(self):
        record = build_rotation_animation(
            make_arrow_image(), RotationConfig(rotations_per_second=100)
        )
        self.assertEqual(record.frame_count, 1)

        self.assertFramesMatch(record)

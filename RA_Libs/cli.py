"""
Command line interface for Rotation Animator.

Usage:
    rotate-animator spin -i logo.png [-i other.png] [--rps 1] [--center x=10,y=20] [-d]

Each input image is turned into '<stem>.gif' (in --output-dir, or the
current directory by default).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from RA_Libs import __version__
from RA_Libs.constants import DEFAULT_ALPHA_THRESHOLD, DEFAULT_RESAMPLE, FRAME_RATE, RESAMPLE_FILTERS
from RA_Libs.errors import InvalidInputError, RotationAnimatorError
from RA_Libs.ImageEditingLib.pivot_ops import parse_center_option
from RA_Libs.IOLib.gif_export import GifExportConfig, build_output_path, export_gif
from RA_Libs.IOLib.image_import import load_image, validate_input_path
from RA_Libs.PipelineLib.rotation_pipeline import RotationConfig, build_rotation_animation

logger = logging.getLogger("RA_Libs")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%I:%M%p"


def configure_logging(debug: bool = False) -> None:
    """
    Send package logs to stderr.

    Args:
        debug: Log at DEBUG level (per-frame timing); otherwise WARNING
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rotate-animator",
        description="Turn still images into looping rotation GIFs",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    spin = subparsers.add_parser("spin", help="Rotate images through a full revolution")
    spin.add_argument("images", nargs="*", help="Input image paths (.png)")
    spin.add_argument(
        "-i", "--image", dest="image_options", action="append", default=[],
        help="Input image path (repeatable)",
    )
    spin.add_argument("--rps", type=float, default=1.0, help="Rotations per second (default: 1)")
    spin.add_argument(
        "--fps", type=float, default=FRAME_RATE,
        help=f"Frames per second (default: {FRAME_RATE:g})",
    )
    spin.add_argument("--center", default=None, help="Pivot override, e.g. x=10,y=20")
    spin.add_argument(
        "--explicit-zero-center", action="store_true",
        help="Treat a center value of 0 as a coordinate instead of unset",
    )
    spin.add_argument(
        "--resample", choices=RESAMPLE_FILTERS, default=DEFAULT_RESAMPLE,
        help=f"Rotation resample filter (default: {DEFAULT_RESAMPLE})",
    )
    spin.add_argument("--no-dither", action="store_true", help="Disable Floyd-Steinberg dithering")
    spin.add_argument(
        "--alpha-threshold", type=int, default=DEFAULT_ALPHA_THRESHOLD,
        help=f"Alpha below which pixels become transparent (default: {DEFAULT_ALPHA_THRESHOLD})",
    )
    spin.add_argument("--workers", type=int, default=None, help="Worker threads (default: CPU count)")
    spin.add_argument("--sequential", action="store_true", help="Process frames without threads")
    spin.add_argument("--output-dir", default=".", help="Directory for output GIFs (default: .)")
    spin.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    return parser


def _collect_images(args: argparse.Namespace) -> List[Path]:
    paths = [Path(p) for p in list(args.image_options) + list(args.images)]
    if not paths:
        raise InvalidInputError("no images specified")
    return paths


def run_spin(args: argparse.Namespace) -> List[Path]:
    """
    Execute the 'spin' command.

    All inputs are validated before any of them is processed.

    Returns:
        Paths of the written GIFs, in input order
    """
    paths = _collect_images(args)
    for path in paths:
        validate_input_path(path)

    config = RotationConfig(
        rotations_per_second=args.rps,
        frame_rate=args.fps,
        center=parse_center_option(args.center) or None,
        zero_is_unset=not args.explicit_zero_center,
        resample=args.resample,
        dither=not args.no_dither,
        alpha_threshold=args.alpha_threshold,
        max_workers=args.workers,
        use_threading=not args.sequential,
    )
    config.validate()

    written: List[Path] = []
    for path in paths:
        logger.info(f"processing image path={path}")
        image = load_image(path)
        record = build_rotation_animation(image, config)
        output_path = build_output_path(path, args.output_dir)
        written.append(export_gif(record, GifExportConfig(output_path=str(output_path))))

    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        0 on success, 1 on any pipeline or I/O error
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "debug", False))

    try:
        if args.command == "spin":
            for output_path in run_spin(args):
                print(f"Wrote: {output_path}")
    except (RotationAnimatorError, OSError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

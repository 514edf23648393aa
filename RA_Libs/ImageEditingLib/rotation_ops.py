"""
Rotation operations for Rotation Animator.

Provides the frame-count math for one full revolution, the per-frame
rotation specs, and rotation of a single frame about a pivot.

Functions:
    compute_frame_count: Frames needed for one revolution at a given rate
    build_rotation_specs: Evenly spaced angles for a revolution
    get_resample_filter: Map a resample name to a Pillow filter
    rotate_frame: Rotate one image clockwise about a pivot
"""

import logging
import math
from typing import Any, List, Tuple

from PIL import Image

from RA_Libs.constants import (
    DEFAULT_RESAMPLE,
    FRAME_RATE,
    FULL_TURN_DEGREES,
    RESAMPLE_FILTERS,
    TRANSPARENT_BACKGROUND,
)
from RA_Libs.errors import InvalidInputError
from RA_Libs.ImageEditingLib.image_models import Point, RotationSpec

logger = logging.getLogger(__name__)


def compute_frame_count(rotations_per_second: float, frame_rate: float = FRAME_RATE) -> int:
    """
    Compute how many frames one full revolution needs.

    Args:
        rotations_per_second: Revolutions per second (> 0)
        frame_rate: Playback frames per second (> 0)

    Returns:
        round(frame_rate / rotations_per_second), at least 1

    Raises:
        InvalidInputError: If either rate is not a positive finite number

    Example:
        >>> compute_frame_count(1.0, 50.0)
        50
        >>> compute_frame_count(2.0, 50.0)
        25
    """
    for name, value in (("rotations_per_second", rotations_per_second), ("frame_rate", frame_rate)):
        if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
            raise InvalidInputError(f"{name} must be a positive number, got {value!r}")

    frame_count = int(round(frame_rate / rotations_per_second))
    if frame_count < 1:
        logger.warning(
            f"Rotation rate {rotations_per_second} is faster than the frame rate "
            f"{frame_rate}; clamping to a single frame"
        )
        frame_count = 1
    return frame_count


def build_rotation_specs(frame_count: int, pivot: Point) -> List[RotationSpec]:
    """
    Build one RotationSpec per frame covering a full revolution.

    Frame i is rotated by i * (360 / frame_count) degrees, so a single
    frame is the unrotated image.

    Args:
        frame_count: Number of frames (>= 1)
        pivot: Rotation center shared by all frames

    Returns:
        List of RotationSpec ordered by index

    Raises:
        InvalidInputError: If frame_count < 1
    """
    if frame_count < 1:
        raise InvalidInputError(f"frame_count must be >= 1, got {frame_count}")

    angle_step = FULL_TURN_DEGREES / frame_count
    return [
        RotationSpec(index=i, angle=i * angle_step, pivot=pivot)
        for i in range(frame_count)
    ]


def get_resample_filter(name: str) -> Any:
    """
    Map a resample name to the Pillow resampling filter.

    Args:
        name: 'nearest', 'bilinear' or 'bicubic' (case-insensitive)

    Returns:
        The matching Image.Resampling member

    Raises:
        InvalidInputError: If the name is unknown
    """
    key = str(name).strip().lower()
    if key not in RESAMPLE_FILTERS:
        raise InvalidInputError(
            f"Unknown resample filter: {name}. Valid filters: {', '.join(RESAMPLE_FILTERS)}"
        )
    return {
        "nearest": Image.Resampling.NEAREST,
        "bilinear": Image.Resampling.BILINEAR,
        "bicubic": Image.Resampling.BICUBIC,
    }[key]


def rotate_frame(
    image: Any,
    spec: RotationSpec,
    resample: str = DEFAULT_RESAMPLE,
    background: Tuple[int, int, int, int] = TRANSPARENT_BACKGROUND,
) -> Any:
    """
    Rotate an image clockwise about the spec's pivot.

    The output keeps the source bounds; pixels uncovered by the rotation
    are filled with ``background``. The source image is not modified.

    Args:
        image: PIL Image (converted to RGBA if needed)
        spec: Angle and pivot to apply
        resample: Resample filter name
        background: RGBA fill for uncovered pixels (default fully transparent)

    Returns:
        New RGBA PIL Image with the same size as ``image``

    Raises:
        TypeError: If image is not a PIL Image
        InvalidInputError: If resample is unknown
    """
    if not hasattr(image, "rotate"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    resample_filter = get_resample_filter(resample)

    if image.mode != "RGBA":
        image = image.convert("RGBA")

    # Pillow rotates counter-clockwise
    return image.rotate(
        -spec.angle,
        resample=resample_filter,
        expand=False,
        center=spec.pivot.as_tuple(),
        fillcolor=tuple(background),
    )

"""
Frame Generator for Rotation Animator.

Produces the ordered sequence of rotated frames covering one revolution.
Each frame is rotated independently in a worker thread and stored in the
slot of its angle, so the output order never depends on completion order.

Example:
    >>> from PIL import Image
    >>> image = Image.open("logo.png").convert("RGBA")
    >>> pivot = resolve_pivot(image)
    >>> frames = generate_frames(image, 50, pivot)
    >>> len(frames)
    50
"""

import logging
import time
from typing import Any, Optional, Tuple

from RA_Libs.constants import DEFAULT_RESAMPLE, TRANSPARENT_BACKGROUND
from RA_Libs.errors import InvalidInputError
from RA_Libs.ImageEditingLib.image_models import FrameSequence, Point, RotationSpec
from RA_Libs.ImageEditingLib.rotation_ops import (
    build_rotation_specs,
    get_resample_filter,
    rotate_frame,
)
from RA_Libs.PipelineLib.parallel_executor import execute_indexed_tasks

logger = logging.getLogger(__name__)


def validate_source_image(image: Any) -> None:
    """
    Reject images that cannot be rotated.

    Raises:
        InvalidInputError: If image is not a PIL Image or has zero area
    """
    if not hasattr(image, "size") or not hasattr(image, "rotate"):
        raise InvalidInputError(f"Expected PIL Image, got {type(image)}")

    width, height = image.size
    if width <= 0 or height <= 0:
        raise InvalidInputError(f"Source image has zero area: {width}x{height}")


def generate_frames(
    image: Any,
    frame_count: int,
    pivot: Point,
    resample: str = DEFAULT_RESAMPLE,
    background: Tuple[int, int, int, int] = TRANSPARENT_BACKGROUND,
    max_workers: Optional[int] = None,
    use_threading: bool = True,
) -> FrameSequence:
    """
    Rotate an image through a full revolution.

    Frame i is the source rotated clockwise by i * (360 / frame_count)
    degrees about ``pivot``. Every frame keeps the source bounds.

    Args:
        image: Source PIL Image, shared read-only by all tasks
        frame_count: Number of frames (>= 1)
        pivot: Rotation center
        resample: 'nearest', 'bilinear' or 'bicubic'
        background: RGBA fill for pixels uncovered by the rotation
        max_workers: Maximum number of threads (default: None = CPU count)
        use_threading: Rotate frames in parallel (default: True)

    Returns:
        List of RGBA PIL Images, one per frame, in angle order

    Raises:
        InvalidInputError: If the image has zero area, frame_count < 1 or
                           resample is unknown. Raised before any work starts.
        FrameTaskError: If rotating any frame fails
    """
    validate_source_image(image)
    get_resample_filter(resample)
    specs = build_rotation_specs(frame_count, pivot)

    source = image if image.mode == "RGBA" else image.convert("RGBA")
    source.load()

    def rotate_task(spec: RotationSpec) -> Any:
        start = time.perf_counter()
        frame = rotate_frame(source, spec, resample=resample, background=background)
        logger.debug(
            f"rotated frame index={spec.index} angle={spec.angle:.3f} "
            f"duration={(time.perf_counter() - start) * 1000:.1f}ms"
        )
        return frame

    logger.info(f"generating frames: count={frame_count} pivot=({pivot.x}, {pivot.y})")

    return execute_indexed_tasks(
        rotate_task,
        specs,
        max_workers=max_workers,
        use_threading=use_threading,
        task_name="rotation",
    )

"""
Palette Encoder and Animation Assembler for Rotation Animator.

Quantizes every frame of a FrameSequence against one shared palette (in
parallel, index-preserving) and packs the results with per-frame delay and
disposal metadata into an AnimationRecord.

Functions:
    compute_frame_delay: Per-frame delay in hundredths of a second
    encode_and_assemble: Quantize frames and build the AnimationRecord
"""

import logging
import math
import time
from typing import Any, Optional, Sequence

from RA_Libs.constants import (
    CENTISECONDS_PER_SECOND,
    DEFAULT_ALPHA_THRESHOLD,
    FRAME_RATE,
    LOOP_FOREVER,
    MIN_FRAME_DELAY,
)
from RA_Libs.errors import InvalidInputError
from RA_Libs.ImageEditingLib.image_models import (
    AnimationRecord,
    DisposalMethod,
    IndexedFrame,
    Palette,
)
from RA_Libs.ImageEditingLib.palette_ops import quantize_frame
from RA_Libs.PipelineLib.parallel_executor import execute_indexed_tasks

logger = logging.getLogger(__name__)


def compute_frame_delay(frame_rate: float = FRAME_RATE) -> int:
    """
    Compute the delay between frames in hundredths of a second.

    Args:
        frame_rate: Playback frames per second (> 0)

    Returns:
        round(100 / frame_rate), at least 1

    Raises:
        InvalidInputError: If frame_rate is not a positive finite number

    Example:
        >>> compute_frame_delay(50.0)
        2
    """
    if not isinstance(frame_rate, (int, float)) or not math.isfinite(frame_rate) or frame_rate <= 0:
        raise InvalidInputError(f"frame_rate must be a positive number, got {frame_rate!r}")

    return max(MIN_FRAME_DELAY, int(round(CENTISECONDS_PER_SECOND / frame_rate)))


def _validate_frames(frames: Sequence[Any]) -> None:
    if not frames:
        raise InvalidInputError("Cannot assemble an animation from zero frames")

    sizes = {getattr(frame, "size", None) for frame in frames}
    if len(sizes) != 1:
        raise InvalidInputError(
            f"All frames must share one size, got {sorted(str(s) for s in sizes)}"
        )


def encode_and_assemble(
    frames: Sequence[Any],
    delay_per_frame: int,
    palette: Palette,
    dither: bool = True,
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD,
    max_workers: Optional[int] = None,
    use_threading: bool = True,
) -> AnimationRecord:
    """
    Quantize frames to a palette and assemble the animation record.

    Every frame gets the same delay and the "restore to previous" disposal
    so successive rotations never leave ghosting; the animation loops
    forever. ``record.frames[i]`` is always the quantized ``frames[i]``.

    Args:
        frames: True-color frames in playback order, all the same size
        delay_per_frame: Delay in hundredths of a second (>= 1)
        palette: Palette shared read-only by every quantization task
        dither: Use Floyd-Steinberg error diffusion (default True)
        alpha_threshold: Alpha below which pixels become transparent
        max_workers: Maximum number of threads (default: None = CPU count)
        use_threading: Quantize frames in parallel (default: True)

    Returns:
        AnimationRecord with one entry per input frame

    Raises:
        InvalidInputError: If there are no frames, sizes differ or the delay is invalid
        FrameTaskError: If quantizing any frame fails; no partial record is returned
    """
    frames = list(frames)
    _validate_frames(frames)

    if int(delay_per_frame) < MIN_FRAME_DELAY:
        raise InvalidInputError(
            f"delay_per_frame must be >= {MIN_FRAME_DELAY}, got {delay_per_frame}"
        )

    logger.info(f"making a gif: frames={len(frames)}")

    def render_task(indexed_frame: Any) -> IndexedFrame:
        index, frame = indexed_frame
        start = time.perf_counter()
        result = quantize_frame(
            frame, palette, dither=dither, alpha_threshold=alpha_threshold
        )
        logger.debug(
            f"rendered frame index={index} "
            f"duration={(time.perf_counter() - start) * 1000:.1f}ms"
        )
        return result

    indexed_frames = execute_indexed_tasks(
        render_task,
        list(enumerate(frames)),
        max_workers=max_workers,
        use_threading=use_threading,
        task_name="quantization",
    )

    return AnimationRecord(
        frames=tuple(indexed_frames),
        delays=tuple(int(delay_per_frame) for _ in indexed_frames),
        disposal_methods=tuple(DisposalMethod.RESTORE_TO_PREVIOUS for _ in indexed_frames),
        loop_count=LOOP_FOREVER,
    )

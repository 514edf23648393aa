"""
End-to-end rotation pipeline for Rotation Animator.

Ties the stages together: pivot resolution, frame generation, palette
encoding and assembly. Works purely in memory; reading the source image
and writing the GIF are left to IOLib.

Classes:
    RotationConfig: Parameters for one rotation animation

Functions:
    build_rotation_animation: Source image -> AnimationRecord
"""

from dataclasses import asdict, dataclass
import logging
from typing import Any, Dict, Optional

from RA_Libs.constants import (
    DEFAULT_ALPHA_THRESHOLD,
    DEFAULT_RESAMPLE,
    FRAME_RATE,
    RESAMPLE_FILTERS,
)
from RA_Libs.errors import InvalidInputError
from RA_Libs.ImageEditingLib.image_models import AnimationRecord, get_animation_summary
from RA_Libs.ImageEditingLib.palette_ops import build_web_safe_palette
from RA_Libs.ImageEditingLib.pivot_ops import resolve_pivot
from RA_Libs.ImageEditingLib.rotation_ops import compute_frame_count
from RA_Libs.PipelineLib.animation_assembler import compute_frame_delay, encode_and_assemble
from RA_Libs.PipelineLib.frame_generator import generate_frames, validate_source_image

logger = logging.getLogger(__name__)


@dataclass
class RotationConfig:
    """Configuration for one rotation animation.

    Attributes:
        rotations_per_second: Revolutions per second (> 0, default: 1.0)
        frame_rate: Playback frames per second (> 0, default: 50.0)
        center: Optional pivot override with optional 'x' and 'y' keys
        zero_is_unset: Treat a 0 center value as absent (default: True)
        resample: Rotation resample filter ('nearest', 'bilinear', 'bicubic')
        dither: Floyd-Steinberg dithering during quantization (default: True)
        alpha_threshold: Alpha below which pixels become transparent (0-256)
        max_workers: Thread pool bound (None = CPU count)
        use_threading: Process frames in parallel (default: True)
    """
    rotations_per_second: float = 1.0
    frame_rate: float = FRAME_RATE
    center: Optional[Dict[str, int]] = None
    zero_is_unset: bool = True
    resample: str = DEFAULT_RESAMPLE
    dither: bool = True
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD
    max_workers: Optional[int] = None
    use_threading: bool = True

    def validate(self) -> None:
        """
        Check all parameters before any work starts.

        Raises:
            InvalidInputError: If any parameter is out of range
        """
        if not self.rotations_per_second or self.rotations_per_second <= 0:
            raise InvalidInputError(
                f"rotations_per_second must be > 0, got {self.rotations_per_second}"
            )

        if not self.frame_rate or self.frame_rate <= 0:
            raise InvalidInputError(f"frame_rate must be > 0, got {self.frame_rate}")

        if str(self.resample).lower() not in RESAMPLE_FILTERS:
            raise InvalidInputError(
                f"Unknown resample filter: {self.resample}. "
                f"Valid filters: {', '.join(RESAMPLE_FILTERS)}"
            )

        if not 0 <= self.alpha_threshold <= 256:
            raise InvalidInputError(
                f"alpha_threshold must be 0-256, got {self.alpha_threshold}"
            )

        if self.max_workers is not None and self.max_workers < 1:
            raise InvalidInputError(f"max_workers must be >= 1, got {self.max_workers}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RotationConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items()
                   if k in cls.__dataclass_fields__}
        return cls(**filtered)


def build_rotation_animation(
    image: Any,
    config: Optional[RotationConfig] = None,
) -> AnimationRecord:
    """
    Turn a still image into a looping rotation animation.

    Args:
        image: Source PIL Image (converted to RGBA)
        config: Rotation parameters (default: RotationConfig())

    Returns:
        AnimationRecord with compute_frame_count(rps, frame_rate) frames

    Raises:
        InvalidInputError: If the config or image is rejected
        FrameTaskError: If any rotation or quantization task fails

    Example:
        >>> record = build_rotation_animation(image, RotationConfig(rotations_per_second=2))
        >>> record.frame_count
        25
    """
    config = config or RotationConfig()
    config.validate()
    validate_source_image(image)

    source = image if image.mode == "RGBA" else image.convert("RGBA")

    pivot = resolve_pivot(source, config.center, zero_is_unset=config.zero_is_unset)
    frame_count = compute_frame_count(config.rotations_per_second, config.frame_rate)
    logger.debug(
        f"resolved pivot=({pivot.x}, {pivot.y}) frame_count={frame_count} "
        f"size={source.width}x{source.height}"
    )

    frames = generate_frames(
        source,
        frame_count,
        pivot,
        resample=config.resample,
        max_workers=config.max_workers,
        use_threading=config.use_threading,
    )

    record = encode_and_assemble(
        frames,
        compute_frame_delay(config.frame_rate),
        build_web_safe_palette(),
        dither=config.dither,
        alpha_threshold=config.alpha_threshold,
        max_workers=config.max_workers,
        use_threading=config.use_threading,
    )

    logger.debug("\n" + get_animation_summary(record))
    return record

"""
Image and animation data models for Rotation Animator.

This module defines the core data structures passed between the pivot
resolver, the frame generator and the palette encoder.

Classes:
    Point: Integer pixel coordinate used as rotation pivot
    RotationSpec: Angle and pivot for one frame slot
    Palette: Fixed, ordered color table with an optional transparent slot
    IndexedFrame: A palette-indexed ("P" mode) frame and its palette
    DisposalMethod: GIF frame disposal codes
    AnimationRecord: Frames plus per-frame delay and disposal, ready to save

Functions:
    get_animation_summary: Human-readable summary of an AnimationRecord

Type Aliases:
    RgbColor: A tuple of 3 integers (0-255)
    RgbaColor: A tuple of 4 integers (0-255)
    FrameSequence: Ordered list of true-color frames
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from PIL import Image

from RA_Libs.constants import (
    DISPOSAL_NONE,
    DISPOSAL_RESTORE_TO_BACKGROUND,
    DISPOSAL_RESTORE_TO_PREVIOUS,
    DISPOSAL_UNSPECIFIED,
    LOOP_FOREVER,
    MAX_PALETTE_SIZE,
)

RgbColor = Tuple[int, int, int]
RgbaColor = Tuple[int, int, int, int]
FrameSequence = List['Image.Image']


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class RotationSpec:
    """Rotation applied to produce the frame stored at ``index``.

    Attributes:
        index: Slot of the frame in the output sequence
        angle: Clockwise rotation in degrees
        pivot: Rotation center in source image coordinates
    """
    index: int
    angle: float
    pivot: Point


@dataclass(frozen=True)
class Palette:
    """Fixed color table used to quantize every frame of a run.

    Attributes:
        colors: Ordered RGB entries. The entry at ``transparent_index`` is a
                placeholder and is never matched against image content.
        transparent_index: Slot reserved for fully transparent pixels
    """
    colors: Tuple[RgbColor, ...]
    transparent_index: Optional[int] = None

    def __post_init__(self):
        colors = tuple(tuple(int(c) for c in color) for color in self.colors)
        object.__setattr__(self, "colors", colors)

        if not colors:
            raise ValueError("Palette must contain at least one color")

        if len(colors) > MAX_PALETTE_SIZE:
            raise ValueError(
                f"Palette can hold at most {MAX_PALETTE_SIZE} colors, got {len(colors)}"
            )

        for color in colors:
            if len(color) != 3 or not all(0 <= c <= 255 for c in color):
                raise ValueError(f"Invalid palette color: {color}")

        if self.transparent_index is not None:
            if not 0 <= self.transparent_index < len(colors):
                raise ValueError(
                    f"transparent_index {self.transparent_index} out of range "
                    f"for palette of {len(colors)} colors"
                )
            if len(colors) < 2:
                raise ValueError("Palette needs at least one opaque color")

    def __len__(self) -> int:
        return len(self.colors)

    def opaque_colors(self) -> List[RgbColor]:
        """Colors available for matching, in palette order, without the transparent slot."""
        return [
            color for index, color in enumerate(self.colors)
            if index != self.transparent_index
        ]

    def opaque_indices(self) -> List[int]:
        """Palette indices of ``opaque_colors()``, in the same order."""
        return [
            index for index in range(len(self.colors))
            if index != self.transparent_index
        ]

    def flat_rgb(self) -> List[int]:
        """Flattened [r, g, b, r, g, b, ...] list for ``Image.putpalette``."""
        flat: List[int] = []
        for color in self.colors:
            flat.extend(color)
        return flat

    def color_at(self, index: int) -> RgbaColor:
        """RGBA value of a palette entry; the transparent slot is (0, 0, 0, 0)."""
        if index == self.transparent_index:
            return (0, 0, 0, 0)
        r, g, b = self.colors[index]
        return (r, g, b, 255)


@dataclass(frozen=True)
class IndexedFrame:
    """A quantized frame.

    Attributes:
        image: PIL Image in "P" mode whose pixel values are palette indices
        palette: The palette the indices refer to
    """
    image: 'Image.Image'
    palette: Palette

    def __post_init__(self):
        if self.image.mode != "P":
            raise ValueError(f"IndexedFrame requires a 'P' mode image, got {self.image.mode}")

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def index_at(self, x: int, y: int) -> int:
        return self.image.getpixel((x, y))

    def color_at(self, x: int, y: int) -> RgbaColor:
        return self.palette.color_at(self.index_at(x, y))

    def indices(self) -> np.ndarray:
        """Copy of the index grid as a (height, width) uint8 array."""
        return np.array(self.image, dtype=np.uint8)


class DisposalMethod(IntEnum):
    """GIF disposal codes, see the GIF89a Graphic Control Extension."""
    UNSPECIFIED = DISPOSAL_UNSPECIFIED
    NONE = DISPOSAL_NONE
    RESTORE_TO_BACKGROUND = DISPOSAL_RESTORE_TO_BACKGROUND
    RESTORE_TO_PREVIOUS = DISPOSAL_RESTORE_TO_PREVIOUS


@dataclass(frozen=True)
class AnimationRecord:
    """In-memory animation ready for serialization.

    Attributes:
        frames: Indexed frames in playback order
        delays: Per-frame delay in hundredths of a second
        disposal_methods: Per-frame disposal instruction
        loop_count: Number of loops, 0 = forever
    """
    frames: Tuple[IndexedFrame, ...]
    delays: Tuple[int, ...]
    disposal_methods: Tuple[DisposalMethod, ...]
    loop_count: int = LOOP_FOREVER

    def __post_init__(self):
        object.__setattr__(self, "frames", tuple(self.frames))
        object.__setattr__(self, "delays", tuple(int(d) for d in self.delays))
        object.__setattr__(
            self, "disposal_methods",
            tuple(DisposalMethod(d) for d in self.disposal_methods),
        )

        if not self.frames:
            raise ValueError("AnimationRecord requires at least one frame")

        if not len(self.frames) == len(self.delays) == len(self.disposal_methods):
            raise ValueError(
                f"Mismatched record lengths: {len(self.frames)} frames, "
                f"{len(self.delays)} delays, {len(self.disposal_methods)} disposal methods"
            )

        if self.loop_count < 0:
            raise ValueError(f"loop_count must be >= 0, got {self.loop_count}")

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def size(self) -> Tuple[int, int]:
        return self.frames[0].size

    @property
    def total_duration(self) -> int:
        """Sum of all delays in hundredths of a second."""
        return sum(self.delays)

    def to_dict(self) -> Dict[str, Any]:
        """Convert record metadata (not pixel data) to a dictionary."""
        return {
            "frame_count": self.frame_count,
            "size": list(self.size),
            "delays": list(self.delays),
            "disposal_methods": [int(d) for d in self.disposal_methods],
            "loop_count": self.loop_count,
            "palette_size": len(self.frames[0].palette),
        }


def get_animation_summary(record: AnimationRecord) -> str:
    """
    Generate human-readable summary of an animation record.

    Args:
        record: The assembled animation

    Returns:
        Multi-line string describing the animation

    Example:
        >>> print(get_animation_summary(record))
        Animation Summary:
          Frames: 50
          Size: 64x64
          ...
    """
    width, height = record.size
    delays = sorted(set(record.delays))
    disposals = sorted({d.name for d in record.disposal_methods})
    loop_text = "forever" if record.loop_count == LOOP_FOREVER else str(record.loop_count)

    lines = [
        "Animation Summary:",
        f"  Frames: {record.frame_count}",
        f"  Size: {width}x{height}",
        f"  Palette Colors: {len(record.frames[0].palette)}",
        f"  Delay: {', '.join(str(d) for d in delays)} (1/100 s)",
        f"  Total Duration: {record.total_duration / 100.0:.2f} s",
        f"  Disposal: {', '.join(disposals)}",
        f"  Loop: {loop_text}",
    ]
    return "\n".join(lines)

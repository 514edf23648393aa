"""
ImageEditingLib - Core image models and per-frame operations

This module provides the data models, pivot resolution, rotation and
palette quantization used by the Rotation Animator pipeline.
"""

from RA_Libs.ImageEditingLib.image_models import (
    Point,
    RotationSpec,
    Palette,
    IndexedFrame,
    DisposalMethod,
    AnimationRecord,
    get_animation_summary,
)
from RA_Libs.ImageEditingLib.pivot_ops import resolve_pivot, parse_center_option
from RA_Libs.ImageEditingLib.rotation_ops import (
    compute_frame_count,
    build_rotation_specs,
    rotate_frame,
)
from RA_Libs.ImageEditingLib.palette_ops import build_web_safe_palette, quantize_frame

__all__ = [
    "Point",
    "RotationSpec",
    "Palette",
    "IndexedFrame",
    "DisposalMethod",
    "AnimationRecord",
    "get_animation_summary",
    "resolve_pivot",
    "parse_center_option",
    "compute_frame_count",
    "build_rotation_specs",
    "rotate_frame",
    "build_web_safe_palette",
    "quantize_frame",
]

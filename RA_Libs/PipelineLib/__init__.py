"""
PipelineLib - Parallel frame pipeline

This module runs the per-frame rotation and quantization work in a
bounded thread pool and assembles the resulting animation record.
"""

from RA_Libs.PipelineLib.parallel_executor import execute_indexed_tasks
from RA_Libs.PipelineLib.frame_generator import generate_frames
from RA_Libs.PipelineLib.animation_assembler import compute_frame_delay, encode_and_assemble
from RA_Libs.PipelineLib.rotation_pipeline import RotationConfig, build_rotation_animation

__all__ = [
    "execute_indexed_tasks",
    "generate_frames",
    "compute_frame_delay",
    "encode_and_assemble",
    "RotationConfig",
    "build_rotation_animation",
]

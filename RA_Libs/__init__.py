"""
RA_Libs - Rotation Animator Library Modules

This package turns a still image into a looping rotation animation,
organized into specialized sub-packages:

- ImageEditingLib: Data models, pivot resolution, rotation and palette operations
- PipelineLib: Parallel frame generation, quantization and animation assembly
- IOLib: Input format dispatch, image import and GIF export
"""

__version__ = "0.1.0"

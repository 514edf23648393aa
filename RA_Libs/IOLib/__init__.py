"""
IOLib - Image import and GIF export

This module handles format dispatch for input images, decoding them from
disk, and writing assembled animations as GIF files.
"""

from RA_Libs.IOLib.decoder_registry import DecoderRegistry, get_default_registry
from RA_Libs.IOLib.image_import import decode_png, load_image, validate_input_path
from RA_Libs.IOLib.gif_export import GifExportConfig, build_gif_chunks, build_output_path, export_gif

__all__ = [
    "DecoderRegistry",
    "get_default_registry",
    "decode_png",
    "load_image",
    "validate_input_path",
    "GifExportConfig",
    "build_output_path",
    "build_gif_chunks",
    "export_gif",
]

"""
Palette operations for Rotation Animator.

Builds the fixed palette shared by every frame of a run and quantizes a
single true-color frame against it using Floyd-Steinberg error diffusion.

Functions:
    build_web_safe_palette: 216 web-safe colors plus a transparent slot
    build_palette_image: 'P' mode image carrying a palette's opaque colors
    quantize_frame: Dither one RGBA frame into an IndexedFrame
"""

from typing import Any, List

import numpy as np
from PIL import Image

from RA_Libs.constants import DEFAULT_ALPHA_THRESHOLD, TRANSPARENT_INDEX, WEB_SAFE_LEVELS
from RA_Libs.ImageEditingLib.image_models import IndexedFrame, Palette, RgbColor


def build_web_safe_palette(include_transparent: bool = True) -> Palette:
    """
    Build the 6x6x6 web-safe color cube palette.

    Colors are ordered red-major (red varies slowest), each channel taking
    the values 0x00, 0x33, 0x66, 0x99, 0xCC and 0xFF.

    Args:
        include_transparent: Append a transparent slot at index 216

    Returns:
        Palette with 216 colors, or 217 with the transparent slot
    """
    colors: List[RgbColor] = [
        (r, g, b)
        for r in WEB_SAFE_LEVELS
        for g in WEB_SAFE_LEVELS
        for b in WEB_SAFE_LEVELS
    ]

    if not include_transparent:
        return Palette(colors=tuple(colors))

    colors.append((0, 0, 0))
    return Palette(colors=tuple(colors), transparent_index=TRANSPARENT_INDEX)


def build_palette_image(palette: Palette) -> Any:
    """
    Create a 'P' mode image whose palette holds only the opaque colors.

    Pillow quantizes against every entry of a palette image, so the
    transparent slot is left out to keep it from being matched.

    Args:
        palette: Source palette

    Returns:
        1x1 PIL Image in 'P' mode
    """
    flat: List[int] = []
    for color in palette.opaque_colors():
        flat.extend(color)

    palette_image = Image.new("P", (1, 1))
    palette_image.putpalette(flat)
    return palette_image


def quantize_frame(
    image: Any,
    palette: Palette,
    dither: bool = True,
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD,
) -> IndexedFrame:
    """
    Quantize a true-color frame to a fixed palette.

    Color is matched with Floyd-Steinberg error diffusion (or plain nearest
    color when ``dither`` is False). Pixels with alpha below
    ``alpha_threshold`` are then mapped to the palette's transparent slot,
    if it has one. The result is deterministic for a given input.

    Args:
        image: PIL Image (any mode, converted to RGBA)
        palette: Palette to quantize against, never modified
        dither: Use Floyd-Steinberg error diffusion (default True)
        alpha_threshold: Alpha value (0-256) below which a pixel is transparent

    Returns:
        IndexedFrame with the same size as ``image``

    Raises:
        TypeError: If image is not a PIL Image
        ValueError: If the image has zero area
    """
    if not hasattr(image, "convert"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.width == 0 or image.height == 0:
        raise ValueError(f"Cannot quantize zero-area image of size {image.size}")

    rgba = image.convert("RGBA") if image.mode != "RGBA" else image
    dither_mode = Image.Dither.FLOYDSTEINBERG if dither else Image.Dither.NONE

    quantized = rgba.convert("RGB").quantize(
        palette=build_palette_image(palette),
        dither=dither_mode,
    )

    # Positions in opaque_colors() -> palette indices
    lookup = np.array(palette.opaque_indices(), dtype=np.uint8)
    indices = lookup[np.asarray(quantized, dtype=np.uint8)]

    if palette.transparent_index is not None:
        alpha = np.asarray(rgba.getchannel("A"), dtype=np.uint16)
        indices[alpha < alpha_threshold] = palette.transparent_index

    indexed = Image.frombytes("P", rgba.size, np.ascontiguousarray(indices).tobytes())
    indexed.putpalette(palette.flat_rgb())
    if palette.transparent_index is not None:
        indexed.info["transparency"] = palette.transparent_index

    return IndexedFrame(image=indexed, palette=palette)

"""
Image import for Rotation Animator.

Loads a source image from disk through the decoder registry and returns
a fully decoded RGBA PIL Image.

Functions:
    decode_png: Decode a PNG file
    validate_input_path: Check a path exists and has a supported extension
    load_image: Dispatch on extension and decode
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from PIL import Image, UnidentifiedImageError

from RA_Libs.errors import DecodeError, InvalidInputError
from RA_Libs.IOLib.decoder_registry import DecoderRegistry, get_default_registry

logger = logging.getLogger(__name__)


def decode_png(path: Path) -> Any:
    """
    Decode a PNG file into an RGBA image.

    Args:
        path: Path to the PNG file

    Returns:
        Fully loaded PIL Image in RGBA mode

    Raises:
        DecodeError: If the file is not a decodable PNG
    """
    try:
        with Image.open(path) as img:
            if img.format != "PNG":
                raise DecodeError(f"File is not a PNG image: {path} (detected {img.format})")
            img.load()
            # Convert to RGBA for consistency
            return img.convert("RGBA")
    except DecodeError:
        raise
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise DecodeError(f"Failed to decode image from {path}: {str(e)}") from e


def validate_input_path(
    path: Union[str, Path],
    registry: Optional[DecoderRegistry] = None,
) -> Path:
    """
    Check that an input file exists and can be decoded.

    Args:
        path: Path to the image file
        registry: Decoder registry (default: global registry)

    Returns:
        The path as a Path object

    Raises:
        InvalidInputError: If the extension is unsupported, the file does not
                           exist or the path is not a file
    """
    registry = registry or get_default_registry()
    file_path = Path(path)

    registry.get_decoder(file_path)

    if not file_path.exists():
        raise InvalidInputError(f"Image file not found: {file_path}")

    if not file_path.is_file():
        raise InvalidInputError(f"Path is not a file: {file_path}")

    return file_path


def load_image(
    path: Union[str, Path],
    registry: Optional[DecoderRegistry] = None,
) -> Any:
    """
    Load an image from disk.

    Args:
        path: Path to the image file
        registry: Decoder registry (default: global registry)

    Returns:
        PIL Image in RGBA mode

    Raises:
        InvalidInputError: If the path or extension is rejected
        DecodeError: If decoding fails
    """
    registry = registry or get_default_registry()
    file_path = validate_input_path(path, registry)

    decoder = registry.get_decoder(file_path)
    image = decoder(file_path)

    logger.debug(f"loaded image path={file_path} size={image.width}x{image.height}")
    return image

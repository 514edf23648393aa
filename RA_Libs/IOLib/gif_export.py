"""
GIF export for Rotation Animator.

Serializes an AnimationRecord to an animated GIF with Pillow's frame-level
GIF writer. Every frame is written whole at offset (0, 0), so a decoder
that restores the canvas between frames shows exactly the recorded frame.

Classes:
    GifExportConfig: Configuration for writing one GIF

Functions:
    build_output_path: Derive '<stem>.gif' for an input path
    build_gif_chunks: Encode an AnimationRecord as GIF byte chunks
    export_gif: Write an AnimationRecord to disk
"""

from dataclasses import asdict, dataclass
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from PIL import GifImagePlugin

from RA_Libs.constants import MILLISECONDS_PER_CENTISECOND, OUTPUT_EXTENSION
from RA_Libs.errors import EncodeError
from RA_Libs.ImageEditingLib.image_models import AnimationRecord

logger = logging.getLogger(__name__)

GIF_TRAILER = b";"


@dataclass
class GifExportConfig:
    """Configuration for GIF export.

    Attributes:
        output_path: Destination file path
        create_directories: Create missing parent directories (default: True)
        overwrite: Replace an existing file (default: True)
    """
    output_path: str = "out.gif"
    create_directories: bool = True
    overwrite: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GifExportConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items()
                   if k in cls.__dataclass_fields__}
        return cls(**filtered)


def build_output_path(
    input_path: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Build the GIF path for an input image.

    Args:
        input_path: Source image path
        output_dir: Directory for the GIF (default: beside the input)

    Returns:
        Path named '<input stem>.gif'
    """
    input_path = Path(input_path)
    directory = Path(output_dir) if output_dir is not None else input_path.parent
    return directory / f"{input_path.stem}{OUTPUT_EXTENSION}"


def _get_frame_params(record: AnimationRecord, index: int) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "duration": record.delays[index] * MILLISECONDS_PER_CENTISECOND,
        "disposal": int(record.disposal_methods[index]),
    }

    transparent_index = record.frames[index].palette.transparent_index
    if transparent_index is not None:
        params["transparency"] = transparent_index

    return params


def build_gif_chunks(record: AnimationRecord) -> List[bytes]:
    """
    Encode an AnimationRecord as the byte chunks of one GIF stream.

    Pillow's save_all writer crops each frame to the area that changed
    since the previous frame and merges identical neighbours, which is
    only correct for disposal 0/1. Writing the header and each frame
    separately keeps one full-canvas image per record frame.

    Args:
        record: Assembled animation

    Returns:
        Header chunks, frame chunks and the trailer, in write order
    """
    first = record.frames[0]
    header_info: Dict[str, Any] = {"loop": record.loop_count}
    if first.palette.transparent_index is not None:
        header_info["transparency"] = first.palette.transparent_index

    # getheader may rewrite the image it is given
    header, _ = GifImagePlugin.getheader(first.image.copy(), info=header_info)

    chunks: List[bytes] = [bytes(chunk) for chunk in header]
    for index, frame in enumerate(record.frames):
        frame_chunks = GifImagePlugin.getdata(
            frame.image, offset=(0, 0), **_get_frame_params(record, index)
        )
        chunks.extend(bytes(chunk) for chunk in frame_chunks)

    chunks.append(GIF_TRAILER)
    return chunks


def export_gif(record: AnimationRecord, config: GifExportConfig) -> Path:
    """
    Write an AnimationRecord to disk as an animated GIF.

    Args:
        record: Assembled animation
        config: Destination and write options

    Returns:
        Path where the GIF was saved

    Raises:
        EncodeError: If the file exists and overwrite=False, or the GIF
                     cannot be encoded or written
    """
    output_file = Path(config.output_path)

    if output_file.exists() and not config.overwrite:
        raise EncodeError(
            f"Output file already exists: {output_file}. "
            f"Set overwrite=True to replace."
        )

    try:
        chunks = build_gif_chunks(record)

        if config.create_directories:
            output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "wb") as fp:
            for chunk in chunks:
                fp.write(chunk)
    except (OSError, ValueError) as e:
        raise EncodeError(f"Failed to save animation to {output_file}: {str(e)}") from e

    logger.info(f"wrote gif path={output_file} frames={record.frame_count}")
    return output_file

"""
Input Decoder Registry.

This module provides a centralized registry mapping file extensions to
image decoders. Dispatch is capability based: an extension with no
registered decoder is reported as unsupported instead of being skipped.

Classes:
    DecoderRegistry: Registry for input decoders

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_decoders: Register all built-in decoders
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from RA_Libs.errors import InvalidInputError

logger = logging.getLogger(__name__)

# Type alias for decoder function
DecoderFunction = Callable[[Path], Any]


def normalize_extension(path_or_ext: Union[str, Path]) -> str:
    """
    Normalize a path or extension to a lowercase '.ext' string.

    Args:
        path_or_ext: File path ('logo.PNG') or extension ('png', '.png')

    Returns:
        Lowercase extension with leading dot, or '' if there is none
    """
    text = str(path_or_ext).strip()
    if not text:
        return ""

    suffix = Path(text).suffix
    if suffix:
        return suffix.lower()

    # Bare extension such as 'png' or '.png'
    if "/" not in text and "\\" not in text:
        return "." + text.lstrip(".").lower()

    return ""


class DecoderRegistry:
    """
    Registry for input decoders keyed by file extension.

    Example:
        >>> registry = DecoderRegistry()
        >>> registry.register(".png", decode_png, description="PNG images")
        >>> decoder = registry.get_decoder("logo.png")
        >>> image = decoder(Path("logo.png"))
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._decoders: Dict[str, DecoderFunction] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        extension: str,
        decoder: DecoderFunction,
        description: str = "",
    ) -> None:
        """
        Register a decoder for a file extension.

        Args:
            extension: File extension, with or without leading dot
            decoder: Callable accepting a Path and returning a PIL Image
            description: Human-readable description of the format

        Raises:
            ValueError: If extension is empty or decoder is not callable
            RuntimeError: If extension is already registered
        """
        ext = normalize_extension(extension)

        if not ext or ext == ".":
            raise ValueError("extension cannot be empty")

        if not callable(decoder):
            raise ValueError(f"decoder must be callable, got {type(decoder)}")

        if ext in self._decoders:
            raise RuntimeError(
                f"Extension '{ext}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._decoders[ext] = decoder
        self._metadata[ext] = {"description": str(description)}

        logger.debug(f"Registered decoder for extension: {ext}")

    def unregister(self, extension: str) -> bool:
        """
        Unregister a decoder.

        Returns:
            True if unregistered, False if extension was not registered
        """
        ext = normalize_extension(extension)

        if ext in self._decoders:
            del self._decoders[ext]
            del self._metadata[ext]
            logger.debug(f"Unregistered decoder for extension: {ext}")
            return True

        return False

    def has_decoder(self, path_or_ext: Union[str, Path]) -> bool:
        return normalize_extension(path_or_ext) in self._decoders

    def get_decoder(self, path_or_ext: Union[str, Path]) -> DecoderFunction:
        """
        Get the decoder for a path or extension.

        Args:
            path_or_ext: File path or extension

        Returns:
            The decoder function

        Raises:
            InvalidInputError: If no decoder handles the extension
        """
        ext = normalize_extension(path_or_ext)

        if ext not in self._decoders:
            available = ", ".join(self.list_extensions()) or "none"
            raise InvalidInputError(
                f"Unsupported image type '{ext or path_or_ext}'. "
                f"Supported types: {available}"
            )

        return self._decoders[ext]

    def list_extensions(self) -> List[str]:
        """
        Get list of all registered extensions.

        Returns:
            Sorted list of extensions
        """
        return sorted(self._decoders.keys())

    def get_metadata(self, extension: str) -> Dict[str, Any]:
        """
        Get metadata for an extension.

        Raises:
            KeyError: If extension is not registered
        """
        ext = normalize_extension(extension)

        if ext not in self._metadata:
            raise KeyError(f"No metadata for extension: {ext}")

        return dict(self._metadata[ext])


# Global singleton registry
_default_registry: Optional[DecoderRegistry] = None


def get_default_registry() -> DecoderRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers default decoders.

    Returns:
        The global DecoderRegistry instance
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = DecoderRegistry()
        register_default_decoders(_default_registry)

    return _default_registry


def register_default_decoders(registry: DecoderRegistry) -> None:
    """
    Register all built-in decoders.

    Only PNG is supported; other formats are rejected by get_decoder().

    Args:
        registry: The registry to register decoders with
    """
    from RA_Libs.IOLib.image_import import decode_png

    registry.register(
        extension=".png",
        decoder=decode_png,
        description="Portable Network Graphics",
    )

    logger.debug("Registered default decoders")

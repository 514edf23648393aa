"""
Error kinds raised by Rotation Animator.

Every error derives from RotationAnimatorError so callers (the CLI in
particular) can report any pipeline failure with a single handler, and
also from the closest built-in exception so existing ``except ValueError``
or ``except IOError`` handlers keep working.

Classes:
    RotationAnimatorError: Base class for all pipeline errors
    InvalidInputError: Bad arguments, unsupported formats, zero-area images
    DecodeError: An input file could not be decoded
    FrameTaskError: A single frame's rotation or quantization task failed
    EncodeError: The assembled animation could not be written
"""

from typing import Optional


class RotationAnimatorError(Exception):
    """Base class for all Rotation Animator errors."""


class InvalidInputError(RotationAnimatorError, ValueError):
    """Raised when input is rejected before any work is attempted."""


class DecodeError(RotationAnimatorError, IOError):
    """Raised when an input image cannot be decoded."""


class FrameTaskError(RotationAnimatorError, RuntimeError):
    """Raised when one per-frame task fails, failing the whole batch.

    Attributes:
        index: Slot index of the failed task (None if unknown)
    """

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class EncodeError(RotationAnimatorError, IOError):
    """Raised when the animation cannot be serialized or written."""

"""
Pivot resolution for Rotation Animator.

The pivot is the point, in source image coordinates, that stays fixed while
the image rotates. It defaults to the geometric center of the image and can
be overridden per axis.

Functions:
    resolve_pivot: Resolve the rotation center from image size and override
    parse_center_option: Parse an "x=10,y=20" style override string
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from RA_Libs.constants import CENTER_KEY_X, CENTER_KEY_Y, CENTER_KEYS
from RA_Libs.errors import InvalidInputError
from RA_Libs.ImageEditingLib.image_models import Point


def _get_size(image_or_size: Any) -> Tuple[int, int]:
    if hasattr(image_or_size, "size") and not isinstance(image_or_size, tuple):
        return tuple(image_or_size.size)
    width, height = image_or_size
    return int(width), int(height)


def _axis_value(
    override: Mapping[str, Any],
    key: str,
    default: int,
    zero_is_unset: bool,
) -> int:
    value = override.get(key)
    if value is None:
        return default
    value = int(value)
    if value == 0 and zero_is_unset:
        return default
    return value


def resolve_pivot(
    image_or_size: Any,
    override: Optional[Mapping[str, Any]] = None,
    zero_is_unset: bool = True,
) -> Point:
    """
    Determine the rotation center.

    Each axis uses the override value when one is set, otherwise half the
    image extent on that axis (floor division).

    Args:
        image_or_size: PIL Image or (width, height) tuple
        override: Optional mapping with optional 'x' and 'y' keys
        zero_is_unset: Treat an override value of 0 as absent (default True).
                       When False, only a missing or None value is absent
                       and 0 pins the pivot to the image edge.

    Returns:
        The resolved pivot Point

    Example:
        >>> resolve_pivot((100, 50))
        Point(x=50, y=25)
        >>> resolve_pivot((100, 50), {"x": 10})
        Point(x=10, y=25)
    """
    width, height = _get_size(image_or_size)
    override = override or {}

    x = _axis_value(override, CENTER_KEY_X, width // 2, zero_is_unset)
    y = _axis_value(override, CENTER_KEY_Y, height // 2, zero_is_unset)
    return Point(x, y)


def parse_center_option(text: Optional[str]) -> Dict[str, int]:
    """
    Parse a center override given on the command line.

    Accepts comma separated ``key=value`` pairs where key is 'x' or 'y',
    e.g. "x=10,y=20", "y=5" or "" (no override).

    Args:
        text: The option value (None or empty for no override)

    Returns:
        Dictionary with the keys that were given

    Raises:
        InvalidInputError: If a pair is malformed, a key is unknown or a
                           value is not an integer
    """
    center: Dict[str, int] = {}
    if not text:
        return center

    for part in text.split(","):
        part = part.strip()
        if not part:
            continue

        if "=" not in part:
            raise InvalidInputError(f"Invalid center entry '{part}': expected key=value")

        key, value = (s.strip() for s in part.split("=", 1))
        key = key.lower()
        if key not in CENTER_KEYS:
            raise InvalidInputError(
                f"Invalid center key '{key}': expected one of {', '.join(CENTER_KEYS)}"
            )

        try:
            center[key] = int(value)
        except ValueError:
            raise InvalidInputError(f"Invalid center value for '{key}': {value!r}")

    return center

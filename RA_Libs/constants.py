"""
Constants and configuration values for Rotation Animator.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Timing
FRAME_RATE = 50.0
CENTISECONDS_PER_SECOND = 100
MILLISECONDS_PER_CENTISECOND = 10
MIN_FRAME_DELAY = 1

# Rotation
FULL_TURN_DEGREES = 360.0
DEFAULT_RESAMPLE = "bilinear"
RESAMPLE_FILTERS = ("nearest", "bilinear", "bicubic")
TRANSPARENT_BACKGROUND = (0, 0, 0, 0)

# Palette
WEB_SAFE_LEVELS = (0x00, 0x33, 0x66, 0x99, 0xCC, 0xFF)
TRANSPARENT_INDEX = 216
MAX_PALETTE_SIZE = 256
DEFAULT_ALPHA_THRESHOLD = 128

# GIF disposal codes
DISPOSAL_UNSPECIFIED = 0
DISPOSAL_NONE = 1
DISPOSAL_RESTORE_TO_BACKGROUND = 2
DISPOSAL_RESTORE_TO_PREVIOUS = 3

# Loop count (0 = loop forever)
LOOP_FOREVER = 0

# Output format
OUTPUT_EXTENSION = ".gif"

# Pivot override keys
CENTER_KEY_X = "x"
CENTER_KEY_Y = "y"
CENTER_KEYS = (CENTER_KEY_X, CENTER_KEY_Y)

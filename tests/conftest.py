"""
Pytest configuration and shared fixtures for Rotation Animator tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image


def make_arrow_image(width=40, height=30):
    """
    Build an asymmetric RGBA test image.

    A red bar runs right from the center and a blue block sits in the top
    left corner, so any rotation changes the pixels.
    """
    image = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    pixels = image.load()
    for x in range(width // 2, width):
        for y in range(height // 2 - 2, height // 2 + 2):
            pixels[x, y] = (255, 0, 0, 255)
    for x in range(6):
        for y in range(6):
            pixels[x, y] = (0, 0, 255, 255)
    return image


@pytest.fixture
def arrow_image():
    """Provide an asymmetric 40x30 RGBA image."""
    return make_arrow_image()


@pytest.fixture
def web_safe_rgba_colors():
    """
    Provide a list of RGBA colors that are exactly in the web-safe palette.

    Returns:
        List of (R, G, B, A) tuples
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (51, 102, 153, 255),  # Steel blue
    ]

"""Common utilities for painterly processing."""

import math

import numpy as np
from PIL import Image

# Working resolution cap (longest side, pixels)
MAX_SIDE = 768


def working_size(width: int, height: int, max_side: int = MAX_SIDE) -> tuple[int, int]:
    """
    Compute the working resolution for a source image.
    Scales down (never up) so the longest side fits max_side, keeping aspect ratio.

    Args:
        width, height: Source dimensions
        max_side: Longest allowed side

    Returns:
        (width, height) of the working image, each at least 1
    """
    ratio = min(max_side / width, max_side / height, 1)
    new_width = int(math.floor(width * ratio + 0.5))
    new_height = int(math.floor(height * ratio + 0.5))
    return max(1, new_width), max(1, new_height)


def resize_to_working(image: Image.Image, max_side: int = MAX_SIDE) -> Image.Image:
    """
    Resize image to its working resolution without smoothing.

    Args:
        image: PIL Image
        max_side: Longest allowed side

    Returns:
        RGBA PIL Image at working resolution (a copy if no resize was needed)
    """
    rgba = image.convert("RGBA")
    size = working_size(rgba.width, rgba.height, max_side)
    if size == rgba.size:
        return rgba.copy()
    return rgba.resize(size, Image.Resampling.NEAREST)


def sample_color(pixels: np.ndarray, x: float, y: float) -> tuple[int, int, int]:
    """
    Look up the color of a pixel, clamping coordinates into the buffer.

    Args:
        pixels: Array of shape (height, width, channels)
        x, y: Canvas coordinates, truncated toward zero then clamped

    Returns:
        (r, g, b) of the clamped pixel, alpha ignored
    """
    height, width = pixels.shape[:2]
    sx = max(0, min(width - 1, int(x)))
    sy = max(0, min(height - 1, int(y)))
    r, g, b = pixels[sy, sx, :3]
    return int(r), int(g), int(b)

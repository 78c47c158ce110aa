"""Channel posterization."""

import math

import numpy as np
from PIL import Image

from .errors import InvalidParameterError


def quantization_levels(levels: int) -> list[int]:
    """
    Channel values produced by posterize() for a level count.

    Args:
        levels: Number of levels per channel (>= 2)

    Returns:
        Sorted list of distinct byte values
    """
    if levels < 2:
        raise InvalidParameterError(f"levels must be at least 2, got {levels}")
    step = 255 / (levels - 1)
    return sorted({min(255, int(math.floor(i * step + 0.5))) for i in range(levels)})


def posterize(image: Image.Image, levels: int = 6) -> Image.Image:
    """
    Snap each color channel to one of `levels` evenly spaced values.
    Alpha is left untouched.

    Args:
        image: Input PIL Image (converted to RGBA)
        levels: Number of levels per channel (>= 2)

    Returns:
        New RGBA PIL Image
    """
    if levels < 2:
        raise InvalidParameterError(f"levels must be at least 2, got {levels}")

    step = 255 / (levels - 1)
    pixels = np.array(image.convert("RGBA"), dtype=np.float64)

    rgb = pixels[..., :3]
    snapped = np.floor(rgb / step + 0.5) * step
    pixels[..., :3] = np.clip(np.floor(snapped + 0.5), 0, 255)

    return Image.fromarray(pixels.astype(np.uint8))

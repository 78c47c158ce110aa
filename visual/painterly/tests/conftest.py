import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def red_image():
    return Image.new("RGBA", (768, 768), (255, 0, 0, 255))


@pytest.fixture
def small_image():
    # Horizontal hue sweep over a vertical brightness ramp
    xs = np.linspace(0, 255, 48)
    ys = np.linspace(40, 255, 32)
    r = np.tile(xs, (32, 1))
    g = np.tile(ys[:, None], (1, 48))
    b = 255 - r
    rgb = np.stack([r, g, b], axis=-1).astype(np.uint8)
    return Image.fromarray(rgb).convert("RGBA")


@pytest.fixture
def noise_image():
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(40, 60, 4), dtype=np.uint8)
    return Image.fromarray(pixels)


@pytest.fixture
def coord_buffer():
    # Pixel (x, y) holds (x, y, 0, 255) so lookups reveal their coordinates
    height, width = 5, 7
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = (x, y, 0, 255)
    return pixels

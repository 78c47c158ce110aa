import numpy as np
import pytest
from PIL import Image

from visual.painterly.errors import InvalidParameterError
from visual.painterly.posterize import posterize, quantization_levels

SIX_LEVELS = {0, 51, 102, 153, 204, 255}


# Test 1: Six levels of 51
def test_quantization_levels_six():
    assert quantization_levels(6) == [0, 51, 102, 153, 204, 255]


# Test 2: Every channel lands on a level
def test_posterize_range(noise_image):
    out = np.asarray(posterize(noise_image, 6))
    assert set(np.unique(out[..., :3]).tolist()) <= SIX_LEVELS


# Test 3: Alpha untouched
def test_posterize_keeps_alpha(noise_image):
    out = np.asarray(posterize(noise_image, 6))
    np.testing.assert_array_equal(out[..., 3], np.asarray(noise_image)[..., 3])


# Test 4: Idempotent
def test_posterize_idempotent(noise_image):
    once = posterize(noise_image, 6)
    twice = posterize(once, 6)
    np.testing.assert_array_equal(np.asarray(once), np.asarray(twice))


# Test 5: Nearest level
@pytest.mark.parametrize("value, expected", [(0, 0), (25, 0), (26, 51), (76, 51), (77, 102), (230, 255), (255, 255)])
def test_posterize_snaps_to_nearest(value, expected):
    img = Image.new("RGBA", (1, 1), (value, value, value, 255))
    assert np.asarray(posterize(img, 6))[0, 0, 0] == expected


# Test 6: Input not modified
def test_posterize_returns_copy(noise_image):
    before = np.asarray(noise_image).copy()
    posterize(noise_image, 6)
    np.testing.assert_array_equal(np.asarray(noise_image), before)


# Test 7: Pure red survives
def test_posterize_exact_levels_unchanged():
    img = Image.new("RGBA", (4, 4), (255, 0, 0, 255))
    assert np.asarray(posterize(img, 6))[2, 2].tolist() == [255, 0, 0, 255]


# Test 8: Fewer than two levels rejected
def test_posterize_rejects_single_level(noise_image):
    with pytest.raises(InvalidParameterError):
        posterize(noise_image, 1)

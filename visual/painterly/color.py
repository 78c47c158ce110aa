"""RGB <-> HSL conversion and lightness jitter."""

import math


def clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


def _round_channel(v: float) -> int:
    # Half-up rounding, clipped to a byte
    return max(0, min(255, int(math.floor(v * 255 + 0.5))))


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert an RGB color to hue, saturation, lightness.

    Args:
        r, g, b: Channel values (0-255)

    Returns:
        (h, s, l), each in [0, 1]. Achromatic colors have h = s = 0.
    """
    r /= 255
    g /= 255
    b /= 255
    high = max(r, g, b)
    low = min(r, g, b)
    l = (high + low) / 2

    if high == low:
        return 0.0, 0.0, l

    d = high - low
    s = d / (2 - high - low) if l > 0.5 else d / (high + low)

    if high == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return h / 6, s, l


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert hue, saturation, lightness back to RGB.

    Args:
        h, s, l: Components in [0, 1]

    Returns:
        (r, g, b) rounded to the nearest integer in [0, 255]
    """
    if s == 0:
        gray = _round_channel(l)
        return gray, gray, gray

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    r = _hue_to_rgb(p, q, h + 1 / 3)
    g = _hue_to_rgb(p, q, h)
    b = _hue_to_rgb(p, q, h - 1 / 3)
    return _round_channel(r), _round_channel(g), _round_channel(b)


def vary_brightness(r: int, g: int, b: int, amount: float) -> tuple[int, int, int]:
    """
    Shift the lightness of a color, keeping hue and saturation.

    Args:
        r, g, b: Channel values (0-255)
        amount: Lightness offset, added then clamped to [0, 1]

    Returns:
        Shifted (r, g, b)
    """
    h, s, l = rgb_to_hsl(r, g, b)
    return hsl_to_rgb(h, s, clamp01(l + amount))

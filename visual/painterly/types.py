"""Type definitions for painterly rendering."""

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Union

from .errors import InvalidParameterError

# Upper limits applied by RenderParams.validated(); larger inputs are clamped
MAX_DENSITY = 64.0
MAX_BASE_SIZE = 512.0


class StyleType(Enum):
    """Brush stroke styles."""

    BRISTLE = auto()
    DAB = auto()
    FLAT_RECT = auto()


def _check_range(name: str, value: tuple, minimum: float = 0.0) -> None:
    low, high = value
    if low > high:
        raise InvalidParameterError(f"{name} must satisfy low <= high, got {value}")
    if low < minimum:
        raise InvalidParameterError(f"{name} must not go below {minimum}, got {value}")


@dataclass
class BristleParams:
    """Parameters for bristle strokes (parallel thin rectangles)."""

    coverage: float = 0.16  # strokes per pixel at density 1
    size_range: tuple[float, float] = (0.8, 1.5)  # x base_size
    length_range: tuple[float, float] = (3.0, 5.5)  # x size
    bristle_range: tuple[int, int] = (5, 8)  # inclusive
    brightness_jitter: float = 0.125  # max lightness shift per bristle
    alpha_range: tuple[float, float] = (0.6, 0.95)
    length_jitter: tuple[float, float] = (0.85, 1.15)  # x length, per bristle
    thickness_range: tuple[float, float] = (0.35, 0.6)  # x size, per bristle
    along_jitter: float = 0.075  # x length

    def __post_init__(self):
        if self.coverage < 0:
            raise InvalidParameterError(f"coverage must be non-negative, got {self.coverage}")
        _check_range("size_range", self.size_range)
        _check_range("length_range", self.length_range)
        _check_range("bristle_range", self.bristle_range, minimum=1)
        _check_range("alpha_range", self.alpha_range)
        _check_range("length_jitter", self.length_jitter)
        _check_range("thickness_range", self.thickness_range)


@dataclass
class DabParams:
    """Parameters for dab strokes (overlapping ellipses along the stroke axis)."""

    coverage: float = 0.12
    size_range: tuple[float, float] = (0.9, 1.7)
    length_range: tuple[float, float] = (2.6, 4.4)
    thickness_range: tuple[float, float] = (0.7, 1.2)  # x size
    dab_range: tuple[int, int] = (6, 10)  # inclusive
    along_jitter: float = 0.05  # x length
    across_jitter: float = 0.2  # x thickness
    brightness_jitter: float = 0.125
    radius_range: tuple[float, float] = (0.7, 1.1)  # x thickness / 2
    aspect_range: tuple[float, float] = (0.5, 1.0)  # minor / major radius
    alpha_range: tuple[float, float] = (0.35, 0.7)

    def __post_init__(self):
        if self.coverage < 0:
            raise InvalidParameterError(f"coverage must be non-negative, got {self.coverage}")
        _check_range("size_range", self.size_range)
        _check_range("length_range", self.length_range)
        _check_range("thickness_range", self.thickness_range)
        _check_range("dab_range", self.dab_range, minimum=1)
        _check_range("radius_range", self.radius_range)
        _check_range("aspect_range", self.aspect_range)
        _check_range("alpha_range", self.alpha_range)


@dataclass
class FlatRectParams:
    """Parameters for flat rectangle strokes (one solid dab, no brightness jitter)."""

    coverage: float = 0.25
    size_range: tuple[float, float] = (0.6, 1.4)
    length_range: tuple[float, float] = (1.6, 3.0)
    alpha_range: tuple[float, float] = (0.85, 1.0)

    def __post_init__(self):
        if self.coverage < 0:
            raise InvalidParameterError(f"coverage must be non-negative, got {self.coverage}")
        _check_range("size_range", self.size_range)
        _check_range("length_range", self.length_range)
        _check_range("alpha_range", self.alpha_range)


StyleParams = Union[BristleParams, DabParams, FlatRectParams]


@dataclass
class RenderParams:
    """Global render parameters."""

    density: float = 1.0
    base_size: float = 4.0
    levels: int = 6
    max_side: int = 768
    seed: Optional[int] = None
    background: tuple[int, int, int] = (0, 0, 0)

    def validated(self) -> "RenderParams":
        """
        Check parameters and clamp oversized values.

        Returns:
            Copy of params with density and base_size clamped to their limits

        Raises:
            InvalidParameterError: If a value is non-positive or not a finite number
        """
        if not math.isfinite(self.density) or self.density < 0:
            raise InvalidParameterError(f"density must be a non-negative number, got {self.density}")
        if not math.isfinite(self.base_size) or self.base_size <= 0:
            raise InvalidParameterError(f"base_size must be positive, got {self.base_size}")
        if self.levels < 2:
            raise InvalidParameterError(f"levels must be at least 2, got {self.levels}")
        if self.max_side < 1:
            raise InvalidParameterError(f"max_side must be at least 1, got {self.max_side}")

        density = self.density
        if density > MAX_DENSITY:
            logging.warning("density %.3g clamped to %.3g", density, MAX_DENSITY)
            density = MAX_DENSITY

        base_size = self.base_size
        if base_size > MAX_BASE_SIZE:
            logging.warning("base_size %.3g clamped to %.3g", base_size, MAX_BASE_SIZE)
            base_size = MAX_BASE_SIZE

        return replace(self, density=density, base_size=base_size)


# Style name mapping
STYLE_NAMES = {
    StyleType.BRISTLE: "bristle",
    StyleType.DAB: "dab",
    StyleType.FLAT_RECT: "flat-rect",
}

# Reverse mapping
NAME_TO_STYLE = {v: k for k, v in STYLE_NAMES.items()}

STYLE_PARAM_TYPES = {
    StyleType.BRISTLE: BristleParams,
    StyleType.DAB: DabParams,
    StyleType.FLAT_RECT: FlatRectParams,
}


def get_style_name(style_type: StyleType) -> str:
    """Get CLI-friendly style name."""
    return STYLE_NAMES[style_type]


def parse_style_name(name: str) -> StyleType:
    """Parse style name to StyleType."""
    if name not in NAME_TO_STYLE:
        valid_names = ", ".join(STYLE_NAMES.values())
        raise ValueError(f"Invalid style name: {name}. Valid names: {valid_names}")
    return NAME_TO_STYLE[name]


def all_style_names() -> list[str]:
    """List all available style names."""
    return list(STYLE_NAMES.values())


def default_style_params(style_type: StyleType) -> StyleParams:
    """Fresh default parameters for a style."""
    return STYLE_PARAM_TYPES[style_type]()

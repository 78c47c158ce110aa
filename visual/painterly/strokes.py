"""Stroke generation.

StrokeGenerator turns a posterized pixel buffer into a lazy sequence of
stroke descriptors. Generation order is paint order: later strokes are
drawn over earlier ones.
"""

import math
import random
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

import numpy as np

from .color import vary_brightness
from .common import sample_color
from .errors import RenderCancelledError
from .types import BristleParams, DabParams, FlatRectParams, StyleParams, StyleType

# Strokes generated between checks of the cancel event
CANCEL_CHECK_INTERVAL = 1024


class DabShape(Enum):
    """Primitive used for the dabs of a stroke."""

    RECT = auto()
    ELLIPSE = auto()


@dataclass
class Dab:
    """One filled primitive, positioned in its stroke's frame."""

    along: float
    across: float
    half_length: float
    half_thickness: float
    color: tuple[int, int, int]
    alpha: float


@dataclass
class StrokeDescriptor:
    """One stroke: origin and rotation of the frame, plus the dabs drawn in it."""

    x: float
    y: float
    angle: float
    length: float
    thickness: float
    base_color: tuple[int, int, int]
    shape: DabShape
    dabs: list[Dab] = field(default_factory=list)


def stroke_count(width: int, height: int, coverage: float, density: float) -> int:
    """Number of strokes for a canvas: floor(width * height * coverage * density)."""
    return max(0, int(math.floor(width * height * coverage * density)))


class StrokeGenerator:
    """
    Randomized stroke synthesis for one render pass.

    Args:
        pixels: Posterized buffer, shape (height, width, channels)
        style_type: Stroke style
        style_params: Parameters matching style_type
        base_size: Base stroke size in pixels
        density: Stroke count multiplier
        rng: Random source; seed it for reproducible output
        cancel: Optional event polled while generating
    """

    def __init__(
        self,
        pixels: np.ndarray,
        style_type: StyleType,
        style_params: StyleParams,
        base_size: float,
        density: float,
        rng: random.Random,
        cancel: Optional[threading.Event] = None,
    ):
        self.pixels = pixels
        self.height, self.width = pixels.shape[:2]
        self.style_type = style_type
        self.style_params = style_params
        self.base_size = base_size
        self.rng = rng
        self.cancel = cancel
        self.count = stroke_count(self.width, self.height, style_params.coverage, density)

        builders = {
            StyleType.BRISTLE: self._bristle,
            StyleType.DAB: self._dab,
            StyleType.FLAT_RECT: self._flat_rect,
        }
        self._build = builders[style_type]

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[StrokeDescriptor]:
        rng = self.rng
        for i in range(self.count):
            if self.cancel is not None and i % CANCEL_CHECK_INTERVAL == 0 and self.cancel.is_set():
                raise RenderCancelledError(f"Cancelled after {i} of {self.count} strokes")

            x = rng.random() * self.width
            y = rng.random() * self.height
            color = sample_color(self.pixels, x, y)
            yield self._build(x, y, color)

    def _bristle(self, x: float, y: float, color: tuple[int, int, int]) -> StrokeDescriptor:
        params: BristleParams = self.style_params
        rng = self.rng

        size = self.base_size * rng.uniform(*params.size_range)
        length = size * rng.uniform(*params.length_range)
        angle = rng.uniform(0, 2 * math.pi)
        bristles = rng.randint(*params.bristle_range)

        stroke = StrokeDescriptor(x, y, angle, length, size, color, DabShape.RECT)
        for j in range(bristles):
            # Spread bristles across the brush width
            offset = (j - bristles / 2) * (size / bristles)
            jitter = rng.uniform(-params.brightness_jitter, params.brightness_jitter)
            alpha = rng.uniform(*params.alpha_range)
            local_length = length * rng.uniform(*params.length_jitter)
            thickness = size * rng.uniform(*params.thickness_range)
            along = rng.uniform(-params.along_jitter, params.along_jitter) * length

            stroke.dabs.append(
                Dab(
                    along=along,
                    across=offset,
                    half_length=local_length / 2,
                    half_thickness=thickness / 2,
                    color=vary_brightness(*color, jitter),
                    alpha=alpha,
                )
            )
        return stroke

    def _dab(self, x: float, y: float, color: tuple[int, int, int]) -> StrokeDescriptor:
        params: DabParams = self.style_params
        rng = self.rng

        size = self.base_size * rng.uniform(*params.size_range)
        length = size * rng.uniform(*params.length_range)
        thickness = size * rng.uniform(*params.thickness_range)
        angle = rng.uniform(0, 2 * math.pi)
        dabs = rng.randint(*params.dab_range)

        stroke = StrokeDescriptor(x, y, angle, length, thickness, color, DabShape.ELLIPSE)
        for d in range(dabs):
            t = d / (dabs - 1) if dabs > 1 else 0.5
            along = (t - 0.5) * length + rng.uniform(-params.along_jitter, params.along_jitter) * length
            across = rng.uniform(-params.across_jitter, params.across_jitter) * thickness
            jitter = rng.uniform(-params.brightness_jitter, params.brightness_jitter)
            rx = (thickness / 2) * rng.uniform(*params.radius_range)
            ry = rx * rng.uniform(*params.aspect_range)
            alpha = rng.uniform(*params.alpha_range)

            stroke.dabs.append(Dab(along, across, rx, ry, vary_brightness(*color, jitter), alpha))
        return stroke

    def _flat_rect(self, x: float, y: float, color: tuple[int, int, int]) -> StrokeDescriptor:
        params: FlatRectParams = self.style_params
        rng = self.rng

        size = self.base_size * rng.uniform(*params.size_range)
        length = size * rng.uniform(*params.length_range)
        angle = rng.uniform(0, 2 * math.pi)
        alpha = rng.uniform(*params.alpha_range)

        stroke = StrokeDescriptor(x, y, angle, length, size, color, DabShape.RECT)
        stroke.dabs.append(Dab(0.0, 0.0, length / 2, size / 2, color, alpha))
        return stroke

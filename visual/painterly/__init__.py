"""Painterly image rendering library."""

import logging
import random
import threading
from typing import Optional

import numpy as np
from PIL import Image

from .common import resize_to_working, sample_color, working_size
from .errors import InvalidParameterError, LoadError, PainterlyError, RenderCancelledError
from .image_io import encode_png, load_image, save_png
from .posterize import posterize
from .renderer import new_canvas, render_strokes
from .strokes import StrokeGenerator
from .types import (
    BristleParams,
    DabParams,
    FlatRectParams,
    RenderParams,
    StyleParams,
    StyleType,
    all_style_names,
    default_style_params,
    get_style_name,
    parse_style_name,
)

# Re-export types for convenience
__all__ = [
    "StyleType",
    "BristleParams",
    "DabParams",
    "FlatRectParams",
    "RenderParams",
    "PainterlyError",
    "LoadError",
    "InvalidParameterError",
    "RenderCancelledError",
    "render",
    "render_multiple",
    "load_image",
    "encode_png",
    "save_png",
    "posterize",
    "sample_color",
    "working_size",
    "get_style_name",
    "parse_style_name",
    "all_style_names",
    "default_style_params",
]


def _check_style_params(style_type: StyleType, style_params: Optional[StyleParams]) -> StyleParams:
    if style_params is None:
        return default_style_params(style_type)

    if style_type == StyleType.BRISTLE:
        if not isinstance(style_params, BristleParams):
            raise ValueError("Bristle style requires BristleParams")

    elif style_type == StyleType.DAB:
        if not isinstance(style_params, DabParams):
            raise ValueError("Dab style requires DabParams")

    elif style_type == StyleType.FLAT_RECT:
        if not isinstance(style_params, FlatRectParams):
            raise ValueError("Flat-rect style requires FlatRectParams")

    else:
        raise ValueError(f"Unknown style type: {style_type}")

    return style_params


def render(
    image: Optional[Image.Image],
    style_type: StyleType,
    style_params: Optional[StyleParams] = None,
    params: RenderParams = RenderParams(),
    cancel: Optional[threading.Event] = None,
) -> Optional[Image.Image]:
    """
    Render image as brush strokes over a black canvas.

    The image is scaled down to the working resolution, posterized, and
    then painted stroke by stroke with colors sampled from the posterized copy.

    Args:
        image: Input PIL Image, or None (nothing to render)
        style_type: Stroke style to apply
        style_params: Style-specific parameters (None for defaults)
        params: Global render parameters; set params.seed for reproducible output
        cancel: Optional event; setting it aborts the pass

    Returns:
        Rendered RGB PIL Image at working resolution, or None if image is None

    Raises:
        ValueError: If style_params don't match style_type
        InvalidParameterError: If params are out of range
        RenderCancelledError: If cancel was set before the pass finished
    """
    if image is None:
        logging.debug("No source image, skipping render")
        return None

    style_params = _check_style_params(style_type, style_params)
    params = params.validated()

    working = resize_to_working(image, params.max_side)
    posterized = posterize(working, params.levels)
    pixels = np.asarray(posterized)

    rng = random.Random(params.seed)
    strokes = StrokeGenerator(
        pixels,
        style_type,
        style_params,
        base_size=params.base_size,
        density=params.density,
        rng=rng,
        cancel=cancel,
    )
    logging.debug(
        "Rendering %s at %dx%d: %d strokes (density=%g, base_size=%g, seed=%s)",
        get_style_name(style_type),
        working.width,
        working.height,
        strokes.count,
        params.density,
        params.base_size,
        params.seed,
    )

    canvas = new_canvas(working.size, params.background)
    render_strokes(canvas, strokes)
    return canvas


def render_multiple(
    image: Image.Image, styles: list[tuple[StyleType, Optional[StyleParams]]], params: RenderParams = RenderParams()
) -> dict[str, Image.Image]:
    """
    Render image with multiple styles.

    Args:
        image: Input PIL Image
        styles: List of (StyleType, style_params) tuples
        params: Global render parameters

    Returns:
        Dictionary mapping style name -> rendered image
    """
    results = {}

    for style_type, style_params in styles:
        style_name = get_style_name(style_type)
        results[style_name] = render(image, style_type, style_params, params)

    return results

"""Rasterize stroke descriptors onto a canvas."""

from collections.abc import Iterable

from PIL import Image, ImageDraw

from .geometry import ellipse_polygon, rect_polygon
from .strokes import DabShape, StrokeDescriptor


def new_canvas(size: tuple[int, int], background: tuple[int, int, int] = (0, 0, 0)) -> Image.Image:
    """Blank opaque canvas of the given size."""
    return Image.new("RGB", size, background)


def draw_stroke(draw: ImageDraw.ImageDraw, stroke: StrokeDescriptor) -> None:
    """
    Draw every dab of a stroke.
    Geometry is computed in canvas space, so no drawing state carries over
    from one stroke to the next.

    Args:
        draw: ImageDraw created in "RGBA" mode so fills are alpha-blended
        stroke: Stroke to draw
    """
    origin = (stroke.x, stroke.y)
    for dab in stroke.dabs:
        if stroke.shape == DabShape.ELLIPSE:
            polygon = ellipse_polygon(origin, stroke.angle, dab.along, dab.across, dab.half_length, dab.half_thickness)
        else:
            polygon = rect_polygon(origin, stroke.angle, dab.along, dab.across, dab.half_length, dab.half_thickness)

        alpha = max(0, min(255, round(dab.alpha * 255)))
        draw.polygon(polygon, fill=(*dab.color, alpha))


def render_strokes(canvas: Image.Image, strokes: Iterable[StrokeDescriptor]) -> int:
    """
    Paint strokes onto canvas in order, later strokes over earlier ones.

    Args:
        canvas: RGB PIL Image, modified in place
        strokes: Stroke descriptors in paint order

    Returns:
        Number of strokes drawn
    """
    draw = ImageDraw.Draw(canvas, "RGBA")
    drawn = 0
    for stroke in strokes:
        draw_stroke(draw, stroke)
        drawn += 1
    return drawn

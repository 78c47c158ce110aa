"""Stroke-frame to canvas coordinate math.

A stroke frame has its origin at the stroke position, the x axis ("along")
pointing in the stroke direction and the y axis ("across") perpendicular to it.
"""

import math

# Vertices used to approximate a rotated ellipse
ELLIPSE_SEGMENTS = 24

Point = tuple[float, float]


def local_to_world(origin: Point, angle: float, along: float, across: float) -> Point:
    """Map a stroke-frame offset to canvas coordinates."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    x0, y0 = origin
    return (x0 + along * cos_a - across * sin_a, y0 + along * sin_a + across * cos_a)


def rect_polygon(
    origin: Point, angle: float, along: float, across: float, half_length: float, half_thickness: float
) -> list[Point]:
    """
    Corners of a rectangle centred at (along, across) in the stroke frame.

    Args:
        origin: Stroke origin in canvas coordinates
        angle: Stroke rotation in radians
        along, across: Rectangle centre in the stroke frame
        half_length: Half extent along the stroke axis
        half_thickness: Half extent across the stroke axis

    Returns:
        Four (x, y) canvas points in drawing order
    """
    corners = (
        (along - half_length, across - half_thickness),
        (along + half_length, across - half_thickness),
        (along + half_length, across + half_thickness),
        (along - half_length, across + half_thickness),
    )
    return [local_to_world(origin, angle, u, v) for u, v in corners]


def ellipse_polygon(
    origin: Point,
    angle: float,
    along: float,
    across: float,
    rx: float,
    ry: float,
    segments: int = ELLIPSE_SEGMENTS,
) -> list[Point]:
    """
    Polygon approximating an ellipse centred at (along, across) in the stroke frame.
    rx lies on the stroke axis, ry across it.
    """
    points = []
    for i in range(segments):
        theta = 2 * math.pi * i / segments
        u = along + rx * math.cos(theta)
        v = across + ry * math.sin(theta)
        points.append(local_to_world(origin, angle, u, v))
    return points

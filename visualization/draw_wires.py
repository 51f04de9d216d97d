"""
Visualization utilities for rendering wires and their crossings.

This module provides:
    • make_canvas(size)
    • draw_wire(img, wire, transform, color, thickness)
    • draw_points(img, points, transform, color, radius)
    • render_wires(wires, intersections, closest, ...)

It is used by:
    - main.py (through visualization.save_outputs)
"""

from typing import Callable, List, Optional, Sequence, Tuple

import cv2
import numpy as np

from config import (
    CANVAS_MARGIN,
    CANVAS_SIZE,
    COLOR_CLOSEST,
    COLOR_CROSSING,
    COLOR_ORIGIN,
    WIRE_COLORS,
    WIRE_THICKNESS,
)
from models.point import ORIGIN, Point
from models.wire import Wire
from utils.geometry import bounding_box, world_to_canvas


Transform = Callable[[Tuple[int, int]], Tuple[int, int]]


# ---------------------------------------------------------------------
#  Canvas
# ---------------------------------------------------------------------

def make_canvas(size: int = CANVAS_SIZE) -> np.ndarray:
    """Black square BGR image."""
    return np.zeros((size, size, 3), dtype=np.uint8)


# ---------------------------------------------------------------------
#  BASIC: Draw one wire in a single color
# ---------------------------------------------------------------------

def draw_wire(
    image,
    wire: Wire,
    transform: Transform,
    color: Tuple[int, int, int] = WIRE_COLORS[0],
    thickness: int = WIRE_THICKNESS
):
    """
    Draws every segment of a wire onto an image.

    Args:
        image: BGR numpy array (modified in-place)
        wire: Wire to draw
        transform: world (x, y) → pixel (col, row)
        color: (B, G, R)
        thickness: pixel width
    """
    for ln in wire.lines:
        cv2.line(
            image,
            transform(ln.start.as_tuple()),
            transform(ln.end.as_tuple()),
            color,
            thickness
        )
    return image


def draw_points(
    image,
    points: Sequence[Point],
    transform: Transform,
    color: Tuple[int, int, int],
    radius: int = 3
):
    """
    Draws a small circle outline around each point.
    """
    for p in points:
        cv2.circle(image, transform(p.as_tuple()), radius, color, thickness=1)
    return image


# ---------------------------------------------------------------------
#  HIGH-LEVEL: Full wire map
# ---------------------------------------------------------------------

def render_wires(
    wires: List[Wire],
    intersections: Sequence[Point] = (),
    closest: Optional[Point] = None,
    canvas_size: int = CANVAS_SIZE,
    margin: int = CANVAS_MARGIN,
    origin: Point = ORIGIN
) -> np.ndarray:
    """
    Renders all wires, scaled to fit the canvas, with +y pointing up:

        wires         → WIRE_COLORS, cycling
        crossings     → white circles
        origin        → green filled dot
        closest       → red filled dot with a ring

    Returns the BGR image.
    """
    image = make_canvas(canvas_size)

    world_points = [origin.as_tuple()]
    for w in wires:
        world_points.extend(p.as_tuple() for p in w.points())
    transform = world_to_canvas(bounding_box(world_points), canvas_size, margin)

    for i, w in enumerate(wires):
        draw_wire(image, w, transform, WIRE_COLORS[i % len(WIRE_COLORS)])

    draw_points(image, [p for p in intersections if p != origin], transform, COLOR_CROSSING)

    cv2.circle(image, transform(origin.as_tuple()), 4, COLOR_ORIGIN, thickness=-1)

    if closest is not None:
        center = transform(closest.as_tuple())
        cv2.circle(image, center, 4, COLOR_CLOSEST, thickness=-1)
        cv2.circle(image, center, 8, COLOR_CLOSEST, thickness=1)

    return image

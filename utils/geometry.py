"""
This module provides:
    - range_contains
    - bounding_box
    - world_to_canvas (auto scale for rendering)
"""

from typing import Iterable, Tuple


# ----------------------------------------------------------------------
#  INCLUSIVE RANGE TEST
# ----------------------------------------------------------------------

def range_contains(a, b, value) -> bool:
    """
    True if `value` lies between a and b, endpoints included,
    whatever the order of a and b.
    """
    return min(a, b) <= value <= max(a, b)


# ----------------------------------------------------------------------
#  BOUNDING BOX
# ----------------------------------------------------------------------

def bounding_box(points: Iterable[Tuple[int, int]]):
    """
    Returns (min_x, min_y, max_x, max_y) of the given points,
    or None for an empty input.
    """
    pts = list(points)
    if not pts:
        return None
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return min(xs), min(ys), max(xs), max(ys)


# ----------------------------------------------------------------------
#  WORLD → CANVAS TRANSFORM
# ----------------------------------------------------------------------

def world_to_canvas(bbox, canvas_size: int, margin: int):
    """
    Builds a function mapping world (x, y) to integer pixel (col, row).

    The scale is uniform so the drawing keeps its aspect ratio,
    and the y axis is flipped so that +y points up in the image.
    """
    min_x, min_y, max_x, max_y = bbox
    span = max(max_x - min_x, max_y - min_y, 1)
    usable = max(canvas_size - 2 * margin, 1)
    scale = usable / span

    def transform(point):
        col = margin + (point[0] - min_x) * scale
        row = margin + (max_y - point[1]) * scale
        return int(round(col)), int(round(row))

    return transform

"""
Crossing detection between two axis-aligned segments.

This module provides:
    • check_intersect(a, b)   orientation pair or None
    • crossing_point(a, b)    crossing Point or None

Only perpendicular pairs can cross. Two segments with the same
orientation never report a crossing, even when they overlap on the
same line, and a zero-length segment has no orientation so it never
crosses anything.
"""

from typing import Optional, Tuple

from models.direction import Orientation
from models.line import Line
from models.point import Point


# ========================================================================
# 1. ORIENTATION PAIR
# ========================================================================

def check_intersect(a: Line, b: Line) -> Optional[Tuple[Orientation, Orientation]]:
    """
    Decides whether segments `a` and `b` cross.

    Returns:
        (VERTICAL, HORIZONTAL)  a is vertical, b horizontal, and they cross
        (HORIZONTAL, VERTICAL)  a is horizontal, b vertical, and they cross
        None                    parallel, degenerate, or out of bounds
    """
    orient_a = a.orientation
    orient_b = b.orientation

    # degenerate segment on either side
    if orient_a is None or orient_b is None:
        return None

    # parallel lines (collinear overlap is not a crossing)
    if orient_a == orient_b:
        return None

    if orient_a == Orientation.VERTICAL:
        vertical, horizontal = a, b
    else:
        vertical, horizontal = b, a

    candidate = Point(vertical.start.x, horizontal.start.y)

    # might cross but not within bounds
    if not (vertical.pointIsOnSegment(candidate) and horizontal.pointIsOnSegment(candidate)):
        return None

    return orient_a, orient_b


# ========================================================================
# 2. CROSSING POINT
# ========================================================================

def crossing_point(a: Line, b: Line) -> Optional[Point]:
    """
    Crossing of `a` and `b`: x from the vertical segment, y from the
    horizontal one. The result does not depend on argument order.
    """
    match check_intersect(a, b):
        case (Orientation.HORIZONTAL, Orientation.VERTICAL):
            return Point(b.start.x, a.start.y)
        case (Orientation.VERTICAL, Orientation.HORIZONTAL):
            return Point(a.start.x, b.start.y)
        case _:
            return None

"""
Closest-crossing resolver for a pair of wires.

This module provides:
    • find_intersections(wire_a, wire_b)
    • nearest_crossing(points, origin)
    • closest_intersection(wire_a, wire_b, origin)
    • closest_intersection_distance(wire_a, wire_b, origin)

Every segment of the first wire is tested against every segment of the
second. Both wires start at the origin, so they always meet there; that
crossing is excluded from the distance ranking.
"""

from typing import List, Optional

from detectors.intersection_detector import crossing_point
from models.point import ORIGIN, Point
from models.wire import Wire


# ========================================================================
# 1. ALL-PAIRS SCAN
# ========================================================================

def find_intersections(wire_a: Wire, wire_b: Wire) -> List[Point]:
    """
    Returns every crossing point between the two wires, in scan order
    (wire_a segments outer, wire_b segments inner). The origin is kept.
    """
    intersections = []

    for a in wire_a.lines:
        for b in wire_b.lines:
            point = crossing_point(a, b)
            if point is not None:
                intersections.append(point)

    return intersections


# ========================================================================
# 2. CLOSEST NON-ORIGIN CROSSING
# ========================================================================

def nearest_crossing(points: List[Point], origin: Point = ORIGIN) -> Optional[Point]:
    """
    Point of `points` closest to `origin` by Manhattan distance, ignoring
    `origin` itself. Ties keep the earliest point.
    """
    candidates = [p for p in points if p != origin]
    if not candidates:
        return None
    return min(candidates, key=origin.manhattan)


def closest_intersection(wire_a: Wire, wire_b: Wire, origin: Point = ORIGIN) -> Optional[Point]:
    """
    Crossing with the smallest Manhattan distance from `origin`, ignoring
    `origin` itself. Ties keep the first crossing found. None when the
    wires only meet at the origin or not at all.
    """
    return nearest_crossing(find_intersections(wire_a, wire_b), origin)


def closest_intersection_distance(wire_a: Wire, wire_b: Wire, origin: Point = ORIGIN) -> Optional[int]:
    """
    Manhattan distance from `origin` to the closest non-origin crossing,
    or None if there is none.
    """
    closest = closest_intersection(wire_a, wire_b, origin)
    if closest is None:
        return None
    return origin.manhattan(closest)

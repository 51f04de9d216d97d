"""
Detectors Package

Contains the crossing detection used by the day-three solver:
- Segment-pair crossing detection
- Closest crossing between two wires
"""

from .intersection_detector import check_intersect, crossing_point
from .closest_intersection import (
    find_intersections,
    nearest_crossing,
    closest_intersection,
    closest_intersection_distance,
)

__all__ = [
    "check_intersect",
    "crossing_point",
    "find_intersections",
    "nearest_crossing",
    "closest_intersection",
    "closest_intersection_distance",
]

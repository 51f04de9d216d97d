"""
Centralized output-saving utilities for the puzzle runner.

This module provides:
    • save_image(path, image)
    • save_wire_map(path, wires)

Uses draw modules to visualize and utils.puzzle_io for filesystem handling.
"""

import os
from typing import List

import cv2
import numpy as np

from detectors.closest_intersection import find_intersections, nearest_crossing
from models.point import ORIGIN, Point
from models.wire import Wire
from utils.puzzle_io import ensure_output_dir
from visualization.draw_wires import render_wires


def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    Raises OSError when the image cannot be written.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise OSError(f"could not write image to {path}")


def save_wire_map(path: str, wires: List[Wire], origin: Point = ORIGIN) -> np.ndarray:
    """
    Renders the wires with their crossings and writes the image.

    Crossings and the closest crossing are only computed for the
    first two wires.
    """
    intersections = []
    closest = None
    if len(wires) >= 2:
        intersections = find_intersections(wires[0], wires[1])
        closest = nearest_crossing(intersections, origin)

    image = render_wires(wires, intersections, closest, origin=origin)
    save_image(path, image)
    print(f"[OK] Saved wire map to {path}")
    return image

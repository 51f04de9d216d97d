"""
Visualization Tools

Provides drawing utilities for:
- Wires
- Wire crossings
- Saving the rendered wire map
"""

from .draw_wires import make_canvas, draw_wire, draw_points, render_wires
from .save_outputs import save_image, save_wire_map

__all__ = [
    "make_canvas",
    "draw_wire",
    "draw_points",
    "render_wires",
    "save_image",
    "save_wire_map",
]

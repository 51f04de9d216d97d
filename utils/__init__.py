"""
Utility Functions

Provides geometry helpers and puzzle-input I/O utilities
used across models, solvers and visualization.
"""

from .geometry import range_contains, bounding_box, world_to_canvas
from .puzzle_io import puzzle_file_name, puzzle_path, read_puzzle_text, ensure_output_dir

__all__ = [
    "range_contains",
    "bounding_box",
    "world_to_canvas",
    "puzzle_file_name",
    "puzzle_path",
    "read_puzzle_text",
    "ensure_output_dir",
]

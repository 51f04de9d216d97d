"""Shared pytest fixtures for the puzzle solver test suite.

Fixtures:
    line: factory building a Line from four integers
    example_wires: the two wires of the smallest worked example
    input_folder: temporary folder holding day<N>.txt inputs
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.line import Line  # noqa: E402
from models.point import Point  # noqa: E402
from solvers.day_three import build_wires  # noqa: E402


EXAMPLE_WIRES_TEXT = "R8,U5,L5,D3\nU7,R6,D4,L4\n"


@pytest.fixture
def line():
    """Factory: line(x1, y1, x2, y2) -> Line."""
    def _make(x1, y1, x2, y2):
        return Line(Point(x1, y1), Point(x2, y2))
    return _make


@pytest.fixture
def example_wires():
    return build_wires(EXAMPLE_WIRES_TEXT, Point(0, 0))


@pytest.fixture
def input_folder(tmp_path):
    """Folder with real-style inputs for days one to three."""
    folder = tmp_path / "inputs"
    folder.mkdir()
    (folder / "day1.txt").write_text("12\n14\n1969\n100756\n")
    (folder / "day2.txt").write_text("1,0,0,0,99,0,0,0,0,0,0,0,0,0\n")
    (folder / "day3.txt").write_text(EXAMPLE_WIRES_TEXT)
    return folder

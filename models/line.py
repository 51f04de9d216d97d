from dataclasses import dataclass
from typing import Optional

from models.direction import Orientation
from models.point import Point
from utils.geometry import range_contains


@dataclass(frozen=True)
class Line:
    """
    One axis-aligned piece of a wire, from `start` to `end` in traversal order.

    Supports:
      - orientation from endpoint coordinates (None when degenerate)
      - bounding-box point-on-segment test
      - construction from an instruction and a cursor position
    """

    start: Point
    end: Point

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------
    @classmethod
    def from_instruction(cls, instruction, position: Point) -> "Line":
        """
        Segment starting at `position` and moving `instruction.steps`
        units in `instruction.direction`.
        """
        delta = instruction.direction.unit.scale(instruction.steps)
        return cls(position, position + delta)

    # ------------------------------------------------------------
    # Basic geometric properties
    # ------------------------------------------------------------
    @property
    def is_degenerate(self) -> bool:
        """Zero-length segment (a zero-step instruction)."""
        return self.start == self.end

    @property
    def orientation(self) -> Optional[Orientation]:
        """
        VERTICAL when x is constant, HORIZONTAL when y is constant.
        A zero-length segment has no orientation.
        """
        if self.is_degenerate:
            return None
        if self.start.x == self.end.x:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    def lineLength(self) -> int:
        return self.start.manhattan(self.end)

    # ------------------------------------------------------------
    # Segment membership tests
    # ------------------------------------------------------------
    def pointIsOnSegment(self, point: Point) -> bool:
        """
        Bounding-box segment check. For an axis-aligned segment the box
        is the segment itself, endpoints included.
        """
        if not range_contains(self.start.x, self.end.x, point.x):
            return False
        if not range_contains(self.start.y, self.end.y, point.y):
            return False
        return True

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return (
            f"Line(({self.start.x}, {self.start.y}) -> "
            f"({self.end.x}, {self.end.y}))"
        )

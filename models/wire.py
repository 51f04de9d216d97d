from dataclasses import dataclass
from typing import List, Sequence, Tuple

from models.instruction import Instruction
from models.line import Line
from models.point import ORIGIN, Point


@dataclass(frozen=True)
class Wire:
    """
    Ordered, connected sequence of axis-aligned Line segments.

    Invariants:
      • lines[0].start is the origin
      • lines[i].start == lines[i - 1].end for every i > 0
      • one Line per instruction, in instruction order
    """

    lines: Tuple[Line, ...] = ()

    # -------------------------------------------------------------
    #   Construction
    # -------------------------------------------------------------

    @classmethod
    def from_instructions(cls, instructions: Sequence[Instruction], origin: Point = ORIGIN) -> "Wire":
        """
        Walks a cursor from `origin` through the instructions, emitting one
        segment per instruction and moving the cursor to that segment's end.
        """
        lines: List[Line] = []
        position = origin

        for ins in instructions:
            line = Line.from_instruction(ins, position)
            lines.append(line)
            position = line.end

        return cls(tuple(lines))

    # -------------------------------------------------------------
    #   Accessors
    # -------------------------------------------------------------

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def points(self) -> List[Point]:
        """Vertices of the wire: the first start followed by every segment end."""
        if not self.lines:
            return []
        return [self.lines[0].start] + [ln.end for ln in self.lines]

    def total_length(self) -> int:
        return sum(ln.lineLength() for ln in self.lines)

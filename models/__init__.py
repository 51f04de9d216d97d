"""
Data Models

Defines the core data structures:
- Point, Vector
- Direction, Orientation
- Instruction
- Line
- Wire
- Puzzle
"""

from .point import Point, Vector, ORIGIN
from .direction import Direction, Orientation
from .instruction import (
    Instruction,
    ParseError,
    InstructionParseError,
    UnknownDirectionError,
    parse_instruction,
    parse_instruction_list,
    parse_wires_text,
)
from .line import Line
from .wire import Wire
from .puzzle import Puzzle

__all__ = [
    "Point",
    "Vector",
    "ORIGIN",
    "Direction",
    "Orientation",
    "Instruction",
    "ParseError",
    "InstructionParseError",
    "UnknownDirectionError",
    "parse_instruction",
    "parse_instruction_list",
    "parse_wires_text",
    "Line",
    "Wire",
    "Puzzle",
]

"""
Wire instruction parsing.

This module provides:
    • parse_instruction(token)        'U28' -> Instruction(UP, 28)
    • parse_instruction_list(line)    'R8,U5,L5' -> [Instruction, ...]
    • parse_wires_text(text)          one instruction list per line

Malformed input is never recovered from: puzzle inputs are static files,
so a bad token means a corrupt data source and the caller aborts.
"""

import re
from dataclasses import dataclass
from typing import List

from models.direction import Direction


_STEPS_RE = re.compile(r"[+-]?[0-9]+")


# -------------------------------------------------------------------------
#  ERRORS
# -------------------------------------------------------------------------

class ParseError(ValueError):
    """Raised when a puzzle input cannot be parsed."""


class InstructionParseError(ParseError):
    """The step count of a token is not a valid non-negative integer."""


class UnknownDirectionError(ParseError):
    """The leading letter of a token is not one of U, D, L, R."""


# -------------------------------------------------------------------------
#  INSTRUCTION
# -------------------------------------------------------------------------

@dataclass(frozen=True)
class Instruction:
    direction: Direction
    steps: int


def parse_instruction(token: str) -> Instruction:
    """
    Parses one '<letter><integer>' token.

    The step count is checked before the letter, so a token that is wrong
    in both places reports the bad number.

    Raises:
        InstructionParseError: suffix is empty, not base-10, or negative
        UnknownDirectionError: letter is not U, D, L or R
    """
    letter, suffix = token[:1], token[1:]

    if not _STEPS_RE.fullmatch(suffix):
        raise InstructionParseError(f"invalid step count in token {token!r}")
    steps = int(suffix)
    if steps < 0:
        raise InstructionParseError(f"negative step count in token {token!r}")

    direction = Direction.from_letter(letter)
    if direction is None:
        raise UnknownDirectionError(f"unknown direction {letter!r} in token {token!r}")

    return Instruction(direction, steps)


def parse_instruction_list(line: str) -> List[Instruction]:
    """
    Parses a comma-separated line of tokens. A trailing comma is ignored.
    """
    tokens = line.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    return [parse_instruction(tok) for tok in tokens]


def parse_wires_text(text: str) -> List[List[Instruction]]:
    """
    Splits raw puzzle text into one instruction list per non-empty line.
    """
    return [parse_instruction_list(line) for line in text.splitlines() if line]

"""
Day two: a four-opcode program interpreter.

Opcodes (stride 4, operands are positions):
    1  → memory[c] = memory[a] + memory[b]
    2  → memory[c] = memory[a] * memory[b]
    99 → halt
"""

from itertools import product
from typing import List, Optional, Tuple

from config import get_active_params
from models.puzzle import Puzzle


OP_ADD = 1
OP_MUL = 2
OP_HALT = 99


class ProgramError(RuntimeError):
    """Unknown opcode or an operand pointing outside memory."""


def parse_program(text: str) -> List[int]:
    return [int(tok) for tok in text.strip().split(",") if tok.strip()]


def run_program(program: List[int], noun: int, verb: int) -> int:
    """
    Runs a copy of `program` with positions 1 and 2 set to noun and verb,
    and returns position 0 once the program halts (or runs off the end).
    """
    memory = list(program)
    if len(memory) < 3:
        raise ProgramError(f"program too short: {len(memory)} values")
    memory[1] = noun
    memory[2] = verb

    for ip in range(0, len(memory), 4):
        opcode = memory[ip]
        if opcode == OP_HALT:
            break
        if opcode not in (OP_ADD, OP_MUL):
            raise ProgramError(f"unknown opcode {opcode} at position {ip}")

        try:
            index_a, index_b, index_c = memory[ip + 1:ip + 4]
            if min(index_a, index_b, index_c) < 0:
                raise IndexError(ip)
            if opcode == OP_ADD:
                memory[index_c] = memory[index_a] + memory[index_b]
            else:
                memory[index_c] = memory[index_a] * memory[index_b]
        except (ValueError, IndexError) as exc:
            raise ProgramError(f"operand out of range at position {ip}") from exc

    return memory[0]


def find_noun_verb(program: List[int], target: int, search_max: int) -> Optional[Tuple[int, int]]:
    """
    First (noun, verb) in 0..=search_max whose output equals `target`.
    A pair that makes the program fault is not a match.
    """
    values = range(search_max + 1)
    for noun, verb in product(values, values):
        try:
            output = run_program(program, noun, verb)
        except ProgramError:
            continue
        if output == target:
            return noun, verb
    return None


def solve(puzzle: Puzzle) -> Tuple[Optional[str], Optional[str]]:
    params = get_active_params()
    program = parse_program(puzzle.text)

    part_one = run_program(program, params["PROGRAM_NOUN"], params["PROGRAM_VERB"])

    found = find_noun_verb(program, params["PROGRAM_TARGET"], params["PROGRAM_SEARCH_MAX"])
    part_two = None if found is None else str(100 * found[0] + found[1])

    return str(part_one), part_two

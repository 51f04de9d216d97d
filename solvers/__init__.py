"""
Puzzle Solvers

One module per day. Every solver takes a Puzzle and returns a
(part_one, part_two) pair of optional strings.
"""

from . import day_one, day_two, day_three

SOLVERS = {
    1: day_one.solve,
    2: day_two.solve,
    3: day_three.solve,
}

__all__ = ["SOLVERS", "day_one", "day_two", "day_three"]

"""
Day one: fuel required to launch a list of module masses.
"""

from typing import List, Optional, Tuple

from models.puzzle import Puzzle


def fuel_for_mass(mass: int) -> int:
    """Fuel for one mass: mass / 3, rounded down, minus 2."""
    return mass // 3 - 2


def fuel_for_mass_with_fuel(mass: int) -> int:
    """
    Fuel also has mass and needs fuel of its own, so keep applying the
    formula to the last amount added until it is no longer positive.
    """
    total = 0
    fuel = fuel_for_mass(mass)
    while fuel > 0:
        total += fuel
        fuel = fuel_for_mass(fuel)
    return total


def parse_masses(text: str) -> List[int]:
    return [int(line) for line in text.splitlines() if line.strip()]


def solve(puzzle: Puzzle) -> Tuple[Optional[str], Optional[str]]:
    masses = parse_masses(puzzle.text)

    part_one = sum(fuel_for_mass(m) for m in masses)
    part_two = sum(fuel_for_mass_with_fuel(m) for m in masses)

    return str(part_one), str(part_two)

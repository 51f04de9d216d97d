"""
Day three: two wires laid out on a grid from a shared origin.

Part one is the Manhattan distance from the origin to the closest point
where the wires cross. Part two is not solved.
"""

from typing import List, Optional, Tuple

from config import get_active_params
from detectors.closest_intersection import closest_intersection_distance
from models.instruction import parse_wires_text
from models.point import Point
from models.puzzle import Puzzle
from models.wire import Wire


def build_wires(text: str, origin: Point) -> List[Wire]:
    """
    Parses one wire per line and builds it from `origin`.
    Parse errors propagate to the caller.
    """
    return [Wire.from_instructions(ins, origin) for ins in parse_wires_text(text)]


def select_wire_pair(wires: List[Wire]) -> Optional[Tuple[Wire, Wire]]:
    """
    Exactly two wires are expected. Extra wires are ignored; with fewer
    than two there is nothing to cross.
    """
    if len(wires) < 2:
        print(f"[WARN] Expected two wires, found {len(wires)}. No answer.")
        return None
    if len(wires) > 2:
        print(f"[WARN] Expected two wires, found {len(wires)}. Using the first two.")
    return wires[0], wires[1]


def solve_wires(wires: List[Wire], origin: Point) -> Tuple[Optional[str], Optional[str]]:
    """
    Answers for wires that are already built, so callers that also
    render the wires only parse the input once.
    """
    for i, w in enumerate(wires, start=1):
        print(f"[INFO] Wire {i}: {len(w)} segments, length {w.total_length()}")

    pair = select_wire_pair(wires)
    if pair is None:
        return None, None

    distance = closest_intersection_distance(pair[0], pair[1], origin)
    if distance is None:
        print("[WARN] Wires never cross away from the origin.")
        return None, None

    return str(distance), None


def solve(puzzle: Puzzle) -> Tuple[Optional[str], Optional[str]]:
    params = get_active_params()
    origin = Point.from_tuple(params["ORIGIN"])
    return solve_wires(build_wires(puzzle.text, origin), origin)

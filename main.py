from models.puzzle import Puzzle
from solvers import SOLVERS
from solvers.day_two import ProgramError
from solvers.day_three import build_wires, solve_wires
from models.point import Point
from visualization.save_outputs import save_wire_map

from config import (
    SELECTED_DAYS,
    get_active_params,
)


def format_answer(answer):
    return answer if answer is not None else "-"


def save_day_three_outputs(wires, output_dir: str, origin: Point) -> bool:
    """
    Writes the rendered wire map for day three:
        <output_dir>/day3_wires.png

    Returns False (after reporting) when the image cannot be written.
    """
    path = f"{output_dir}/day3_wires.png"
    try:
        save_wire_map(path, wires, origin)
    except OSError as exc:
        print(f"[ERROR] Unable to save wire map to {path}: {exc}")
        return False
    return True


def run_day(day: int, example_file=None):
    """
    Runs one day:
      1. Load the puzzle input
      2. Solve both parts
      3. Print the answers
      4. Save the day-three wire map (if enabled)

    Returns the (part_one, part_two) answers, or None when the day failed.
    A failure is reported and does not affect other days. A wire map that
    cannot be saved is reported but keeps the answers.
    """

    print(f"\n=== Solving day {day} ===")
    params = get_active_params()

    solver = SOLVERS.get(day)
    if solver is None:
        print(f"[WARN] No solver registered for day {day}. Skipping.")
        return None

    if example_file is None:
        example_file = params["EXAMPLE_FILE"]

    origin = Point.from_tuple(params["ORIGIN"])
    wires = None

    try:
        puzzle = Puzzle.from_puzzle_file(day, example_file, params["INPUT_FOLDER"])
        if day == 3 and params["SAVE_WIRE_MAP"]:
            wires = build_wires(puzzle.text, origin)
            part_one, part_two = solve_wires(wires, origin)
        else:
            part_one, part_two = solver(puzzle)
    except OSError as exc:
        print(f"[ERROR] Unable to read puzzle input for day {day}: {exc}")
        return None
    except (ValueError, ProgramError) as exc:
        print(f"[ERROR] Day {day} failed: {exc}")
        return None

    print(f"Part one: {format_answer(part_one)}")
    print(f"Part two: {format_answer(part_two)}")

    if wires is not None:
        save_day_three_outputs(wires, params["OUTPUT_FOLDER"], origin)

    print(f"[OK] Finished day {day}")
    return part_one, part_two


def main():
    """
    Main entry point:
      - Runs every selected day independently
    """
    for day in SELECTED_DAYS:
        run_day(day)

    print("\n=== All days processed ===")


if __name__ == "__main__":
    main()

from dataclasses import dataclass
from typing import Optional

from utils.puzzle_io import puzzle_path, read_puzzle_text


@dataclass(frozen=True)
class Puzzle:
    """
    Raw text of one day's puzzle input.

    Solvers receive a Puzzle and return a pair of optional string answers.
    """

    text: str
    day: Optional[int] = None

    @classmethod
    def from_puzzle_file(cls, day: int, example_file: bool = False, folder: Optional[str] = None) -> "Puzzle":
        """
        Reads day<N>.txt (or day<N>.txt.example) from the input folder.

        Raises:
            FileNotFoundError: the input file does not exist
        """
        path = puzzle_path(day, example_file, folder)
        return cls(read_puzzle_text(path), day)

"""
Puzzle input I/O utilities.

This module provides:
    • puzzle_file_name(day, example_file)
    • puzzle_path(day, example_file, folder)
    • read_puzzle_text(path)
    • ensure_output_dir(path)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
from typing import Optional

from config import INPUT_FOLDER


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def puzzle_file_name(day: int, example_file: bool = False) -> str:
    """
    Example:
        (3, False) → 'day3.txt'
        (3, True)  → 'day3.txt.example'
    """
    stem = f"day{day}.txt"
    return f"{stem}.example" if example_file else stem


def puzzle_path(day: int, example_file: bool = False, folder: Optional[str] = None) -> str:
    """
    Path of a day's input, resolved against the current working directory
    when `folder` is relative.
    """
    if folder is None:
        folder = INPUT_FOLDER
    return os.path.join(os.getcwd(), folder, puzzle_file_name(day, example_file))


# -------------------------------------------------------------------------
#  INPUT LOADING
# -------------------------------------------------------------------------

def read_puzzle_text(path: str) -> str:
    """
    Reads a whole puzzle input as UTF-8 text.

    Raises FileNotFoundError when the file is missing.
    """
    print(f"[INFO] Reading puzzle input from {path}")
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

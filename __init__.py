"""
Puzzle Solutions Package

Daily puzzle solvers, each turning one text input into a pair of
optional answers, including:

- Fuel calculation (day one)
- A four-opcode program interpreter (day two)
- Wire crossing detection on a grid (day three)
- Wire map visualization utilities
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "solvers",
    "utils",
    "visualization",
]

from enum import Enum

from models.point import Vector


class Direction(Enum):
    """
    The four axis-aligned moves a wire can make.
    Each member carries its unit vector (+y is up).
    """

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def unit(self) -> Vector:
        return _UNIT_VECTORS[self]

    @classmethod
    def from_letter(cls, letter: str):
        """Returns the Direction for a letter, or None if it is not one of U/D/L/R."""
        try:
            return cls(letter)
        except ValueError:
            return None


_UNIT_VECTORS = {
    Direction.UP: Vector(0, 1),
    Direction.DOWN: Vector(0, -1),
    Direction.LEFT: Vector(-1, 0),
    Direction.RIGHT: Vector(1, 0),
}


class Orientation(Enum):
    VERTICAL = "vertical"      # constant x
    HORIZONTAL = "horizontal"  # constant y

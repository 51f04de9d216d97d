from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """
    Integer 2D displacement (dx, dy).

    Only used as an intermediate when turning a direction and a step
    count into a coordinate delta.
    """

    dx: int
    dy: int

    def scale(self, scalar: int) -> "Vector":
        return Vector(self.dx * scalar, self.dy * scalar)


@dataclass(frozen=True)
class Point:
    """
    Integer 2D coordinate. Value type: two points with the same
    coordinates are the same point.
    """

    x: int
    y: int

    # -------------------------------------------------------------
    #   Arithmetic
    # -------------------------------------------------------------

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self.x + other.dx, self.y + other.dy)
        return NotImplemented

    def manhattan(self, other: "Point") -> int:
        """|dx| + |dy| between two points."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self):
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, tup) -> "Point":
        return cls(int(tup[0]), int(tup[1]))


ORIGIN = Point(0, 0)

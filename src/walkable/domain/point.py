"""Integer 2D point primitive.

All geometry in walkable runs on integer coordinates. Python integers never
overflow, so every cross product, dot product and squared length is exact.
The only floating point values produced here are lengths and distances.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """An integer point (or vector) in 2D space.

    Immutable and hashable. Supports vector arithmetic with other points and
    scaling by integers.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, scale: int) -> "Point":
        return Point(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __floordiv__(self, scale: int) -> "Point":
        return Point(self.x // scale, self.y // scale)

    def dot(self, other: "Point") -> int:
        """Dot product of two vectors."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> int:
        """Z component of the 3D cross product of two vectors.

        Positive when ``other`` is counter-clockwise from this vector.
        """
        return self.x * other.y - self.y * other.x

    def length_squared(self) -> int:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared(self, other: "Point") -> int:
        return (other - self).length_squared()

    def distance(self, other: "Point") -> float:
        return (other - self).length()

    def to_tuple(self) -> tuple[int, int]:
        """Convert to a plain (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, values: tuple[int, int] | list[int]) -> "Point":
        """Build a point from an (x, y) pair."""
        x, y = values
        return cls(int(x), int(y))

    def __str__(self) -> str:
        return f"{self.x},{self.y}"

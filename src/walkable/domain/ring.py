"""Simple polygon rings.

A ring is a closed loop of integer vertices with no self-intersections. The
closing edge from the last vertex back to the first is implicit.

The sign of a ring's area gives its polarity:
- Positive area: the ring encloses filled space
- Negative area: the ring is a hole that subtracts space
- Zero area (degenerate): treated as fill
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

from walkable.domain.edge import Edge, iter_edges, max_order
from walkable.domain.point import Point


class Polarity(Enum):
    """Whether a ring adds space to a region or subtracts it."""

    FILL = auto()
    HOLE = auto()


@dataclass
class Ring:
    """A simple polygon stored as an ordered vertex loop.

    Attributes:
        points: Vertices of the ring, without a repeated closing vertex
    """

    points: list[Point] = field(default_factory=list)

    @classmethod
    def from_tuples(cls, coords: Iterable[tuple[int, int]]) -> "Ring":
        """Build a ring from (x, y) pairs."""
        return cls([Point.from_tuple(c) for c in coords])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __add__(self, offset: Point) -> "Ring":
        return Ring([p + offset for p in self.points])

    def __sub__(self, offset: Point) -> "Ring":
        return Ring([p - offset for p in self.points])

    def __mul__(self, scale: int) -> "Ring":
        return Ring([p * scale for p in self.points])

    __rmul__ = __mul__

    def __floordiv__(self, scale: int) -> "Ring":
        return Ring([p // scale for p in self.points])

    def edges(self) -> Iterator[Edge]:
        """Iterate over this ring's directed edges."""
        return iter_edges(self.points)

    def max_order(self) -> int:
        return max_order(self.points)

    def doubled_area(self) -> int:
        """Twice the signed area, computed exactly.

        Each edge forms a triangle with the origin; the cross product of its
        endpoints is twice that triangle's signed area.
        """
        return sum(edge.start.cross(edge.end) for edge in self.edges())

    def area(self) -> float:
        """Signed area of the ring. Negative for holes."""
        return self.doubled_area() / 2

    @property
    def polarity(self) -> Polarity:
        return Polarity.HOLE if self.doubled_area() < 0 else Polarity.FILL

    @property
    def is_hole(self) -> bool:
        return self.polarity is Polarity.HOLE

    def reverse(self) -> None:
        """Reverse the vertex order in place, flipping the polarity."""
        self.points.reverse()

    def reversed_copy(self) -> "Ring":
        return Ring(self.points[::-1])

    def winding(self, point: Point) -> tuple[int, int]:
        """Compute the winding number of this ring around a point.

        Uses the crossing form of the winding number algorithm: only edges
        that straddle the horizontal line through the point contribute, with
        a sign given by which side of the edge the point is on.

        Args:
            point: The point to test

        Returns:
            Tuple of (winding number, number of boundary hits). A nonzero
            boundary count means the point lies exactly on this ring.
        """
        winding = 0
        border = 0

        for edge in self.edges():
            vector = edge.vector
            offset = point - edge.start
            cross = vector.cross(offset)

            if cross == 0 and 0 <= offset.dot(vector) <= vector.length_squared():
                border += 1

            starts_below = edge.start.y <= point.y
            ends_below = edge.end.y <= point.y
            if starts_below == ends_below:
                continue

            if not ends_below and cross > 0:
                winding += 1
            elif ends_below and cross <= 0:
                winding -= 1

        return winding, border

    def contains(self, point: Point) -> bool:
        """Check if this ring, including its boundary, contains a point."""
        winding, border = self.winding(point)
        return winding != 0 or border > 0

    def contains_ring(self, other: "Ring") -> bool:
        """Check if another ring lies entirely inside this one.

        Only valid when the two rings do not cross, which is the case for the
        rings of a merged Polygon. Under that condition it is enough to test a
        single vertex. The vertex must have a nonzero winding number; if it is
        also on this ring's boundary, the larger ring (by absolute area) is
        taken to contain the smaller. A ring touching this one from outside
        has winding number 0 at the shared vertex and is never contained.

        Args:
            other: Ring to test; must not cross this ring

        Returns:
            True if ``other`` is inside this ring
        """
        if not other.points:
            return False

        winding, border = self.winding(other.points[0])
        if winding == 0:
            return False
        return not border or abs(self.doubled_area()) > abs(other.doubled_area())

    def concave_points(self) -> list[Point]:
        """Get every vertex that bends against the ring's winding.

        These are the candidate pathfinding waypoints. Degenerate rings with
        fewer than 3 vertices return all of their vertices.
        """
        if len(self.points) < 3:
            return list(self.points)

        result: list[Point] = []
        prev = self.points[-2]
        here = self.points[-1]
        for nxt in self.points:
            if (here - prev).cross(nxt - prev) < 0:
                result.append(here)
            prev, here = here, nxt
        return result

    def to_tuples(self) -> list[tuple[int, int]]:
        return [p.to_tuple() for p in self.points]

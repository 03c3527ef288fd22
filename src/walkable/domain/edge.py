"""Directed edge traversal over a ring.

A ring with vertices ``v0 .. vn-1`` has ``n`` edges. The traversal starts with
the closing edge ``vn-1 -> v0`` and then walks ``v0 -> v1`` and so on, so edge
``i`` always ends at vertex ``i``.

Two position metrics are exposed:

- ``Edge.order``: the sum of squared lengths of all edges visited before this
  one. It grows monotonically along one traversal and ends at ``max_order``.
- ``EdgeKey``: an exact ``(edge index, fraction along edge)`` pair. Keys are
  what the polygon merge sorts intersections by.

Either value is only comparable within one traversal of one ring.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from fractions import Fraction

from walkable.domain.point import Point


@dataclass(frozen=True, order=True, slots=True)
class EdgeKey:
    """Exact position along a ring's perimeter.

    Attributes:
        edge: Index of the edge in traversal order
        t: Fraction of the way along that edge, in ``[0, 1)``
    """

    edge: int
    t: Fraction = Fraction(0)


@dataclass(frozen=True, slots=True)
class Edge:
    """One directed segment of a ring traversal.

    Attributes:
        index: Position of this edge in the traversal
        count: Total number of edges in the ring
        start: Start vertex
        end: End vertex
        order: Sum of squared lengths of all previous edges
    """

    index: int
    count: int
    start: Point
    end: Point
    order: int

    @property
    def vector(self) -> Point:
        """The edge vector, ``end - start``."""
        return self.end - self.start

    def key(self, numerator: int, denominator: int) -> EdgeKey:
        """Build the perimeter key of a point ``numerator / denominator`` along this edge.

        A point at the very end of the edge is the start of the next one, and
        the end of the last edge wraps around to the start of the first.
        """
        if numerator == denominator:
            return EdgeKey((self.index + 1) % self.count)
        return EdgeKey(self.index, Fraction(numerator, denominator))


def iter_edges(points: Sequence[Point]) -> Iterator[Edge]:
    """Iterate over the directed edges of a closed vertex loop.

    Args:
        points: Vertices of the ring

    Yields:
        Edges in traversal order, starting with the closing edge
    """
    count = len(points)
    if count == 0:
        return

    order = 0
    start = points[-1]
    for index, end in enumerate(points):
        edge = Edge(index=index, count=count, start=start, end=end, order=order)
        yield edge
        order += edge.vector.length_squared()
        start = end


def max_order(points: Sequence[Point]) -> int:
    """Get the order value reached after a full traversal, i.e. the wrap value."""
    total = 0
    for edge in iter_edges(points):
        total = edge.order + edge.vector.length_squared()
    return total

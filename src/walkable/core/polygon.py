"""Multiply-connected polygons and exact boolean merging.

A Polygon is an ordered list of simple rings. Fill rings (positive area) add
space and hole rings (negative area) subtract it. After every ``add`` the
rings of a Polygon may nest inside each other or touch, but never cross. The
merge relies on that as a hard precondition: it is what lets containment
between non-crossing rings be decided from a single vertex.

All predicates use exact integer arithmetic. Intersections are positioned on
each ring with an exact ``EdgeKey`` so that crossings found from different
edge pairs at the same location compare equal.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import groupby
from operator import attrgetter

from walkable.domain import EdgeKey, Point, Ring
from walkable.exceptions import MergeError

logger = logging.getLogger(__name__)

# Link value for a cross link that a trace has already followed.
_CONSUMED = -2


@dataclass
class _Crossing:
    """A point where an edge of P meets an edge of Q.

    Attributes:
        point: Location of the crossing
        p_key: Position along the ring of P
        q_key: Position along Q
        entering: Crossing direction; inverted when Q is a hole
    """

    point: Point
    p_key: EdgeKey
    q_key: EdgeKey
    entering: bool


@dataclass
class _Vertex:
    """A vertex of the amplified sequence, optionally linked to its twin."""

    point: Point
    link: int = -1


def _find_crossings(part: Ring, ring: Ring, ring_is_hole: bool) -> list[_Crossing]:
    """Find every intersection between the edges of two rings.

    Parallel edges are skipped. Intersections at segment endpoints count, so a
    crossing through a vertex is reported once per edge pair that meets there.

    Args:
        part: Ring of the existing polygon (P)
        ring: Ring being merged (Q)
        ring_is_hole: Whether Q is a hole

    Returns:
        Unsorted list of crossings
    """
    crossings: list[_Crossing] = []
    for p in part.edges():
        pv = p.vector
        for q in ring.edges():
            qv = q.vector
            cross = pv.cross(qv)
            if cross == 0:
                continue

            # The lines are not parallel, so they meet somewhere. Solve for the
            # parameters along each segment as fractions of ``cross``.
            d = q.start - p.start
            p_t = d.cross(qv)
            q_t = d.cross(pv)
            entering = (cross > 0) != ring_is_hole
            if cross < 0:
                cross, p_t, q_t = -cross, -p_t, -q_t

            if 0 <= p_t <= cross and 0 <= q_t <= cross:
                offset = Point(p_t * pv.x // cross, p_t * pv.y // cross)
                crossings.append(
                    _Crossing(
                        point=p.start + offset,
                        p_key=p.key(p_t, cross),
                        q_key=q.key(q_t, cross),
                        entering=entering,
                    )
                )
    return crossings


def _collapse_touches(crossings: list[_Crossing]) -> list[_Crossing]:
    """Merge crossings that share a location on P.

    Several edge pairs meet at a vertex. If the entering and exiting counts
    at one location balance, the rings only touch there and every crossing is
    dropped. Otherwise a single crossing with the majority direction is kept.

    Args:
        crossings: Crossings sorted by ``p_key``
    """
    result: list[_Crossing] = []
    for _, group in groupby(crossings, key=attrgetter("p_key")):
        members = list(group)
        net = sum(1 if c.entering else -1 for c in members)
        if net == 0:
            continue
        result.append(next(c for c in members if c.entering == (net > 0)))
    return result


def _alternating(crossings: list[_Crossing]) -> list[_Crossing]:
    """Drop crossings that repeat the previous direction.

    An edge that runs from outside to collinear with the other ring, and then
    from collinear to inside, produces two crossings in the same direction.
    Only the first counts. The list is cyclic, so the first crossing is
    compared against the last.
    """
    if not crossings:
        return []

    result: list[_Crossing] = []
    was_entering = crossings[-1].entering
    for crossing in crossings:
        if crossing.entering == was_entering:
            continue
        was_entering = crossing.entering
        result.append(crossing)
    return result


def _append_amplified(
    ring: Ring,
    inserts: list[tuple[EdgeKey, Point]],
    amplified: list[_Vertex],
) -> list[int]:
    """Append a ring's vertices with crossing vertices slotted in.

    The ring is closed by a final vertex that links back to its first one.

    Args:
        ring: Ring to walk
        inserts: (key, point) pairs sorted by key
        amplified: Shared amplified sequence, extended in place

    Returns:
        Index in ``amplified`` of each inserted vertex, in ``inserts`` order
    """
    begin = len(amplified)
    indices: list[int] = []
    i = 0
    for edge in ring.edges():
        # A crossing exactly at the start of this edge replaces the vertex.
        if i == len(inserts) or inserts[i][0] != EdgeKey(edge.index):
            amplified.append(_Vertex(edge.start))
        while i < len(inserts) and inserts[i][0].edge == edge.index:
            indices.append(len(amplified))
            amplified.append(_Vertex(inserts[i][1]))
            i += 1

    amplified.append(_Vertex(amplified[begin].point, link=begin))
    return indices


def _trace(amplified: list[_Vertex], starts: list[int]) -> list[Ring]:
    """Trace the output rings through the linked amplified sequence.

    Each trace walks forward, jumping across every cross link it meets and
    consuming it, until it returns to its start. Loops with fewer than 3
    vertices or zero area are discarded.

    Raises:
        MergeError: If a trace does not close
    """
    loops: list[Ring] = []
    limit = len(amplified)
    for start in starts:
        if amplified[start].link < 0:
            continue

        out: list[Point] = []
        j = start
        steps = 0
        while True:
            vertex = amplified[j]
            if vertex.link >= 0:
                j = vertex.link
                vertex.link = _CONSUMED
            else:
                out.append(vertex.point)
                j += 1
            if j == start:
                break
            steps += 1
            if j >= limit or steps > 2 * limit:
                raise MergeError(f"Trace from vertex {start} did not close")

        loop = Ring(out)
        if len(loop) < 3 or loop.doubled_area() == 0:
            logger.debug("Discarding degenerate loop with %d vertices", len(loop))
            continue
        loops.append(loop)
    return loops


@dataclass
class Polygon:
    """A possibly multiply-connected region built from simple rings.

    Attributes:
        rings: Rings of the region; pairwise non-crossing
    """

    rings: list[Ring] = field(default_factory=list)

    @classmethod
    def merged(cls, rings: Iterable[Ring]) -> "Polygon":
        """Build a polygon by merging rings one after another."""
        polygon = cls()
        for ring in rings:
            polygon.add(ring)
        return polygon

    def __len__(self) -> int:
        return len(self.rings)

    def __iter__(self) -> Iterator[Ring]:
        return iter(self.rings)

    def __getitem__(self, index: int) -> Ring:
        return self.rings[index]

    def __add__(self, offset: Point) -> "Polygon":
        return Polygon([ring + offset for ring in self.rings])

    def __sub__(self, offset: Point) -> "Polygon":
        return Polygon([ring - offset for ring in self.rings])

    def __mul__(self, scale: int) -> "Polygon":
        return Polygon([ring * scale for ring in self.rings])

    __rmul__ = __mul__

    def __floordiv__(self, scale: int) -> "Polygon":
        return Polygon([ring // scale for ring in self.rings])

    def is_empty(self) -> bool:
        return not self.rings

    def clear(self) -> None:
        self.rings = []

    def vertices(self) -> Iterator[Point]:
        """Iterate over every vertex of every ring."""
        for ring in self.rings:
            yield from ring

    def add(self, ring: Ring) -> None:
        """Merge a simple ring into this polygon.

        A fill ring is unioned with the region and a hole ring is subtracted
        from it. In the comments below this polygon is P and the ring is Q.

        Precondition: the rings of P do not cross each other. Every polygon
        built only through ``add`` satisfies this.

        Args:
            ring: Simple ring to merge. Rings with fewer than 3 vertices or
                zero area are ignored.

        Raises:
            MergeError: If the inputs break the merge preconditions
        """
        if len(ring) < 3 or ring.doubled_area() == 0:
            logger.debug("Ignoring degenerate ring with %d vertices", len(ring))
            return

        is_hole = ring.is_hole
        result: list[Ring] = []
        amplified: list[_Vertex] = []
        q_inserts: list[tuple[EdgeKey, Point, int, bool]] = []
        smallest_container: Ring | None = None

        # Step 1: find where Q crosses each ring of P, and build amplified
        # copies of the rings that it crosses.
        for part in self.rings:
            crossings = _find_crossings(part, ring, is_hole)
            crossings.sort(key=attrgetter("p_key"))
            crossings = _alternating(_collapse_touches(crossings))

            if not crossings:
                # Rings that Q does not cross survive unless Q covers them.
                if not ring.contains_ring(part):
                    result.append(part)
                    # Anything containing Q either nests inside this part or
                    # surrounds it, since the rings of P never cross.
                    if part.contains_ring(ring) and (
                        smallest_container is None or smallest_container.contains_ring(part)
                    ):
                        smallest_container = part
                continue

            indices = _append_amplified(
                part, [(c.p_key, c.point) for c in crossings], amplified
            )
            for crossing, index in zip(crossings, indices):
                q_inserts.append((crossing.q_key, crossing.point, index, crossing.entering))

        # Step 2: if Q crosses nothing, it only matters when its polarity
        # differs from whatever surrounds it. Outside every ring counts as hole.
        if not q_inserts:
            container_is_hole = smallest_container is None or smallest_container.is_hole
            if container_is_hole != is_hole:
                result.append(ring)
            self.rings = result
            return

        # Step 3: build the amplified copy of Q and link each crossing to its
        # twin on P. Entering crossings jump from Q onto P, exiting ones from P
        # onto Q.
        q_inserts.sort(key=lambda insert: insert[0])
        q_indices = _append_amplified(
            ring, [(key, point) for key, point, _, _ in q_inserts], amplified
        )
        starts: list[int] = []
        for (_, _, p_index, entering), q_index in zip(q_inserts, q_indices):
            if entering:
                amplified[q_index].link = p_index
                starts.append(q_index)
            else:
                amplified[p_index].link = q_index

        # Step 4: trace the output rings.
        traced = _trace(amplified, starts)
        logger.debug(
            "Merged ring: %d crossings, %d traced rings, %d untouched rings",
            len(q_inserts),
            len(traced),
            len(result),
        )
        result.extend(traced)
        self.rings = result

    def flood_fill(self, point: Point) -> None:
        """Reduce this polygon to the connected component containing a point.

        Keeps the smallest fill ring that contains the point, plus the holes
        inside it. Holes nested inside a larger hole of that ring are dropped,
        since whatever lies inside them belongs to another component. If no
        fill ring contains the point the polygon becomes empty.
        """
        areas = [ring.doubled_area() for ring in self.rings]

        smallest: int | None = None
        for i, ring in enumerate(self.rings):
            if areas[i] > 0 and ring.contains(point):
                if smallest is None or areas[i] < areas[smallest]:
                    smallest = i

        if smallest is None:
            self.rings = []
            return

        container = self.rings[smallest]
        holes = [
            i
            for i, ring in enumerate(self.rings)
            if areas[i] < 0 and container.contains_ring(ring)
        ]

        keep = {smallest}
        for i in holes:
            # A larger hole has a lower (more negative) area.
            nested = any(
                areas[j] < areas[i] and self.rings[j].contains(self.rings[i][0])
                for j in holes
            )
            if not nested:
                keep.add(i)

        self.rings = [ring for i, ring in enumerate(self.rings) if i in keep]

    def contains(self, point: Point) -> bool:
        """Check if this polygon contains a point.

        Sums the winding numbers of all rings. A point on any ring's boundary
        is inside.
        """
        winding = 0
        for ring in self.rings:
            ring_winding, border = ring.winding(point)
            if border:
                return True
            winding += ring_winding
        return winding != 0

    def intersects(self, start: Point, end: Point) -> bool:
        """Check if a line segment, excluding its endpoints, crosses any ring.

        Touching a ring vertex counts only if the touching edge is not exactly
        collinear with the segment.
        """
        qv = end - start
        for ring in self.rings:
            for p in ring.edges():
                pv = p.vector
                cross = pv.cross(qv)
                if cross == 0:
                    continue

                d = start - p.start
                p_t = d.cross(qv)
                q_t = d.cross(pv)
                if cross < 0:
                    cross, p_t, q_t = -cross, -p_t, -q_t

                if 0 < q_t < cross and 0 <= p_t <= cross:
                    return True
        return False

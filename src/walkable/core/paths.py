"""Visibility graph pathfinding over a walkable region.

``Paths.init`` merges the collision masks of a scene into one region, keeps
the component the avatar stands in, and connects every concave vertex of
that region to every other one it can see. ``Paths.find`` then answers
movement queries with an A* search over that graph.

The graph is immutable once built. Per-query bookkeeping lives in a
``SearchScratch`` owned by the caller, so one ``Paths`` can serve concurrent
queries.
"""

import heapq
import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from walkable.config import MaskConvention, PathfindingConfig
from walkable.core.polygon import Polygon
from walkable.domain import Point, Ring

logger = logging.getLogger(__name__)

# Backtrack value of a waypoint reached straight from the start point.
SEED = -1


@dataclass
class Waypoint:
    """A concave vertex of the walkable region.

    Attributes:
        point: Vertex position in internal coordinates
        back: Vector from the vertex to the previous ring vertex
        forward: Vector from the vertex to the next ring vertex
        sightlines: (waypoint index, distance) for every visible waypoint
    """

    point: Point
    back: Point
    forward: Point
    sightlines: list[tuple[int, float]] = field(default_factory=list)

    def faces(self, direction: Point) -> bool:
        """Check if a direction leaves this vertex into the walkable region.

        The vertex is concave, so the walkable side spans more than 180
        degrees. A direction is fine as long as it does not point into the
        smaller wedge outside.
        """
        return self.back.cross(direction) <= 0 or direction.cross(self.forward) <= 0


@dataclass
class SearchScratch:
    """Per-query A* bookkeeping, indexed by waypoint.

    Attributes:
        distance: Straight-line distance from each waypoint to the target
        visible: Whether each waypoint sees the target directly
        backtrack: Previous waypoint on the best known path, or ``SEED``
        shortest: Best known path length from the start to each waypoint
    """

    distance: list[float] = field(default_factory=list)
    visible: list[bool] = field(default_factory=list)
    backtrack: list[int] = field(default_factory=list)
    shortest: list[float] = field(default_factory=list)

    def reset(self, count: int) -> None:
        """Size the arrays for ``count`` waypoints and clear them."""
        self.distance = [0.0] * count
        self.visible = [False] * count
        self.backtrack = [SEED] * count
        self.shortest = [math.inf] * count


class Paths:
    """Walkable region plus the visibility graph over its concave vertices.

    Example:
        paths = Paths()
        paths.init(scene.masks(), scene.start)
        route = paths.find(avatar, click)
        next_stop = route.pop()
    """

    def __init__(self, config: PathfindingConfig | None = None) -> None:
        self.config = config or PathfindingConfig()
        self._passable = Polygon()
        self._waypoints: list[Waypoint] = []

    @property
    def scale(self) -> int:
        return self.config.internal_scale

    @property
    def passable(self) -> Polygon:
        """The walkable region, in internal coordinates."""
        return self._passable

    @property
    def waypoints(self) -> list[Waypoint]:
        return self._waypoints

    def corners(self) -> list[Point]:
        """Get the waypoint positions in scene coordinates."""
        return [waypoint.point // self.scale for waypoint in self._waypoints]

    def sightline_count(self) -> int:
        return sum(len(w.sightlines) for w in self._waypoints) // 2

    def init(self, masks: Iterable[Iterable[Ring]], start: Point) -> None:
        """Build the walkable region and its visibility graph.

        Any previous region is discarded. The avatar is assumed to stay in
        the component it starts in, so everything else is pruned. When the
        masks change the graph must be rebuilt from scratch.

        Args:
            masks: Collision mask of every placed object, in scene coordinates
            start: Avatar position in scene coordinates
        """
        self._passable = Polygon()
        self._waypoints = []

        for mask in masks:
            for ring in mask:
                self._passable.add(ring * self.scale)

        # Blocking masks merge into the blocked region; its complement is the
        # walkable one.
        if self.config.mask_convention is MaskConvention.BLOCK_POSITIVE:
            for ring in self._passable:
                ring.reverse()

        self._passable.flood_fill(start * self.scale)

        for ring in self._passable:
            if len(ring) < 3:
                continue

            prev = ring[-2]
            here = ring[-1]
            for nxt in ring:
                back = prev - here
                forward = nxt - here
                if back.cross(forward) >= 0:
                    self._add_waypoint(here, back, forward)
                prev, here = here, nxt

        logger.debug(
            "Built visibility graph: %d rings, %d waypoints, %d sightlines",
            len(self._passable),
            len(self._waypoints),
            self.sightline_count(),
        )

    def find(
        self,
        start: Point,
        target: Point,
        scratch: SearchScratch | None = None,
    ) -> list[Point]:
        """Find the waypoints to visit to walk from one point to another.

        If the target is outside the walkable region, the walk ends at the
        region vertex closest to it instead.

        Args:
            start: Current position in scene coordinates
            target: Desired position in scene coordinates
            scratch: Reusable search state; a fresh one is used if omitted

        Returns:
            Points to walk through, in stack order: the final destination is
            first and the next point to walk to is last. Empty if there is no
            walkable region or no path from ``start``.
        """
        if self._passable.is_empty():
            return []

        start = start * self.scale
        target = target * self.scale

        if not self._passable.contains(target):
            target = self._closest_vertex(target)

        if self.visible(start, target):
            return [target // self.scale]

        if scratch is None:
            scratch = SearchScratch()
        self._calculate_distances(target, scratch)

        # The straight line is blocked, so the path bends around at least one
        # waypoint. The target distance is an admissible heuristic, and once
        # it is exact (the waypoint sees the target) the popped path is optimal.
        queue: list[tuple[float, float, int]] = []
        for i, waypoint in enumerate(self._waypoints):
            if self.visible(start, waypoint.point):
                length = start.distance(waypoint.point)
                scratch.backtrack[i] = SEED
                scratch.shortest[i] = length
                heapq.heappush(queue, (length + scratch.distance[i], length, i))

        best: int | None = None
        while queue:
            _, length, i = heapq.heappop(queue)
            if length > scratch.shortest[i]:
                continue
            if scratch.visible[i]:
                best = i
                break

            for j, step in self._waypoints[i].sightlines:
                candidate = length + step
                if candidate >= scratch.shortest[j]:
                    continue
                scratch.shortest[j] = candidate
                scratch.backtrack[j] = i
                heapq.heappush(queue, (candidate + scratch.distance[j], candidate, j))

        if best is None:
            logger.debug("No path from %s to %s", start, target)
            return []

        path = [target // self.scale]
        i = best
        while i != SEED:
            path.append(self._waypoints[i].point // self.scale)
            i = scratch.backtrack[i]
        return path

    def visible(self, start: Point, end: Point) -> bool:
        """Check if a straight walk between two internal points stays walkable.

        Both endpoints may be region vertices, in which case the segment could
        run through a hole without crossing any edge; the midpoint test
        rules that out.
        """
        return not self._passable.intersects(start, end) and self._passable.contains(
            (start + end) // 2
        )

    def _add_waypoint(self, vertex: Point, back: Point, forward: Point) -> None:
        """Register a concave vertex and connect it to every waypoint it sees."""
        index = len(self._waypoints)
        waypoint = Waypoint(vertex, back, forward)

        for i, other in enumerate(self._waypoints):
            direction = other.point - vertex
            if (
                waypoint.faces(direction)
                and other.faces(-direction)
                and self.visible(other.point, vertex)
            ):
                distance = direction.length()
                other.sightlines.append((index, distance))
                waypoint.sightlines.append((i, distance))

        self._waypoints.append(waypoint)

    def _closest_vertex(self, target: Point) -> Point:
        return min(self._passable.vertices(), key=target.distance_squared)

    def _calculate_distances(self, target: Point, scratch: SearchScratch) -> None:
        """Fill in each waypoint's distance to the target and direct visibility."""
        scratch.reset(len(self._waypoints))
        for i, waypoint in enumerate(self._waypoints):
            scratch.distance[i] = target.distance(waypoint.point)
            scratch.visible[i] = self.visible(waypoint.point, target)

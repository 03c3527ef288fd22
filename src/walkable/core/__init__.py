"""Core algorithms for walkable.

This module contains the core algorithms for:

- Polygon algebra (exact boolean union and difference of simple rings)
- Connected component extraction and point containment
- Visibility graph construction over concave vertices
- A* path search

The geometry is exact: every predicate uses integer arithmetic, and only
distances are floating point.

Key classes:
- Polygon: Multiply-connected region with merge, flood fill and tests
- Paths: Walkable region plus visibility graph, answers path queries
- SearchScratch: Caller-owned per-query search state
- SceneNavigator: Builds a scene and routes movement with logging
"""

from walkable.core.navigator import SceneNavigator
from walkable.core.paths import Paths, SearchScratch, Waypoint
from walkable.core.polygon import Polygon

__all__ = [
    "Paths",
    "Polygon",
    "SceneNavigator",
    "SearchScratch",
    "Waypoint",
]

"""Domain models for walkable.

This module contains the geometric primitives and the scene description
consumed by the pathfinding core. All models are independent of any file
format.

Key classes:
- Point: An integer 2D point or vector
- Edge: One directed segment of a ring traversal
- EdgeKey: Exact perimeter position used to order intersections
- Ring: A simple polygon with fill or hole polarity
- Polarity: Enum for ring polarity
- SceneObject: A placed object with a collision mask
- Scene: Placed objects plus the avatar's starting point
"""

from walkable.domain.edge import Edge, EdgeKey, iter_edges, max_order
from walkable.domain.point import Point
from walkable.domain.ring import Polarity, Ring
from walkable.domain.scene import Scene, SceneObject

__all__: list[str] = [
    # Enums
    "Polarity",
    # Core types
    "Point",
    "Edge",
    "EdgeKey",
    "Ring",
    "SceneObject",
    "Scene",
    # Traversal helpers
    "iter_edges",
    "max_order",
]

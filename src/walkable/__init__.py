"""Walkable - Walkable regions and paths around obstacles.

Walkable merges the collision masks of placed objects into a single exact
integer polygon, keeps the region the avatar stands in, and finds movement
paths through it with an A* search over a visibility graph of the region's
concave corners.

Example:
    $ walkable route kitchen.json --from 40,80 --to 300,120

This prints the waypoints an avatar walks through to get from one point to
the other without crossing any obstacle.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

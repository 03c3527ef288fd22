"""Scene model: placed objects and their collision masks."""

from dataclasses import dataclass, field

from walkable.domain.point import Point
from walkable.domain.ring import Ring


@dataclass
class SceneObject:
    """An object placed in a scene.

    Mask rings are stored relative to the object's anchor and are moved into
    scene coordinates by ``placed_mask``.

    Attributes:
        name: Object name, for diagnostics only
        position: Anchor position in scene coordinates
        mask: Collision mask rings relative to the anchor
    """

    name: str
    position: Point = field(default_factory=lambda: Point(0, 0))
    mask: list[Ring] = field(default_factory=list)

    def placed_mask(self) -> list[Ring]:
        """Get the mask rings translated to scene coordinates."""
        return [ring + self.position for ring in self.mask]

    def has_mask(self) -> bool:
        return any(len(ring) for ring in self.mask)


@dataclass
class Scene:
    """A set of placed objects plus the avatar's starting point.

    Attributes:
        start: Where the avatar stands; selects the walkable component
        objects: Placed objects in drawing order
    """

    start: Point
    objects: list[SceneObject] = field(default_factory=list)

    def masks(self) -> list[list[Ring]]:
        """Get the placed collision mask of every object that has one."""
        return [obj.placed_mask() for obj in self.objects if obj.has_mask()]

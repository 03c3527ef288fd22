"""Converters between scene file models and domain models.

Scene files are JSON documents validated by the pydantic models below and
then converted to the ``Scene`` domain model. A scene file looks like:

    {
        "start": [50, 50],
        "objects": [
            {"name": "room", "mask": ["-10,-10 110,-10 110,110 -10,110",
                                      "0,0 0,100 100,100 100,0"]},
            {"name": "barrel", "position": [30, 60], "circle": 2}
        ]
    }

Each mask ring may be given either as a mask-format vertex string or as a
list of ``[x, y]`` pairs. ``circle`` adds the octagonal footprint of a round
object with the given radius.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from walkable.config import MaskConvention
from walkable.domain import Point, Polarity, Ring, Scene, SceneObject
from walkable.exceptions import MaskFormatError
from walkable.io.masks import circle_mask, parse_ring


class SceneObjectModel(BaseModel):
    """One placed object in a scene file."""

    name: str = Field(default="object", description="Object name")
    position: tuple[int, int] = Field(default=(0, 0), description="Anchor position")
    mask: list[list[tuple[int, int]]] = Field(
        default_factory=list,
        description="Mask rings relative to the anchor",
    )
    circle: int | None = Field(
        default=None,
        ge=1,
        description="Radius of an octagonal blocking footprint",
    )

    @field_validator("mask", mode="before")
    @classmethod
    def _parse_ring_strings(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        rings = []
        for ring in value:
            if isinstance(ring, str):
                try:
                    ring = parse_ring(ring).to_tuples()
                except MaskFormatError as e:
                    raise ValueError(str(e)) from e
            rings.append(ring)
        return rings


class SceneModel(BaseModel):
    """Top level of a scene file."""

    start: tuple[int, int] = Field(description="Avatar starting position")
    objects: list[SceneObjectModel] = Field(default_factory=list)


def object_model_to_domain(
    model: SceneObjectModel,
    convention: MaskConvention = MaskConvention.BLOCK_POSITIVE,
) -> SceneObject:
    """Convert a scene file object to a domain SceneObject.

    The circle footprint blocks movement, so its polarity follows the mask
    convention.
    """
    rings = [Ring.from_tuples(ring) for ring in model.mask]
    if model.circle is not None:
        blocking = (
            Polarity.FILL if convention is MaskConvention.BLOCK_POSITIVE else Polarity.HOLE
        )
        rings.append(circle_mask(model.circle, polarity=blocking))
    return SceneObject(
        name=model.name,
        position=Point.from_tuple(model.position),
        mask=rings,
    )


def scene_model_to_domain(
    model: SceneModel,
    convention: MaskConvention = MaskConvention.BLOCK_POSITIVE,
) -> Scene:
    """Convert a validated scene file to the domain Scene model."""
    return Scene(
        start=Point.from_tuple(model.start),
        objects=[object_model_to_domain(obj, convention) for obj in model.objects],
    )

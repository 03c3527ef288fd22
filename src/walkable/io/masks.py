"""Text format for collision masks.

Masks are written one ring per line, as the tag ``mask`` followed by the
ring's vertices as ``x,y`` pairs separated by whitespace:

    mask 0,0 100,0 100,100 0,100
    mask 40,40 40,60 60,60 60,40

Lines with any other tag are ignored, so a mask block can sit inside a larger
object definition file.
"""

import logging
from collections.abc import Iterable

from walkable.domain import Point, Polarity, Ring
from walkable.exceptions import MaskFormatError

logger = logging.getLogger(__name__)

MASK_TAG = "mask"

# Octagonal object footprint at radius 1. Wider than tall, to match the
# perspective of the floor plane.
CIRCLE = [
    Point(6, 1), Point(6, -1), Point(2, -3), Point(-2, -3),
    Point(-6, -1), Point(-6, 1), Point(-2, 3), Point(2, 3),
]


def parse_point(token: str) -> Point:
    """Parse a single ``x,y`` token.

    Raises:
        MaskFormatError: If the token is not two comma separated integers
    """
    parts = token.split(",")
    if len(parts) != 2:
        raise MaskFormatError(token, "expected 'x,y'")
    try:
        return Point(int(parts[0]), int(parts[1]))
    except ValueError as e:
        raise MaskFormatError(token, "coordinates must be integers") from e


def parse_ring(text: str) -> Ring:
    """Parse the vertex list of one ring, without the ``mask`` tag.

    Raises:
        MaskFormatError: If any vertex is malformed or fewer than 3 are given
    """
    points = [parse_point(token) for token in text.split()]
    if len(points) < 3:
        raise MaskFormatError(text, f"a ring needs at least 3 vertices, got {len(points)}")
    return Ring(points)


def parse_mask_lines(lines: Iterable[str]) -> list[Ring]:
    """Parse every ``mask`` line in a block of text lines.

    Args:
        lines: Lines of text; blank lines and other tags are skipped

    Returns:
        One ring per mask line, in file order
    """
    rings: list[Ring] = []
    for line in lines:
        tag, _, rest = line.strip().partition(" ")
        if not tag:
            continue
        if tag != MASK_TAG:
            logger.debug("Skipping non-mask line: %s", tag)
            continue
        rings.append(parse_ring(rest))
    return rings


def format_ring(ring: Ring) -> str:
    """Format a ring as a ``mask`` line."""
    return " ".join([MASK_TAG, *(str(point) for point in ring)])


def format_mask(rings: Iterable[Ring]) -> str:
    """Format rings as mask lines, one per ring, with a trailing newline."""
    return "".join(format_ring(ring) + "\n" for ring in rings)


def circle_mask(
    radius: int,
    center: Point | None = None,
    polarity: Polarity = Polarity.FILL,
) -> Ring:
    """Build the octagonal footprint mask for a round object.

    Args:
        radius: Size multiplier for the unit octagon
        center: Where to center the mask (origin if None)
        polarity: Polarity of the returned ring

    Returns:
        Ring with the requested polarity
    """
    ring = Ring([point * radius for point in CIRCLE])
    if center is not None:
        ring = ring + center
    if ring.polarity is not polarity:
        ring.reverse()
    return ring

"""Exception hierarchy for walkable."""


class WalkableError(Exception):
    """Base exception for all walkable errors."""

    pass


class SceneError(WalkableError):
    """Errors related to loading or describing a scene."""

    pass


class SceneLoadError(SceneError):
    """Error loading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")


class SceneFormatError(SceneError):
    """Scene file content does not match the expected structure."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid scene format '{path}': {details}")


class MaskFormatError(SceneError):
    """A collision mask line could not be parsed."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid mask '{line}': {reason}")


class GeometryError(WalkableError):
    """Errors in geometric calculations."""

    pass


class MergeError(GeometryError):
    """Polygon merge produced an inconsistent vertex graph.

    This happens when the rings being merged break the merge preconditions,
    e.g. a self-intersecting input ring.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NavigationError(WalkableError):
    """Errors related to pathfinding requests."""

    pass


class WalkableAreaEmptyError(NavigationError):
    """The start point is not inside any walkable region."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"No walkable area contains the start point ({x}, {y})")

"""Scene navigation orchestration.

This module ties scenes, pathfinding and logging together: it builds the
walkable region for a scene once and then answers movement queries against
it, recording statistics as it goes.

Key components:
- SceneNavigator: Main orchestrator class used by the CLI
"""

import time
from pathlib import Path

from walkable.config import WalkableSettings, get_default_settings
from walkable.core.paths import Paths, SearchScratch
from walkable.core.polygon import Polygon
from walkable.domain import Point, Scene
from walkable.exceptions import WalkableAreaEmptyError
from walkable.io import SceneReader
from walkable.utils import NavigationLogger, NavigationStats, configure_logging


class SceneNavigator:
    """Builds pathfinding data for a scene and routes movement through it.

    Example:
        navigator = SceneNavigator(settings)
        navigator.build(scene)
        path = navigator.route(Point(10, 10), Point(90, 40))
    """

    def __init__(self, settings: WalkableSettings | None = None) -> None:
        """Initialize the navigator.

        Args:
            settings: Application settings (defaults if None)
        """
        self.settings = settings or get_default_settings()
        self.logger = configure_logging(
            log_file=self.settings.logging.log_file,
            console_level=self.settings.logging.log_level,
            file_level=self.settings.logging.file_log_level,
            quiet=self.settings.logging.quiet,
        )
        self.navigation_logger = NavigationLogger(self.logger)
        self.paths = Paths(self.settings.pathfinding)
        self.scene: Scene | None = None
        self._scratch = SearchScratch()

    def load(self, scene_path: Path) -> Scene:
        """Read a scene file and build its pathfinding data.

        Raises:
            SceneLoadError: If the file cannot be read
            SceneFormatError: If the file is not a valid scene
            WalkableAreaEmptyError: If the start point is not walkable
        """
        with SceneReader(scene_path) as reader:
            scene = reader.scene(self.settings.pathfinding.mask_convention)
        self.build(scene)
        return scene

    def build(self, scene: Scene) -> None:
        """Build the walkable region and visibility graph for a scene.

        Raises:
            WalkableAreaEmptyError: If the start point is not walkable
        """
        start_time = time.perf_counter()
        self.scene = scene
        self.paths.init(scene.masks(), scene.start)
        duration_ms = (time.perf_counter() - start_time) * 1000

        if self.paths.passable.is_empty():
            self.navigation_logger.log_empty_region(scene.start.to_tuple())
            raise WalkableAreaEmptyError(scene.start.x, scene.start.y)

        self.navigation_logger.log_scene_built(
            object_count=len(scene.objects),
            ring_count=len(self.paths.passable),
            waypoint_count=len(self.paths.waypoints),
            sightline_count=self.paths.sightline_count(),
            duration_ms=duration_ms,
        )

    def route(self, start: Point, target: Point) -> list[Point]:
        """Find the path from one point to another.

        Returns:
            Points in walking order: the first point to walk to comes first
            and the final destination last. Empty if no path exists.
        """
        start_time = time.perf_counter()
        path = self.paths.find(start, target, self._scratch)
        duration_ms = (time.perf_counter() - start_time) * 1000

        self.navigation_logger.log_query(
            start=start.to_tuple(),
            target=target.to_tuple(),
            path_length=len(path),
            duration_ms=duration_ms,
        )
        path.reverse()
        return path

    def walkable_region(self) -> Polygon:
        """Get the walkable region in scene coordinates."""
        return self.paths.passable // self.paths.scale

    @property
    def stats(self) -> NavigationStats:
        return self.navigation_logger.stats

"""Scene reader for loading scene files.

This module provides the SceneReader class for loading JSON scene files
and converting them into domain models.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from walkable.config import MaskConvention
from walkable.domain import Scene
from walkable.exceptions import SceneFormatError, SceneLoadError
from walkable.io.converter import SceneModel, scene_model_to_domain


class SceneReader:
    """Loads scene files and converts them to domain models.

    Example:
        with SceneReader(Path("kitchen.json")) as reader:
            scene = reader.scene()
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the JSON scene file
        """
        self._scene_path = scene_path
        self._model: SceneModel | None = None

    def load(self) -> None:
        """Load and validate the scene file.

        Raises:
            SceneLoadError: If the file is missing or is not valid JSON
            SceneFormatError: If the JSON does not describe a scene
        """
        if not self._scene_path.exists():
            raise SceneLoadError(str(self._scene_path), "file not found")

        try:
            data = json.loads(self._scene_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SceneLoadError(str(self._scene_path), str(e)) from e

        try:
            self._model = SceneModel.model_validate(data)
        except ValidationError as e:
            raise SceneFormatError(str(self._scene_path), str(e)) from e

    @property
    def object_count(self) -> int:
        """Return the number of objects in the scene.

        Raises:
            RuntimeError: If the scene has not been loaded yet
        """
        if self._model is None:
            raise RuntimeError("Scene not loaded. Call load() first.")

        return len(self._model.objects)

    def scene(self, convention: MaskConvention = MaskConvention.BLOCK_POSITIVE) -> Scene:
        """Get the loaded scene as a domain model.

        Args:
            convention: Mask polarity convention used for generated footprints

        Raises:
            RuntimeError: If the scene has not been loaded yet
        """
        if self._model is None:
            raise RuntimeError("Scene not loaded. Call load() first.")

        return scene_model_to_domain(self._model, convention)

    def close(self) -> None:
        """Release the loaded scene."""
        self._model = None

    def __enter__(self) -> "SceneReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

"""Mask writer for saving walkable regions.

This module provides the MaskWriter class for writing polygons in the mask
text format, e.g. to export a computed walkable region for inspection.
"""

from collections.abc import Iterable
from pathlib import Path

from walkable.domain import Ring
from walkable.exceptions import SceneError
from walkable.io.masks import format_mask


class MaskWriter:
    """Writes rings to a mask text file."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    @staticmethod
    def get_export_path(scene_path: Path) -> Path:
        """Get the default export path for a scene file.

        Args:
            scene_path: Path to the scene file

        Returns:
            Path with ``-walkable.txt`` replacing the extension
            (e.g. ``kitchen.json`` becomes ``kitchen-walkable.txt``)
        """
        return scene_path.with_name(f"{scene_path.stem}-walkable.txt")

    def write(self, rings: Iterable[Ring]) -> int:
        """Write rings to the output file, one mask line per ring.

        Args:
            rings: Rings to write

        Returns:
            Number of rings written

        Raises:
            SceneError: If the file cannot be written
        """
        rings = list(rings)
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(format_mask(rings), encoding="utf-8")
        except OSError as e:
            raise SceneError(f"Failed to write '{self._output_path}': {e}") from e
        return len(rings)

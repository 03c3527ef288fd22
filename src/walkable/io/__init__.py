"""Scene I/O layer for walkable.

This module handles reading scene files and reading or writing collision
masks. It provides a clean abstraction layer between file formats and the
domain models.

Key responsibilities:
- Load and validate JSON scene files
- Parse and format the ``mask x,y ...`` text format
- Build octagonal footprints for round objects
- Export walkable regions

Key classes:
- SceneReader: Load scenes
- MaskWriter: Save rings as mask text
"""

from walkable.io.masks import circle_mask, format_mask, parse_mask_lines, parse_ring
from walkable.io.reader import SceneReader
from walkable.io.writer import MaskWriter

__all__ = [
    "MaskWriter",
    "SceneReader",
    "circle_mask",
    "format_mask",
    "parse_mask_lines",
    "parse_ring",
]

"""Command-line interface for walkable.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Path queries with per-segment lengths
- Walkable region and waypoint inspection
- Export of the walkable region as mask text
- Detailed error reporting
"""

from walkable.cli.app import cli, main

__all__ = ["cli", "main"]

"""Utility functions for walkable.

This module provides utility functions including:

- Logging setup and configuration
- Navigation statistics tracking
"""

from walkable.utils.logging import (
    NavigationLogger,
    NavigationStats,
    configure_logging,
)

__all__ = [
    "NavigationLogger",
    "NavigationStats",
    "configure_logging",
]

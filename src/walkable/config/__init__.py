"""Configuration management for walkable.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PathfindingConfig: Supersampling scale and mask polarity convention
- LoggingConfig: Logging settings
- WalkableSettings: Main application settings
"""

from walkable.config.settings import (
    LoggingConfig,
    MaskConvention,
    PathfindingConfig,
    WalkableSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "MaskConvention",
    "PathfindingConfig",
    "WalkableSettings",
    "get_default_settings",
]

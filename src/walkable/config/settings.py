"""Configuration settings for walkable."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class MaskConvention(str, Enum):
    """Which ring polarity of a collision mask blocks movement."""

    BLOCK_POSITIVE = "block_positive"
    ALLOW_POSITIVE = "allow_positive"


class PathfindingConfig(BaseModel):
    """Configuration for building walkable regions and finding paths.

    Masks are multiplied by ``internal_scale`` before they are merged, so that
    intersection vertices and sightline midpoints, which are rounded to
    integers, stay close to their exact positions.
    """

    internal_scale: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Integer supersampling factor applied to masks before merging",
    )
    mask_convention: MaskConvention = Field(
        default=MaskConvention.BLOCK_POSITIVE,
        description="Polarity convention of collision masks",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console log output except errors",
    )


class WalkableSettings(BaseModel):
    """Main application settings."""

    pathfinding: PathfindingConfig = Field(default_factory=PathfindingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> WalkableSettings:
    """Get default application settings."""
    return WalkableSettings()

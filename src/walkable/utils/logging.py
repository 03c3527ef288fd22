"""Logging utilities for walkable."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Name given to handlers installed here, so reconfiguring replaces them.
_HANDLER_NAME = "walkable"


@dataclass
class NavigationStats:
    """Statistics from a navigation session."""

    queries: int = 0
    direct_paths: int = 0
    routed_paths: int = 0
    empty_paths: int = 0
    waypoints_visited: int = 0
    query_times_ms: list[float] = field(default_factory=list)

    @property
    def avg_query_time_ms(self) -> float | None:
        """Average query duration, or None before the first query."""
        if not self.query_times_ms:
            return None
        return sum(self.query_times_ms) / len(self.query_times_ms)

    @property
    def max_query_time_ms(self) -> float | None:
        if not self.query_times_ms:
            return None
        return max(self.query_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("walkable")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class NavigationLogger:
    """Logger for tracking scene builds, queries and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = NavigationStats()

    def log_scene_built(
        self,
        object_count: int,
        ring_count: int,
        waypoint_count: int,
        sightline_count: int,
        duration_ms: float,
    ) -> None:
        """Log a finished walkable region and visibility graph build."""
        self._logger.info(
            "Scene built",
            objects=object_count,
            rings=ring_count,
            waypoints=waypoint_count,
            sightlines=sightline_count,
            duration_ms=round(duration_ms, 2),
        )

    def log_query(
        self,
        start: tuple[int, int],
        target: tuple[int, int],
        path_length: int,
        duration_ms: float,
    ) -> None:
        """Log a completed path query and update statistics."""
        self._logger.debug(
            "Path query",
            start=start,
            target=target,
            points=path_length,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.queries += 1
        self._stats.query_times_ms.append(duration_ms)
        if path_length == 0:
            self._stats.empty_paths += 1
        elif path_length == 1:
            self._stats.direct_paths += 1
        else:
            self._stats.routed_paths += 1
            self._stats.waypoints_visited += path_length - 1

    def log_empty_region(self, start: tuple[int, int]) -> None:
        """Log that the start point lies outside every walkable region."""
        self._logger.warning("No walkable region at start point", start=start)

    @property
    def stats(self) -> NavigationStats:
        """Get current navigation statistics."""
        return self._stats

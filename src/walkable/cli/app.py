"""CLI application entry point for walkable.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from walkable import __version__
from walkable.cli.output import (
    console,
    print_error,
    print_header,
    print_path,
    print_region_summary,
    print_rings,
    print_scene_info,
    print_step,
    print_success,
)
from walkable.config import (
    LoggingConfig,
    MaskConvention,
    PathfindingConfig,
    WalkableSettings,
)
from walkable.core import SceneNavigator
from walkable.domain import Point, Scene
from walkable.exceptions import GeometryError, MaskFormatError, SceneError, WalkableError
from walkable.io import MaskWriter
from walkable.io.masks import parse_point

# Create the Typer app
app = typer.Typer(
    name="walkable",
    help="Compute walkable regions and movement paths around obstacles.",
    add_completion=False,
    no_args_is_help=True,
)

SceneArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to the JSON scene file",
        show_default=False,
    ),
]
ScaleOption = Annotated[
    int,
    typer.Option(
        "--scale",
        "-s",
        help="Internal supersampling factor applied before merging masks",
        min=1,
        max=64,
    ),
]
AllowPositiveOption = Annotated[
    bool,
    typer.Option(
        "--allow-positive",
        help="Treat positive mask rings as walkable instead of blocking",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Walkable[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute walkable regions and movement paths around obstacles."""


def _build_settings(
    scale: int,
    allow_positive: bool,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
) -> WalkableSettings:
    """Create settings from CLI arguments."""
    convention = (
        MaskConvention.ALLOW_POSITIVE if allow_positive else MaskConvention.BLOCK_POSITIVE
    )
    return WalkableSettings(
        pathfinding=PathfindingConfig(
            internal_scale=scale,
            mask_convention=convention,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
            quiet=quiet,
        ),
    )


def _parse_point_option(value: str, name: str) -> Point:
    """Parse an ``X,Y`` option value, exiting with an error if malformed."""
    try:
        return parse_point(value)
    except MaskFormatError:
        print_error(f"Invalid {name} point: {value}", details="Expected X,Y with integers")
        raise typer.Exit(code=1) from None


def _load_scene(navigator: SceneNavigator, scene_path: Path, quiet: bool) -> Scene:
    """Load a scene and build its pathfinding data, exiting on failure."""
    if not scene_path.is_file():
        print_error(
            f"Scene file not found: {scene_path}",
            details=f"The file '{scene_path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_step("Loading scene")

    try:
        scene = navigator.load(scene_path)
    except SceneError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except GeometryError as e:
        print_error(str(e), details="A collision mask ring may be self-intersecting.")
        raise typer.Exit(code=1) from None
    except WalkableError as e:
        print_error(str(e), details="Check that the start point lies in walkable space.")
        raise typer.Exit(code=1) from None

    if not quiet:
        print_scene_info(str(scene_path), len(scene.objects), scene.start)
        print_region_summary(
            rings=len(navigator.paths.passable),
            waypoints=len(navigator.paths.waypoints),
            sightlines=navigator.paths.sightline_count(),
        )
    return scene


@app.command()
def route(
    scene_path: SceneArgument,
    target: Annotated[
        str,
        typer.Option(
            "--to",
            "-t",
            help="Target point as X,Y",
            show_default=False,
        ),
    ],
    start: Annotated[
        str | None,
        typer.Option(
            "--from",
            "-f",
            help="Start point as X,Y (default: the scene's start point)",
        ),
    ] = None,
    scale: ScaleOption = 4,
    allow_positive: AllowPositiveOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Find the path an avatar walks between two points of a scene.

    Example:
        walkable route kitchen.json --from 40,80 --to 300,120
    """
    target_point = _parse_point_option(target, "target")
    start_point = _parse_point_option(start, "start") if start is not None else None

    if not quiet:
        print_header(__version__)

    settings = _build_settings(scale, allow_positive, log_file, log_level, quiet)
    navigator = SceneNavigator(settings)
    scene = _load_scene(navigator, scene_path, quiet)
    if start_point is None:
        start_point = scene.start

    path = navigator.route(start_point, target_point)

    if quiet:
        for point in path:
            console.print(str(point))
        return

    print_step(f"Path {start_point} → {target_point}")
    print_path(start_point, path)
    if not path:
        raise typer.Exit(code=2)


@app.command()
def inspect(
    scene_path: SceneArgument,
    scale: ScaleOption = 4,
    allow_positive: AllowPositiveOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Show the walkable region and visibility graph of a scene."""
    print_header(__version__)

    settings = _build_settings(scale, allow_positive, log_file, log_level, quiet=False)
    navigator = SceneNavigator(settings)
    _load_scene(navigator, scene_path, quiet=False)

    print_step("Walkable region")
    print_rings(navigator.walkable_region().rings)

    corners = navigator.paths.corners()
    print_step("Waypoints")
    if corners:
        console.print("  " + "  ".join(str(point) for point in corners))
    else:
        console.print("  none (region is convex)")


@app.command()
def export(
    scene_path: SceneArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-walkable.txt)",
        ),
    ] = None,
    scale: ScaleOption = 4,
    allow_positive: AllowPositiveOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Write the walkable region of a scene in mask text format."""
    if not quiet:
        print_header(__version__)

    settings = _build_settings(scale, allow_positive, log_file, log_level, quiet)
    navigator = SceneNavigator(settings)
    _load_scene(navigator, scene_path, quiet)

    output_path = output if output is not None else MaskWriter.get_export_path(scene_path)
    try:
        count = MaskWriter(output_path).write(navigator.walkable_region())
    except SceneError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not quiet:
        print_success(f"Wrote {count} rings to {output_path}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from walkable.domain import Point, Ring

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Walkable[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(scene_path: str, object_count: int, start: Point) -> None:
    """Print scene information.

    Args:
        scene_path: Path to the scene file
        object_count: Number of placed objects
        start: Avatar starting position
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(scene_path)
    console.print(line)
    console.print(f"  {object_count} objects {SYM_DOT} start at {start}")


def print_region_summary(rings: int, waypoints: int, sightlines: int) -> None:
    """Print the size of the walkable region and its visibility graph."""
    console.print(
        f"  [green]{rings}[/green] rings {SYM_DOT} "
        f"[green]{waypoints}[/green] waypoints {SYM_DOT} "
        f"[green]{sightlines}[/green] sightlines"
    )


def print_rings(rings: list[Ring]) -> None:
    """Print a table of rings with their polarity and area."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Polarity")
    table.add_column("Vertices", justify="right")
    table.add_column("Area", justify="right")
    for index, ring in enumerate(rings):
        style = "red" if ring.is_hole else "green"
        table.add_row(
            str(index),
            f"[{style}]{ring.polarity.name.lower()}[/{style}]",
            str(len(ring)),
            f"{ring.area():,.1f}",
        )
    console.print(table)


def print_path(start: Point, path: list[Point]) -> None:
    """Print a walking path as a numbered table with segment lengths.

    Args:
        start: Starting position
        path: Points in walking order
    """
    if not path:
        console.print(f"  [yellow]No path[/yellow] {SYM_DOT} target unreachable")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Step", justify="right")
    table.add_column("Point")
    table.add_column("Segment", justify="right")

    total = 0.0
    previous = start
    for step, point in enumerate(path, start=1):
        segment = previous.distance(point)
        total += segment
        table.add_row(str(step), str(point), f"{segment:.1f}")
        previous = point
    console.print(table)
    console.print(f"  {len(path) - 1} waypoints {SYM_DOT} {total:.1f} total length")


def print_success(message: str) -> None:
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

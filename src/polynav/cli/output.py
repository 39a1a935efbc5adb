"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polynav.domain import Point, Triangle

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_point(point: Point) -> str:
    """Format a point as "(x, y)" with compact numbers."""
    return f"({point.x:g}, {point.y:g})"


def format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]polynav[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon_info(polygon_path: str, vertex_count: int, winding: str, area: float) -> None:
    """Print polygon information.

    Args:
        polygon_path: Path to the polygon file
        vertex_count: Number of boundary vertices
        winding: Winding direction name
        area: Unsigned polygon area
    """
    # Text keeps square brackets in paths from being read as markup
    line = Text("  ")
    line.append(polygon_path)
    console.print(line)
    console.print(f"  {vertex_count:,} vertices {SYM_DOT} {winding} {SYM_DOT} area {area:g}")


def print_vertex_table(
    points: Sequence[Point], angles: Sequence[float], concave: Sequence[bool]
) -> None:
    """Print a table of vertices with their interior angles.

    Args:
        points: Polygon vertices
        angles: Interior angle at each vertex in degrees
        concave: Concavity flag for each vertex
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Vertex")
    table.add_column("Angle", justify="right")
    table.add_column("Concave")

    for index, (point, angle, is_concave) in enumerate(zip(points, angles, concave)):
        table.add_row(
            str(index),
            format_point(point),
            f"{angle:.2f}",
            f"[yellow]{SYM_OK}[/yellow]" if is_concave else "",
        )

    console.print(table)


def print_triangles(triangles: Sequence[Triangle]) -> None:
    """Print one line per triangle."""
    for index, (a, b, c) in enumerate(triangles):
        console.print(
            f"  {index:>3}  {format_point(a)} {SYM_DOT} {format_point(b)} {SYM_DOT} {format_point(c)}"
        )


def print_path(path: Sequence[Point], distance: float) -> None:
    """Print a found route.

    Args:
        path: Points from start to goal
        distance: Total route length
    """
    console.print(f"  {len(path)} waypoints {SYM_DOT} length {distance:.4f}")
    console.print("  " + " → ".join(format_point(p) for p in path))


def print_success(message: str, output_path: str | None = None, elapsed_s: float | None = None) -> None:
    """Print success message with optional output file and timing.

    Args:
        message: Summary message
        output_path: Path of the written result file
        elapsed_s: Processing time in seconds
    """
    suffix = f" in {format_time(elapsed_s)}" if elapsed_s is not None else ""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]{suffix}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

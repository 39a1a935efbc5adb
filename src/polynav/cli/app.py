"""CLI application entry point for polynav.

This module provides the main CLI interface using Typer.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import structlog
import typer

from polynav import __version__
from polynav.cli.output import (
    SYM_DOT,
    console,
    print_error,
    print_header,
    print_path,
    print_polygon_info,
    print_step,
    print_success,
    print_triangles,
    print_vertex_table,
)
from polynav.config import (
    CandidateMode,
    LoggingConfig,
    PlanningConfig,
    PolynavSettings,
    TriangulationConfig,
    VisibilityConfig,
)
from polynav.core import (
    NavigationPlanner,
    interior_angle,
    is_vertex_concave,
    triangulation_edges,
)
from polynav.domain import Point
from polynav.exceptions import (
    PolygonFormatError,
    PolygonLoadError,
    PolygonSaveError,
    PolynavError,
)
from polynav.io import PolygonReader, PolygonWriter
from polynav.io.converter import point_from_string
from polynav.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="polynav",
    help="Analyze, triangulate and route through simple polygons.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by every command."""

    logging: LoggingConfig
    logger: structlog.stdlib.BoundLogger
    quiet: bool


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]polynav[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Analyze, triangulate and route through simple polygons.

    Polygon files are JSON: {"polygon": [[x, y], ...], "start": [x, y], "goal": [x, y]}.
    """
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    logging_config = LoggingConfig(log_file=log_file, log_level=log_level.upper())
    logger = configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(logging=logging_config, logger=logger, quiet=quiet)


def _load(polygon_file: Path, quiet: bool) -> PolygonReader:
    """Load a polygon file, exiting with code 1 when it is unusable."""
    if not polygon_file.exists():
        print_error(
            f"Input file not found: {polygon_file}",
            details=f"The file '{polygon_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not polygon_file.is_file():
        print_error(
            f"Input path is not a file: {polygon_file}",
            details="Please provide a path to a JSON polygon file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_step("Loading polygon")

    reader = PolygonReader(polygon_file)
    reader.load()
    polygon = reader.polygon
    polygon.validate()

    if not quiet:
        print_polygon_info(
            polygon_path=str(polygon_file),
            vertex_count=len(polygon),
            winding=polygon.winding.name.lower().replace("_", "-"),
            area=polygon.area,
        )
    return reader


def _handle_errors(error: Exception) -> NoReturn:
    """Report an error raised by a command and exit with code 1."""
    if isinstance(error, PolygonLoadError):
        print_error(f"Could not load polygon: {error.reason}")
    elif isinstance(error, PolygonFormatError):
        print_error(f"Invalid polygon file: {error.details}")
    elif isinstance(error, PolygonSaveError):
        print_error(f"Could not save results: {error.reason}")
    elif isinstance(error, PolynavError):
        print_error(str(error))
    else:
        print_error(f"Unexpected error: {error}")
    raise typer.Exit(code=1)


@app.command()
def analyze(
    ctx: typer.Context,
    polygon_file: Annotated[
        Path,
        typer.Argument(help="Path to JSON polygon file", show_default=False),
    ],
) -> None:
    """Show winding, area and the interior angle of every vertex.

    Concave (reflex) vertices are marked; these are the corners a shortest
    route can bend around.
    """
    state: CliState = ctx.obj
    if not state.quiet:
        print_header(__version__)

    try:
        polygon = _load(polygon_file, state.quiet).polygon

        angles = [interior_angle(polygon, i) for i in range(len(polygon))]
        concave = [is_vertex_concave(polygon, i) for i in range(len(polygon))]

        if not state.quiet:
            print_step("Vertices")
        print_vertex_table(polygon.points, angles, concave)
        console.print(f"\n  [bold]{sum(concave)}[/bold] concave vertices")

    except typer.Exit:
        raise
    except Exception as e:
        _handle_errors(e)


@app.command()
def triangulate(
    ctx: typer.Context,
    polygon_file: Annotated[
        Path,
        typer.Argument(help="Path to JSON polygon file", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write triangles as JSON to this path",
        ),
    ] = None,
    check_ears: Annotated[
        bool,
        typer.Option(
            "--check-ears/--no-check-ears",
            help="Only clip convex ears that contain no other vertex",
        ),
    ] = True,
) -> None:
    """Split a polygon into len(polygon) - 2 triangles."""
    state: CliState = ctx.obj
    if not state.quiet:
        print_header(__version__)

    settings = PolynavSettings(
        triangulation=TriangulationConfig(check_ears=check_ears),
        logging=state.logging,
    )

    try:
        polygon = _load(polygon_file, state.quiet).polygon

        if not state.quiet:
            print_step("Triangulating")
        start_time = time.time()
        triangles = NavigationPlanner(settings, logger=state.logger).triangulate(polygon)
        elapsed = time.time() - start_time

        if not state.quiet:
            print_triangles(triangles)
            diagonals = triangulation_edges(triangles, shared_only=True)
            console.print(f"  {len(triangles)} triangles {SYM_DOT} {len(diagonals)} diagonals")

        if output is not None:
            PolygonWriter(output).write_triangulation(polygon, triangles)

        if not state.quiet:
            print_success(
                "Triangulated",
                output_path=str(output) if output is not None else None,
                elapsed_s=elapsed,
            )

    except typer.Exit:
        raise
    except Exception as e:
        _handle_errors(e)


def _parse_point_option(value: str | None, name: str) -> Point | None:
    if value is None:
        return None
    try:
        return point_from_string(value)
    except ValueError:
        print_error(f"Invalid {name}: {value}", details="Expected two numbers as 'x,y'")
        raise typer.Exit(code=1) from None


@app.command()
def route(
    ctx: typer.Context,
    polygon_file: Annotated[
        Path,
        typer.Argument(help="Path to JSON polygon file", show_default=False),
    ],
    start: Annotated[
        str | None,
        typer.Option("--start", "-s", help="Start point as 'x,y' (default: from file)"),
    ] = None,
    goal: Annotated[
        str | None,
        typer.Option("--goal", "-g", help="Goal point as 'x,y' (default: from file)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the plan as JSON to this path",
        ),
    ] = None,
    all_vertices: Annotated[
        bool,
        typer.Option(
            "--all-vertices",
            help="Use every vertex as a waypoint candidate, not only concave ones",
        ),
    ] = False,
    allow_outside: Annotated[
        bool,
        typer.Option(
            "--allow-outside",
            help="Do not reject start/goal points outside the polygon",
        ),
    ] = False,
) -> None:
    """Find the shortest route between two points inside a polygon."""
    state: CliState = ctx.obj
    if not state.quiet:
        print_header(__version__)

    start_point = _parse_point_option(start, "start")
    goal_point = _parse_point_option(goal, "goal")

    settings = PolynavSettings(
        visibility=VisibilityConfig(
            candidate_mode=CandidateMode.ALL_VERTICES if all_vertices else CandidateMode.CONCAVE
        ),
        planning=PlanningConfig(require_inside_endpoints=not allow_outside),
        logging=state.logging,
    )

    try:
        reader = _load(polygon_file, state.quiet)
        polygon = reader.polygon
        start_point = start_point if start_point is not None else reader.start
        goal_point = goal_point if goal_point is not None else reader.goal

        if start_point is None or goal_point is None:
            print_error(
                "Route needs a start and a goal",
                details="Pass --start and --goal, or add 'start' and 'goal' to the file.",
            )
            raise typer.Exit(code=1)

        if not state.quiet:
            print_step("Planning route")
        plan = NavigationPlanner(settings, logger=state.logger).plan(
            polygon, start_point, goal_point
        )

        if output is not None:
            PolygonWriter(output).write_plan(polygon, plan)

        if not plan.found:
            print_error(
                "No route found",
                details=f"{len(plan.visibility_pairs)} visible pairs between "
                f"{len(plan.candidates)} candidates do not connect start and goal.",
            )
            raise typer.Exit(code=1)

        print_path(plan.path, plan.distance)
        if not state.quiet:
            print_success(
                "Route found",
                output_path=str(output) if output is not None else None,
                elapsed_s=plan.stats.duration_seconds,
            )

    except typer.Exit:
        raise
    except Exception as e:
        _handle_errors(e)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

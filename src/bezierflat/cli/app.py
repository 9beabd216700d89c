"""CLI application entry point for bezierflat.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from bezierflat import __version__
from bezierflat.cli.output import (
    console,
    print_config,
    print_error,
    print_header,
    print_points,
    print_step,
    print_summary,
)
from bezierflat.config import BezierFlatSettings, LoggingConfig, ToleranceConfig
from bezierflat.core import CurveFlattener, max_deviation
from bezierflat.domain import CubicSegment
from bezierflat.exceptions import BezierFlatError, NonFiniteCoordinateError
from bezierflat.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="bezierflat",
    help="Flatten a cubic Bezier segment into a polyline within a distance tolerance.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bezierflat[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def flatten(
    coordinates: Annotated[
        list[float],
        typer.Argument(
            help="Eight control point coordinates: X0 Y0 X1 Y1 X2 Y2 X3 Y3 "
            "(put -- before them if any is negative)",
            show_default=False,
        ),
    ],
    tolerance: Annotated[
        float | None,
        typer.Option(
            "--tolerance",
            "-t",
            help="Maximum distance between polyline and curve",
        ),
    ] = None,
    scale: Annotated[
        float | None,
        typer.Option(
            "--scale",
            "-s",
            help="Approximation scale; sets tolerance to 0.5/scale when --tolerance is absent",
        ),
    ] = None,
    angle_tolerance: Annotated[
        float,
        typer.Option(
            "--angle-tolerance",
            "-a",
            help="Cumulative tangent change allowed per piece, in radians (0 = off)",
            min=0.0,
        ),
    ] = 0.0,
    cusp_limit: Annotated[
        float,
        typer.Option(
            "--cusp-limit",
            "-c",
            help="Turning angle marking a cusp, in radians (0 = off)",
            min=0.0,
        ),
    ] = 0.0,
    recursion_limit: Annotated[
        int,
        typer.Option(
            "--recursion-limit",
            "-r",
            help="Maximum subdivision depth",
            min=0,
            max=64,
        ),
    ] = 32,
    collinearity_epsilon: Annotated[
        float,
        typer.Option(
            "--collinearity-epsilon",
            help="Cross-product area treated as collinear",
            min=0.0,
        ),
    ] = 1e-30,
    angle_epsilon: Annotated[
        float,
        typer.Option(
            "--angle-epsilon",
            help="Angle tolerances below this disable angle checks",
            min=0.0,
        ),
    ] = 0.01,
    with_endpoints: Annotated[
        bool,
        typer.Option(
            "--with-endpoints",
            "-e",
            help="Include p0 and p3 in the output",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the points as JSON",
        ),
    ] = False,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
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
    """Flatten a cubic Bezier segment given by four control points.

    Prints the interior points of the polyline approximating the curve, ordered
    from the start point to the end point.

    Example:
        bezierflat 0 0 3 4 7 4 10 0 --tolerance 0.1
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if len(coordinates) != 8:
        print_error(
            f"Expected 8 coordinates, got {len(coordinates)}",
            details="Give X0 Y0 X1 Y1 X2 Y2 X3 Y3.",
        )
        raise typer.Exit(code=1)

    if tolerance is None and scale is None:
        print_error(
            "A distance tolerance is required",
            details="Pass --tolerance, or --scale to derive one.",
        )
        raise typer.Exit(code=1)

    overrides = {
        "angle_tolerance": angle_tolerance,
        "cusp_limit": cusp_limit,
        "recursion_limit": recursion_limit,
        "collinearity_epsilon": collinearity_epsilon,
        "angle_tolerance_epsilon": angle_epsilon,
    }

    try:
        if tolerance is not None:
            config = ToleranceConfig(distance_tolerance=tolerance, **overrides)
        else:
            config = ToleranceConfig.from_approximation_scale(scale, **overrides)
    except ValidationError as e:
        print_error("Invalid tolerance settings", details=str(e))
        raise typer.Exit(code=1)
    except BezierFlatError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    settings = BezierFlatSettings(
        tolerance=config,
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet or as_json,
    )

    segment = CubicSegment.from_coordinates(*coordinates)
    flattener = CurveFlattener(config, logger=logger)

    try:
        result = flattener.flatten_with_stats(segment)
    except NonFiniteCoordinateError as e:
        print_error(str(e), details="All coordinates must be finite numbers.")
        raise typer.Exit(code=1)

    points = result.points
    if with_endpoints:
        points = [segment.p0, *points, segment.p3]

    if as_json:
        typer.echo(json.dumps([p.to_tuple() for p in points]))
        return

    if quiet:
        for p in points:
            typer.echo(f"{p.x} {p.y}")
        return

    print_header(__version__)
    print_config(config)
    print_step("Polyline")
    if with_endpoints:
        print_points(result.points, start=segment.p0, end=segment.p3)
    else:
        print_points(result.points)

    deviation = max_deviation(segment, [segment.p0, *result.points, segment.p3])
    print_summary(result, deviation, config.distance_tolerance)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

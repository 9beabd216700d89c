"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table

from bezierflat.config import ToleranceConfig
from bezierflat.domain import FlattenResult, Point

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
    console.print(f"\n[bold]bezierflat[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_config(config: ToleranceConfig) -> None:
    """Print the tolerances in effect.

    Args:
        config: Tolerance configuration used for flattening
    """
    console.print(f"  distance tolerance {config.distance_tolerance:g}")
    angle = f"{config.angle_tolerance:g} rad" if config.angle_refinement_enabled else "off"
    cusp = f"{config.cusp_limit:g} rad" if config.cusp_detection_enabled else "off"
    console.print(
        f"  angle {angle} {SYM_DOT} cusp {cusp} {SYM_DOT} "
        f"recursion limit {config.recursion_limit}"
    )


def print_points(points: list[Point], start: Point | None = None, end: Point | None = None) -> None:
    """Print the polyline as a table.

    Args:
        points: Interior points
        start: Segment start point, shown as the first row when given
        end: Segment end point, shown as the last row when given
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right", style="dim")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("")

    rows: list[tuple[Point, str]] = []
    if start is not None:
        rows.append((start, "start"))
    rows.extend((p, "") for p in points)
    if end is not None:
        rows.append((end, "end"))

    for index, (point, label) in enumerate(rows):
        table.add_row(str(index), f"{point.x:.6f}", f"{point.y:.6f}", label)

    console.print(table)


def print_summary(result: FlattenResult, deviation: float, tolerance: float) -> None:
    """Print flattening summary.

    Args:
        result: Flattening result with statistics
        deviation: Measured maximum distance between curve and polyline
        tolerance: Requested distance tolerance
    """
    console.print(f"\n[bold green]{SYM_OK} Flattened[/bold green]")
    console.print(
        f"  {len(result.points)} interior points {SYM_DOT} depth {result.max_depth} "
        f"{SYM_DOT} {result.cusp_vertices} cusp vertices"
    )

    deviation_style = "green" if deviation <= tolerance else "yellow"
    console.print(
        f"  max deviation [{deviation_style}]{deviation:.6g}[/{deviation_style}] "
        f"(tolerance {tolerance:g})"
    )

    if result.limit_reached:
        console.print(
            f"  [yellow]recursion limit reached {result.limit_hits} times[/yellow]"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

"""Adaptive flattening of cubic Bezier segments.

The flattener subdivides a segment with de Casteljau's algorithm until every
piece passes the flatness test (and, when enabled, the angle test), emitting
one point per resolved piece. The result holds interior points only; the
caller supplies the segment's endpoints when building the full polyline.
"""

from collections.abc import Iterable

import structlog

from bezierflat.config import ToleranceConfig
from bezierflat.core._subdivision import SubdivisionState, subdivide
from bezierflat.domain import CubicSegment, FlattenResult, Point
from bezierflat.exceptions import NonFiniteCoordinateError
from bezierflat.utils.logging import FlattenLogger, FlattenStats, get_logger

logger = get_logger(__name__)

# Emitted points this close to p0 or p3 are treated as the endpoint itself.
# Absolute, so the check does not widen with the magnitude of the coordinates.
ENDPOINT_EPSILON = 1e-9


def _validate_finite(segment: CubicSegment) -> None:
    for name, p in zip(("p0", "p1", "p2", "p3"), segment.control_points()):
        if not p.is_finite():
            raise NonFiniteCoordinateError(name, p.x, p.y)


def _is_close(a: Point, b: Point) -> bool:
    return abs(a.x - b.x) <= ENDPOINT_EPSILON and abs(a.y - b.y) <= ENDPOINT_EPSILON


def flatten_segment(segment: CubicSegment, config: ToleranceConfig) -> FlattenResult:
    """Flatten a cubic segment and report statistics about the subdivision.

    Args:
        segment: The cubic segment to flatten
        config: Tolerances governing termination

    Returns:
        FlattenResult with interior points ordered from p0 to p3

    Raises:
        NonFiniteCoordinateError: If any control point is NaN or infinite
    """
    _validate_finite(segment)

    state = SubdivisionState()
    subdivide(segment.p0, segment.p1, segment.p2, segment.p3, config, state)

    # Degenerate segments can emit points sitting on an endpoint
    points = [
        p for p in state.points if not (_is_close(p, segment.p0) or _is_close(p, segment.p3))
    ]

    result = FlattenResult(
        points=points,
        max_depth=state.max_depth,
        limit_hits=state.limit_hits,
        cusp_vertices=state.cusp_vertices,
        dropped_endpoints=len(state.points) - len(points),
    )

    if result.limit_reached:
        logger.debug(
            "Recursion limit reached",
            recursion_limit=config.recursion_limit,
            limit_hits=result.limit_hits,
        )

    return result


def flatten(p0: Point, p1: Point, p2: Point, p3: Point, config: ToleranceConfig) -> list[Point]:
    """Flatten the cubic Bezier segment (p0, p1, p2, p3) into interior points.

    The returned list never contains p0 or p3. Prefixing it with p0 and
    suffixing it with p3 gives a polyline that stays within
    config.distance_tolerance of the curve wherever the flatness test
    terminated the subdivision.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        config: Tolerances governing termination

    Returns:
        Interior points ordered from p0 to p3

    Raises:
        NonFiniteCoordinateError: If any control point is NaN or infinite
    """
    return flatten_segment(CubicSegment(p0, p1, p2, p3), config).points


class CurveFlattener:
    """Flattens cubic segments with a fixed tolerance configuration.

    Keeps aggregate statistics across calls, so an instance should not be
    shared between threads. The module-level flatten() and flatten_segment()
    functions carry no state.
    """

    def __init__(
        self,
        config: ToleranceConfig,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.config = config
        self._log = FlattenLogger(logger)

    def flatten_with_stats(self, segment: CubicSegment) -> FlattenResult:
        """Flatten a segment, returning points and subdivision statistics."""
        try:
            result = flatten_segment(segment, self.config)
        except NonFiniteCoordinateError as e:
            self._log.log_segment_rejected(segment, e)
            raise

        self._log.log_segment_flattened(segment, result)
        return result

    def flatten(self, segment: CubicSegment) -> list[Point]:
        """Flatten a segment into interior points, endpoints excluded."""
        return self.flatten_with_stats(segment).points

    def polyline(self, segment: CubicSegment) -> list[Point]:
        """Flatten a segment into a full polyline from p0 to p3."""
        return [segment.p0, *self.flatten(segment), segment.p3]

    def flatten_path(self, segments: Iterable[CubicSegment]) -> list[Point]:
        """Flatten a chain of segments into a single polyline.

        Where a segment starts at the previous segment's end point, the shared
        point appears once.

        Args:
            segments: Segments in drawing order

        Returns:
            Combined polyline, empty if no segments were given
        """
        polyline: list[Point] = []
        for segment in segments:
            if not polyline or polyline[-1] != segment.p0:
                polyline.append(segment.p0)
            polyline.extend(self.flatten(segment))
            polyline.append(segment.p3)
        return polyline

    @property
    def stats(self) -> FlattenStats:
        """Aggregate statistics over every call made through this flattener."""
        return self._log.stats

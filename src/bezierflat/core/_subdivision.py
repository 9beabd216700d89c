"""Internal recursive subdivision for cubic Bezier flattening.

This is an internal module containing the recursion behind
bezierflat.core.flattener. Not intended for public use.
"""

import math
from dataclasses import dataclass, field

from bezierflat.config import ToleranceConfig
from bezierflat.domain import Point


@dataclass
class SubdivisionState:
    """Mutable accumulator for a single flattening call.

    One instance is created per call and never shared.
    """

    points: list[Point] = field(default_factory=list)
    max_depth: int = 0
    limit_hits: int = 0
    cusp_vertices: int = 0


def _turn_angle(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> float:
    """Direction change between a->b and b->c, folded into [0, pi]."""
    da = abs(math.atan2(cy - by, cx - bx) - math.atan2(by - ay, bx - ax))
    if da >= math.pi:
        da = 2 * math.pi - da
    return da


def subdivide(
    a: Point,
    b: Point,
    c: Point,
    d: Point,
    config: ToleranceConfig,
    state: SubdivisionState,
    level: int = 0,
) -> None:
    """Recursively flatten the cubic (a, b, c, d), appending interior points to state.

    Args:
        a: Start point of the (sub)segment
        b: First control point
        c: Second control point
        d: End point of the (sub)segment
        config: Tolerances governing termination
        state: Per-call accumulator receiving points and statistics
        level: Current subdivision depth
    """
    if level > config.recursion_limit:
        state.limit_hits += 1
        return

    if level > state.max_depth:
        state.max_depth = level

    # Mid-points of the control polygon edges
    x12 = (a.x + b.x) / 2
    y12 = (a.y + b.y) / 2
    x23 = (b.x + c.x) / 2
    y23 = (b.y + c.y) / 2
    x34 = (c.x + d.x) / 2
    y34 = (c.y + d.y) / 2
    x123 = (x12 + x23) / 2
    y123 = (y12 + y23) / 2
    x234 = (x23 + x34) / 2
    y234 = (y23 + y34) / 2

    # Point on the curve at t=0.5
    mid = Point((x123 + x234) / 2, (y123 + y234) / 2)

    # The first call always subdivides
    if level > 0 and _try_terminate(a, b, c, d, mid, config, state):
        return

    subdivide(a, Point(x12, y12), Point(x123, y123), mid, config, state, level + 1)
    subdivide(mid, Point(x234, y234), Point(x34, y34), d, config, state, level + 1)


def _try_terminate(
    a: Point,
    b: Point,
    c: Point,
    d: Point,
    mid: Point,
    config: ToleranceConfig,
    state: SubdivisionState,
) -> bool:
    """Run the termination cascade, emitting points when a criterion is met.

    Returns:
        True if the segment was resolved and must not be subdivided further
    """
    dx = d.x - a.x
    dy = d.y - a.y

    # Twice the triangle areas of (b, d) and (c, d) against the chord
    d2 = abs((b.x - d.x) * dy - (b.y - d.y) * dx)
    d3 = abs((c.x - d.x) * dy - (c.y - d.y) * dx)

    eps = config.collinearity_epsilon
    tolerance_square = config.distance_tolerance_square
    chord_square = dx * dx + dy * dy
    emit = state.points.append

    if d2 > eps and d3 > eps:
        # Regular case
        if (d2 + d3) * (d2 + d3) > tolerance_square * chord_square:
            return False

        if not config.angle_refinement_enabled:
            emit(mid)
            return True

        a23 = math.atan2(c.y - b.y, c.x - b.x)
        da1 = abs(a23 - math.atan2(b.y - a.y, b.x - a.x))
        da2 = abs(math.atan2(d.y - c.y, d.x - c.x) - a23)
        if da1 >= math.pi:
            da1 = 2 * math.pi - da1
        if da2 >= math.pi:
            da2 = 2 * math.pi - da2

        if da1 + da2 < config.angle_tolerance:
            emit(mid)
            return True

        if config.cusp_detection_enabled:
            if da1 > config.cusp_limit:
                emit(b)
                state.cusp_vertices += 1
                return True
            if da2 > config.cusp_limit:
                emit(c)
                state.cusp_vertices += 1
                return True
        return False

    if d2 > eps:
        # a, c, d collinear; b is the salient point
        if d2 * d2 > tolerance_square * chord_square:
            return False

        if not config.angle_refinement_enabled:
            emit(mid)
            return True

        da1 = _turn_angle(a.x, a.y, b.x, b.y, c.x, c.y)
        if da1 < config.angle_tolerance:
            emit(b)
            emit(c)
            return True

        if config.cusp_detection_enabled and da1 > config.cusp_limit:
            emit(b)
            state.cusp_vertices += 1
            return True
        return False

    if d3 > eps:
        # a, b, d collinear; c is the salient point
        if d3 * d3 > tolerance_square * chord_square:
            return False

        if not config.angle_refinement_enabled:
            emit(mid)
            return True

        da1 = _turn_angle(b.x, b.y, c.x, c.y, d.x, d.y)
        if da1 < config.angle_tolerance:
            emit(b)
            emit(c)
            return True

        if config.cusp_detection_enabled and da1 > config.cusp_limit:
            emit(c)
            state.cusp_vertices += 1
            return True
        return False

    # Fully collinear: compare the curve midpoint with the chord midpoint
    ox = mid.x - (a.x + d.x) / 2
    oy = mid.y - (a.y + d.y) / 2
    if ox * ox + oy * oy <= tolerance_square:
        emit(mid)
        return True
    return False

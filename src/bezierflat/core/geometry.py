"""Geometric operations on curves and their flattened polylines.

This module provides the mathematical utilities a drawing host applies to a
flattened curve:
- Analytic curve evaluation and dense sampling
- Nearest point on a line segment
- Distance from a point to a polyline
- Maximum deviation between a curve and its polyline
- Hit testing against a polyline

All functions are pure and stateless.
"""

import math

from bezierflat.domain import CubicSegment, Point
from bezierflat.exceptions import DegenerateSegmentError


def evaluate_cubic(segment: CubicSegment, t: float) -> Point:
    """Evaluate a cubic Bezier segment at parameter t.

    Args:
        segment: The cubic segment
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve

    Examples:
        >>> seg = CubicSegment.from_coordinates(0, 0, 3, 4, 7, 4, 10, 0)
        >>> evaluate_cubic(seg, 0.5)
        Point(x=5.0, y=3.0)
    """
    return segment.point_at(t)


def sample_cubic(segment: CubicSegment, count: int) -> list[Point]:
    """Sample a segment at evenly spaced parameter values, endpoints included.

    Args:
        segment: The cubic segment
        count: Number of samples, at least 2

    Returns:
        List of count points from p0 to p3

    Raises:
        ValueError: If count is less than 2
    """
    if count < 2:
        raise ValueError(f"Expected at least 2 samples, got {count}")

    return [segment.point_at(i / (count - 1)) for i in range(count)]


def nearest_point_on_segment(point: Point, start: Point, end: Point) -> tuple[Point, float]:
    """Closest point to `point` on the polyline edge from start to end.

    Returns:
        Tuple of (foot, distance). For a zero-length edge the foot is start.

    Examples:
        >>> nearest_point_on_segment(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        (Point(x=1.0, y=0.0), 1.0)
    """
    ex = end.x - start.x
    ey = end.y - start.y
    edge_square = ex * ex + ey * ey
    if edge_square < 1e-20:
        return start, point.distance_to(start)

    # Edge parameter of the perpendicular foot, clamped onto the edge
    u = ((point.x - start.x) * ex + (point.y - start.y) * ey) / edge_square
    u = min(max(u, 0.0), 1.0)

    foot = Point(start.x + u * ex, start.y + u * ey)
    return foot, point.distance_to(foot)


def distance_to_polyline(point: Point, polyline: list[Point]) -> float:
    """Distance from a point to the closest segment of a polyline.

    Args:
        point: The point to measure from
        polyline: Ordered polyline vertices

    Returns:
        Smallest distance to any polyline segment (or to the single vertex)

    Raises:
        DegenerateSegmentError: If the polyline is empty
    """
    if not polyline:
        raise DegenerateSegmentError("Cannot measure distance to an empty polyline")

    if len(polyline) == 1:
        return point.distance_to(polyline[0])

    best = math.inf
    for start, end in zip(polyline, polyline[1:]):
        _, distance = nearest_point_on_segment(point, start, end)
        if distance < best:
            best = distance
    return best


def max_deviation(segment: CubicSegment, polyline: list[Point], samples: int = 256) -> float:
    """Measure how far a polyline strays from the curve it approximates.

    The curve is sampled densely and each sample's distance to the polyline is
    taken; the result is the largest of those distances.

    Args:
        segment: The analytic curve
        polyline: Full polyline including both endpoints
        samples: Number of curve samples

    Returns:
        Maximum sampled distance between curve and polyline
    """
    return max(distance_to_polyline(p, polyline) for p in sample_cubic(segment, samples))


def hit_test(point: Point, polyline: list[Point], radius: float) -> bool:
    """Check whether a point lies within radius of a polyline."""
    if not polyline:
        return False
    return distance_to_polyline(point, polyline) <= radius

"""Core geometric types for curve representation.

This module defines the fundamental geometric types used throughout bezierflat:
- Point: A 2D coordinate
- CubicSegment: A cubic Bezier segment given by four control points
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))

    def midpoint(self, other: "Point") -> "Point":
        """Return the point halfway between this point and another."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        """Check that neither coordinate is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True, slots=True)
class CubicSegment:
    """A cubic Bezier segment.

    p0 and p3 are the endpoints the curve passes through; p1 and p2 are the
    control points shaping the tangents at those endpoints.

    Attributes:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @classmethod
    def from_coordinates(
        cls,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
    ) -> "CubicSegment":
        """Build a segment from eight raw coordinate values."""
        return cls(Point(x0, y0), Point(x1, y1), Point(x2, y2), Point(x3, y3))

    def control_points(self) -> tuple[Point, Point, Point, Point]:
        """Return the four control points in order."""
        return (self.p0, self.p1, self.p2, self.p3)

    def is_finite(self) -> bool:
        """Check that every control point has finite coordinates."""
        return all(p.is_finite() for p in self.control_points())

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t using the Bernstein form.

        Args:
            t: Curve parameter, normally in [0, 1]

        Returns:
            Point on the curve
        """
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3.0 * mt * mt * t
        c = 3.0 * mt * t * t
        d = t * t * t
        return Point(
            a * self.p0.x + b * self.p1.x + c * self.p2.x + d * self.p3.x,
            a * self.p0.y + b * self.p1.y + c * self.p2.y + d * self.p3.y,
        )

    def split(self, t: float = 0.5) -> tuple["CubicSegment", "CubicSegment"]:
        """Split the segment at parameter t using de Casteljau's algorithm.

        Args:
            t: Split parameter in [0, 1]

        Returns:
            Tuple of (left, right) segments meeting at point_at(t)
        """

        def lerp(a: Point, b: Point) -> Point:
            return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)

        # First level
        q0 = lerp(self.p0, self.p1)
        q1 = lerp(self.p1, self.p2)
        q2 = lerp(self.p2, self.p3)

        # Second level
        r0 = lerp(q0, q1)
        r1 = lerp(q1, q2)

        # Point on curve
        s = lerp(r0, r1)

        return (
            CubicSegment(self.p0, q0, r0, s),
            CubicSegment(s, r1, q2, self.p3),
        )

    def reversed(self) -> "CubicSegment":
        """Return the same curve traversed from p3 to p0."""
        return CubicSegment(self.p3, self.p2, self.p1, self.p0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with p0..p3 fields
        """
        return {
            "p0": self.p0.to_dict(),
            "p1": self.p1.to_dict(),
            "p2": self.p2.to_dict(),
            "p3": self.p3.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CubicSegment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with p0..p3 fields

        Returns:
            CubicSegment instance
        """
        return cls(
            p0=Point.from_dict(data["p0"]),
            p1=Point.from_dict(data["p1"]),
            p2=Point.from_dict(data["p2"]),
            p3=Point.from_dict(data["p3"]),
        )

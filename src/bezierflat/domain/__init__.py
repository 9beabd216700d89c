"""Domain models for bezierflat.

This module contains the value types passed into and returned from the
flattener. All models are immutable frozen dataclasses so they can be shared
freely between calls and threads.

Key classes:
- Point: A 2D coordinate
- CubicSegment: Four control points of a cubic Bezier segment
- FlattenResult: Interior points of a flattened segment plus call statistics
"""

from bezierflat.domain.curve import CubicSegment, Point
from bezierflat.domain.result import FlattenResult

__all__: list[str] = [
    "CubicSegment",
    "FlattenResult",
    "Point",
]

"""Core algorithms for bezierflat.

This module contains the core algorithms for:

- Adaptive de Casteljau flattening of cubic Bezier segments
- Geometry on flattened results (deviation, distance, hit testing)

All module-level functions are:
- Stateless (safe to call from several threads)
- Pure (no side effects beyond debug logging)

Key functions:
- flatten: Interior points of a flattened segment
- flatten_segment: Interior points plus subdivision statistics
- evaluate_cubic: Analytic point on a segment
- max_deviation: Largest distance between a curve and its polyline
- hit_test: Check whether a point lies near a polyline

Key classes:
- CurveFlattener: Flattens segments with a fixed configuration and tracks statistics
"""

from bezierflat.core.flattener import CurveFlattener, flatten, flatten_segment
from bezierflat.core.geometry import (
    distance_to_polyline,
    evaluate_cubic,
    hit_test,
    max_deviation,
    nearest_point_on_segment,
    sample_cubic,
)

__all__ = [
    # Flattener
    "CurveFlattener",
    "flatten",
    "flatten_segment",
    # Geometry functions
    "distance_to_polyline",
    "evaluate_cubic",
    "hit_test",
    "max_deviation",
    "nearest_point_on_segment",
    "sample_cubic",
]

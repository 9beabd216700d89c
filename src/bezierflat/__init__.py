"""bezierflat - Adaptive flattening of cubic Bezier curves.

bezierflat turns a cubic Bezier segment into a polyline that stays within a
caller-specified distance of the true curve, using de Casteljau subdivision
with flatness, angle and cusp criteria.

Example:
    >>> from bezierflat import ToleranceConfig, flatten
    >>> from bezierflat.domain import Point
    >>> config = ToleranceConfig(distance_tolerance=0.25)
    >>> points = flatten(Point(0, 0), Point(3, 4), Point(7, 4), Point(10, 0), config)

The returned points are interior samples only; prepend p0 and append p3 to
obtain the full polyline, or use CurveFlattener.polyline().
"""

import logging

from bezierflat.config import ToleranceConfig
from bezierflat.core import CurveFlattener, flatten, flatten_segment

# Library modules only log; applications decide where events go
logging.getLogger("bezierflat").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CurveFlattener",
    "ToleranceConfig",
    "__version__",
    "flatten",
    "flatten_segment",
]

"""Flattening result type."""

from dataclasses import dataclass, field
from typing import Any

from bezierflat.domain.curve import Point


@dataclass(frozen=True)
class FlattenResult:
    """Interior points of a flattened segment and statistics about the call.

    Attributes:
        points: Interior points ordered from p0 to p3, endpoints excluded
        max_depth: Deepest subdivision level that ran
        limit_hits: Number of calls cut off by the recursion limit
        cusp_vertices: Number of control points emitted as cusp vertices
        dropped_endpoints: Emitted points discarded for coinciding with p0 or p3
    """

    points: list[Point] = field(default_factory=list)
    max_depth: int = 0
    limit_hits: int = 0
    cusp_vertices: int = 0
    dropped_endpoints: int = 0

    @property
    def limit_reached(self) -> bool:
        """Whether any branch of the subdivision was cut off by the recursion limit."""
        return self.limit_hits > 0

    def __len__(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "points": [p.to_dict() for p in self.points],
            "max_depth": self.max_depth,
            "limit_hits": self.limit_hits,
            "cusp_vertices": self.cusp_vertices,
            "dropped_endpoints": self.dropped_endpoints,
        }

"""Exception hierarchy for bezierflat."""


class BezierFlatError(Exception):
    """Base exception for all bezierflat errors."""

    pass


class GeometryError(BezierFlatError):
    """Errors in geometric input or calculations."""

    pass


class NonFiniteCoordinateError(GeometryError):
    """A control point has a NaN or infinite coordinate."""

    def __init__(self, name: str, x: float, y: float) -> None:
        self.name = name
        self.x = x
        self.y = y
        super().__init__(f"Control point {name} has non-finite coordinates ({x}, {y})")


class DegenerateSegmentError(GeometryError):
    """Geometry too degenerate for the requested operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigurationError(BezierFlatError):
    """Invalid tolerance or application configuration."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")

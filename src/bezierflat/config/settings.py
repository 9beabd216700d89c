"""Configuration settings for bezierflat."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bezierflat.exceptions import ConfigurationError

# Collinearity threshold below which a cross-product area counts as zero
DEFAULT_COLLINEARITY_EPSILON = 1e-30

# Angle tolerances below this value disable angle-based refinement
DEFAULT_ANGLE_TOLERANCE_EPSILON = 0.01

DEFAULT_RECURSION_LIMIT = 32


class ToleranceConfig(BaseModel):
    """Geometric tolerances governing a flattening call.

    The distance tolerance is a linear distance in the curve's own units and
    has no default: callers must decide how accurate the polyline needs to be.
    It is not a squared distance; the flatness tests square it themselves
    (distance_tolerance_square) before comparing it with squared areas.
    Angle-based refinement is off unless angle_tolerance is raised above
    angle_tolerance_epsilon, and cusp detection is off while cusp_limit is 0.
    """

    model_config = ConfigDict(frozen=True)

    distance_tolerance: float = Field(
        gt=0.0,
        allow_inf_nan=False,
        description="Maximum distance between the polyline and the true curve (linear, not squared)",
    )
    collinearity_epsilon: float = Field(
        default=DEFAULT_COLLINEARITY_EPSILON,
        ge=0.0,
        allow_inf_nan=False,
        description="Cross-product area below which control points count as collinear",
    )
    angle_tolerance_epsilon: float = Field(
        default=DEFAULT_ANGLE_TOLERANCE_EPSILON,
        ge=0.0,
        allow_inf_nan=False,
        description="Angle tolerances below this value disable angle checks",
    )
    angle_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        allow_inf_nan=False,
        description="Cumulative tangent direction change allowed per segment (radians)",
    )
    cusp_limit: float = Field(
        default=0.0,
        ge=0.0,
        allow_inf_nan=False,
        description="Local turning angle marking a cusp (radians, 0 = disabled)",
    )
    recursion_limit: int = Field(
        default=DEFAULT_RECURSION_LIMIT,
        ge=0,
        le=64,
        description="Maximum subdivision depth",
    )

    @property
    def distance_tolerance_square(self) -> float:
        """Squared distance tolerance, compared against squared flatness measures."""
        return self.distance_tolerance * self.distance_tolerance

    @property
    def angle_refinement_enabled(self) -> bool:
        """Whether the angle criteria take part in termination."""
        return self.angle_tolerance >= self.angle_tolerance_epsilon

    @property
    def cusp_detection_enabled(self) -> bool:
        """Whether sharp turns are emitted as cusp vertices."""
        return self.cusp_limit != 0.0

    @classmethod
    def from_approximation_scale(cls, scale: float, **overrides: Any) -> "ToleranceConfig":
        """Build a config from a device approximation scale.

        A scale of 1.0 corresponds to half a unit of tolerance; larger scales
        (zoomed in, high DPI) tighten the tolerance proportionally.

        Args:
            scale: Ratio of device units to curve units, must be positive
            **overrides: Any other ToleranceConfig field

        Returns:
            ToleranceConfig with distance_tolerance = 0.5 / scale

        Raises:
            ConfigurationError: If the scale or an override is invalid
        """
        if not scale > 0.0:
            raise ConfigurationError(f"Approximation scale must be positive, got {scale}")
        try:
            return cls(distance_tolerance=0.5 / scale, **overrides)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BezierFlatSettings(BaseModel):
    """Main application settings."""

    tolerance: ToleranceConfig | None = Field(default=None)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BezierFlatSettings:
    """Get default application settings."""
    return BezierFlatSettings()

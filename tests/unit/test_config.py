"""Tests for tolerance and application configuration."""

import math

import pytest
from pydantic import ValidationError

from bezierflat.config import BezierFlatSettings, ToleranceConfig, get_default_settings
from bezierflat.exceptions import ConfigurationError


class TestToleranceConfig:
    """Tests for ToleranceConfig validation and derived values."""

    def test_distance_tolerance_required(self):
        """No default distance tolerance exists."""
        with pytest.raises(ValidationError):
            ToleranceConfig()  # type: ignore[call-arg]

    @pytest.mark.parametrize("value", [0.0, -1.0, math.inf, math.nan])
    def test_distance_tolerance_must_be_positive_finite(self, value):
        """Zero, negative and non-finite tolerances are rejected."""
        with pytest.raises(ValidationError):
            ToleranceConfig(distance_tolerance=value)

    def test_defaults(self):
        """Angle and cusp refinement are off by default."""
        config = ToleranceConfig(distance_tolerance=0.25)
        assert config.collinearity_epsilon == 1e-30
        assert config.angle_tolerance_epsilon == 0.01
        assert config.angle_tolerance == 0.0
        assert config.cusp_limit == 0.0
        assert config.recursion_limit == 32
        assert not config.angle_refinement_enabled
        assert not config.cusp_detection_enabled

    def test_distance_tolerance_square(self):
        """The squared tolerance is derived from the linear one."""
        assert ToleranceConfig(distance_tolerance=0.5).distance_tolerance_square == 0.25

    def test_angle_refinement_threshold(self):
        """Angle refinement turns on at the angle epsilon."""
        assert not ToleranceConfig(distance_tolerance=1, angle_tolerance=0.005).angle_refinement_enabled
        assert ToleranceConfig(distance_tolerance=1, angle_tolerance=0.01).angle_refinement_enabled

    def test_cusp_detection(self):
        """A nonzero cusp limit enables cusp detection."""
        assert ToleranceConfig(distance_tolerance=1, cusp_limit=0.1).cusp_detection_enabled

    @pytest.mark.parametrize("limit", [-1, 65])
    def test_recursion_limit_bounds(self, limit):
        """Recursion limit must stay within 0..64."""
        with pytest.raises(ValidationError):
            ToleranceConfig(distance_tolerance=1, recursion_limit=limit)

    def test_negative_angles_rejected(self):
        """Angles cannot be negative."""
        with pytest.raises(ValidationError):
            ToleranceConfig(distance_tolerance=1, angle_tolerance=-0.1)
        with pytest.raises(ValidationError):
            ToleranceConfig(distance_tolerance=1, cusp_limit=-0.1)

    def test_frozen(self):
        """Configs cannot be mutated after construction."""
        config = ToleranceConfig(distance_tolerance=1)
        with pytest.raises(ValidationError):
            config.distance_tolerance = 2.0  # type: ignore[misc]


class TestApproximationScale:
    """Tests for ToleranceConfig.from_approximation_scale."""

    def test_scale_sets_tolerance(self):
        """Tolerance is half a unit divided by the scale."""
        config = ToleranceConfig.from_approximation_scale(2.0)
        assert config.distance_tolerance == 0.25

    def test_overrides_applied(self):
        """Other fields pass through."""
        config = ToleranceConfig.from_approximation_scale(1.0, angle_tolerance=0.2, recursion_limit=10)
        assert config.angle_tolerance == 0.2
        assert config.recursion_limit == 10

    @pytest.mark.parametrize("scale", [0.0, -2.0, math.nan])
    def test_invalid_scale(self, scale):
        """Non-positive scales are rejected."""
        with pytest.raises(ConfigurationError, match="scale"):
            ToleranceConfig.from_approximation_scale(scale)

    def test_invalid_override(self):
        """Invalid overrides surface as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ToleranceConfig.from_approximation_scale(1.0, recursion_limit=-5)


class TestSettings:
    """Tests for application settings."""

    def test_default_settings(self):
        """Defaults carry no tolerance and warning-level logging."""
        settings = get_default_settings()
        assert isinstance(settings, BezierFlatSettings)
        assert settings.tolerance is None
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.log_file is None

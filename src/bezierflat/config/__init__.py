"""Configuration management for bezierflat.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or constructed directly.

Key classes:
- ToleranceConfig: Geometric tolerances for a flattening call
- LoggingConfig: Logging settings
- BezierFlatSettings: Main application settings
"""

from bezierflat.config.settings import (
    BezierFlatSettings,
    LoggingConfig,
    ToleranceConfig,
    get_default_settings,
)

__all__ = [
    "BezierFlatSettings",
    "LoggingConfig",
    "ToleranceConfig",
    "get_default_settings",
]

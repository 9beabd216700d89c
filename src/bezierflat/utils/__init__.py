"""Utility functions for bezierflat.

This module provides utility functions including:

- Logging setup and configuration
- Flattening statistics tracking
"""

from bezierflat.utils.logging import (
    FlattenLogger,
    FlattenStats,
    configure_logging,
)

__all__ = [
    "FlattenLogger",
    "FlattenStats",
    "configure_logging",
]

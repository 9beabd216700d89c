"""Logging utilities for bezierflat."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog

from bezierflat.domain import CubicSegment, FlattenResult


@dataclass
class FlattenStats:
    """Aggregate statistics over many flattening calls."""

    segments_flattened: int = 0
    points_emitted: int = 0
    limit_exhaustions: int = 0
    cusp_vertices: int = 0
    rejected_segments: int = 0
    deepest_level: int = 0

    @property
    def avg_points_per_segment(self) -> float:
        """Average number of interior points per flattened segment."""
        if self.segments_flattened == 0:
            return 0.0
        return self.points_emitted / self.segments_flattened


# Handlers added to the root logger by the last configure_logging() call
_installed_handlers: list[logging.Handler] = []


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger of the same name.

    Events always go through stdlib logging, so nothing is printed until an
    application attaches handlers (see configure_logging).
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so it never mixes with command output on
    stdout.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace rather than stack handlers when called more than once
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bezierflat")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class FlattenLogger:
    """Logger for tracking flattening calls and aggregate statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger("bezierflat")
        self._stats = FlattenStats()

    def log_segment_flattened(self, segment: CubicSegment, result: FlattenResult) -> None:
        """Log a completed flattening call."""
        self._logger.debug(
            "Segment flattened",
            start=segment.p0.to_tuple(),
            end=segment.p3.to_tuple(),
            points=len(result.points),
            max_depth=result.max_depth,
            cusp_vertices=result.cusp_vertices,
            limit_hits=result.limit_hits,
        )
        self._stats.segments_flattened += 1
        self._stats.points_emitted += len(result.points)
        self._stats.cusp_vertices += result.cusp_vertices
        self._stats.deepest_level = max(self._stats.deepest_level, result.max_depth)

        if result.limit_reached:
            self._stats.limit_exhaustions += 1

    def log_segment_rejected(self, segment: CubicSegment, error: Exception) -> None:
        """Log a segment rejected before flattening."""
        self._logger.warning(
            "Segment rejected",
            error=str(error),
            error_type=type(error).__name__,
            segment=segment.to_dict(),
        )
        self._stats.rejected_segments += 1

    @property
    def stats(self) -> FlattenStats:
        """Get current flattening statistics."""
        return self._stats

"""Logging utilities for Fourierpath."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class AnalysisStats:
    """Statistics from an analysis run."""

    segment_count: int = 0
    coefficient_count: int = 0
    function_evaluations: int = 0
    depth_exhausted: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

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

    console_handler = logging.StreamHandler()
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

    logger = structlog.get_logger("fourierpath")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class AnalysisLogger:
    """Logger for tracking pipeline progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = AnalysisStats()

    def log_path_loaded(self, source: str, command_count: int, segment_count: int) -> None:
        """Log a successfully built path function."""
        self._logger.info(
            "Path loaded",
            source=source,
            commands=command_count,
            segments=segment_count,
        )
        self._stats.segment_count = segment_count

    def log_validation_error(self, source: str, error: Exception) -> None:
        """Log a rejected command sequence."""
        self._logger.error(
            "Path validation failed",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((source, str(error)))

    def log_series_start(self, coefficient_count: int, max_workers: int | None) -> None:
        """Log start of coefficient computation."""
        self._logger.debug(
            "Computing Fourier series",
            coefficients=coefficient_count,
            max_workers=max_workers,
        )

    def log_series_complete(
        self,
        coefficient_count: int,
        function_evaluations: int,
        depth_exhausted: int,
        duration_ms: float,
    ) -> None:
        """Log a finished coefficient computation."""
        self._logger.info(
            "Fourier series computed",
            coefficients=coefficient_count,
            evaluations=function_evaluations,
            depth_exhausted=depth_exhausted,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.coefficient_count = coefficient_count
        self._stats.function_evaluations += function_evaluations
        self._stats.depth_exhausted += depth_exhausted
        if depth_exhausted:
            self._logger.warning(
                "Some intervals did not converge before the depth limit",
                intervals=depth_exhausted,
            )

    @property
    def stats(self) -> AnalysisStats:
        """Get current run statistics."""
        return self._stats

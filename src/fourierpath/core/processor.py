"""Pipeline orchestration from SVG file to Fourier series.

This module coordinates the full workflow: reading path commands, building
the path function and computing its Fourier coefficients, with optional
process-based parallelism for the per-coefficient loop.

Key components:
- SeriesResult: Path function, series and run statistics of one run
- SeriesProcessor: Main orchestrator class
"""

import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fourierpath.config import FourierPathSettings
from fourierpath.core.curve import PathFunction, build_path_from_raw
from fourierpath.core.fourier import PeriodicFunction, analyze
from fourierpath.core.quadrature import IntegrationStats
from fourierpath.domain import FourierSeriesDescriptor, RawCommand, coerce_odd
from fourierpath.exceptions import PathError
from fourierpath.io import SvgReader
from fourierpath.utils import AnalysisLogger, AnalysisStats, configure_logging


@dataclass(frozen=True)
class SeriesResult:
    """Outcome of processing one SVG file."""

    path_function: PathFunction
    series: FourierSeriesDescriptor
    stats: AnalysisStats


class SeriesProcessor:
    """Orchestrates SVG-to-Fourier-series processing.

    Manages the complete workflow:
    1. Load the SVG file and collect raw path commands
    2. Validate the commands and build the path function
    3. Compute the Fourier coefficients, sequentially or in worker processes

    Example:
        settings = FourierPathSettings()
        processor = SeriesProcessor(settings)
        result = processor.process(Path("heart.svg"), n=51)
        print(result.series.evaluate(0.25))
    """

    def __init__(self, config: FourierPathSettings) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings holding quadrature, series and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )
        self.analysis_logger = AnalysisLogger(self.logger)

    @property
    def stats(self) -> AnalysisStats:
        """Statistics accumulated by this processor."""
        return self.analysis_logger.stats

    def build_path(
        self, commands: Iterable[RawCommand], source: str = "<commands>"
    ) -> PathFunction:
        """Validate raw commands and build the path function.

        Args:
            commands: Raw commands in drawing order
            source: Label used in log records

        Returns:
            Path function over t in [0, 1]

        Raises:
            UnrecognizedCommandError: For an unsupported command kind
            InvalidParameterError: For a wrong parameter count
        """
        commands = list(commands)
        try:
            path_function = build_path_from_raw(commands)
        except PathError as e:
            self.analysis_logger.log_validation_error(source, e)
            raise

        self.analysis_logger.log_path_loaded(
            source=source,
            command_count=len(commands),
            segment_count=path_function.segment_count,
        )
        return path_function

    def load_path(self, svg_path: Path) -> PathFunction:
        """Read an SVG file and build the path function of all its paths.

        Args:
            svg_path: Path to the SVG file

        Returns:
            Path function over t in [0, 1]

        Raises:
            FileNotFoundError: If the file does not exist
            SvgLoadError: If the document cannot be parsed
            PathError: If path data is malformed or unsupported
        """
        with SvgReader(svg_path) as reader:
            try:
                commands = reader.read_commands()
            except PathError as e:
                self.analysis_logger.log_validation_error(str(svg_path), e)
                raise

        return self.build_path(commands, source=str(svg_path))

    def analyze_path(
        self,
        path_function: PeriodicFunction,
        n: int | None = None,
    ) -> FourierSeriesDescriptor:
        """Compute the Fourier series of a path function.

        Even counts are rounded up to the next odd number before analysis.

        Args:
            path_function: Periodic function of t in [0, 1]
            n: Coefficient count (config default if None)

        Returns:
            Descriptor with the computed coefficients
        """
        count = coerce_odd(n) if n is not None else self.config.series.odd_count()
        max_workers = self.config.series.max_workers
        quadrature = self.config.quadrature

        self.analysis_logger.log_series_start(count, max_workers)
        start_time = time.time()

        integration_stats = IntegrationStats()
        series = analyze(
            path_function,
            count,
            tolerance=quadrature.tolerance,
            max_depth=quadrature.max_depth,
            max_workers=max_workers,
            stats=integration_stats,
        )

        self.analysis_logger.log_series_complete(
            coefficient_count=len(series),
            function_evaluations=integration_stats.function_evaluations,
            depth_exhausted=integration_stats.depth_exhausted,
            duration_ms=(time.time() - start_time) * 1000,
        )
        return series

    def process(self, svg_path: Path, n: int | None = None) -> SeriesResult:
        """Run the full pipeline on one SVG file.

        Args:
            svg_path: Path to the SVG file
            n: Coefficient count (config default if None)

        Returns:
            SeriesResult with path function, series and statistics
        """
        self.stats.start_time = time.time()
        self.logger.info("Starting analysis", input=str(svg_path))

        path_function = self.load_path(svg_path)
        series = self.analyze_path(path_function, n)

        self.stats.end_time = time.time()
        self.logger.info(
            "Analysis complete",
            segments=self.stats.segment_count,
            coefficients=self.stats.coefficient_count,
            duration_seconds=round(self.stats.duration_seconds, 3),
        )
        return SeriesResult(path_function=path_function, series=series, stats=self.stats)

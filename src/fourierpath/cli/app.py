"""CLI application entry point for fourierpath.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from fourierpath import __version__
from fourierpath.cli.output import (
    console,
    print_bounds,
    print_error,
    print_header,
    print_path_info,
    print_point,
    print_step,
    print_success,
    print_terms_table,
)
from fourierpath.config import (
    FourierPathSettings,
    LoggingConfig,
    PreviewConfig,
    QuadratureConfig,
    SeriesConfig,
)
from fourierpath.core import SeriesProcessor, sample_curve
from fourierpath.domain import coerce_odd
from fourierpath.exceptions import FourierPathError, PathError, SvgLoadError
from fourierpath.io import SvgReader

# Create the Typer app
app = typer.Typer(
    name="fourierpath",
    help="Approximate SVG paths with Fourier series.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Fourierpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Approximate SVG paths with Fourier series."""


def _check_input(svg_file: Path) -> None:
    if not svg_file.exists():
        print_error(
            f"Input file not found: {svg_file}",
            details=f"The file '{svg_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not svg_file.is_file():
        print_error(
            f"Input path is not a file: {svg_file}",
            details="Please provide a path to an SVG file.",
        )
        raise typer.Exit(code=1)


def _count_paths(svg_file: Path) -> int:
    with SvgReader(svg_file) as reader:
        return reader.path_count


@app.command()
def preview(
    svg_file: Annotated[
        Path,
        typer.Argument(help="Path to input SVG file", show_default=False),
    ],
    t: Annotated[
        float,
        typer.Option("--at", "-t", help="Curve parameter to evaluate", min=0.0, max=1.0),
    ] = 0.0,
    samples: Annotated[
        int,
        typer.Option(
            "--samples",
            "-s",
            help="Number of steps used to trace the curve",
            min=1,
            max=100_000,
        ),
    ] = 1000,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Trace an SVG path directly, without Fourier analysis."""
    _check_input(svg_file)

    settings = FourierPathSettings(
        preview=PreviewConfig(sample_count=samples),
        logging=LoggingConfig(quiet=quiet),
    )

    try:
        if not quiet:
            print_header(__version__)
            print_step("Loading path")

        processor = SeriesProcessor(settings)
        path_function = processor.load_path(svg_file)

        if not quiet:
            print_path_info(str(svg_file), _count_paths(svg_file), path_function.segment_count)
            print_step("Preview")
            print_bounds(sample_curve(path_function, settings.preview.sample_count))

        print_point("Path", t, path_function.evaluate(t))

    except SvgLoadError as e:
        print_error(f"Could not load SVG: {e.reason}")
        raise typer.Exit(code=1)
    except PathError as e:
        print_error("SVG path is invalid or not supported", details=str(e))
        raise typer.Exit(code=1)
    except FourierPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def analyze(
    svg_file: Annotated[
        Path,
        typer.Argument(help="Path to input SVG file", show_default=False),
    ],
    coefficients: Annotated[
        int,
        typer.Option(
            "--coefficients",
            "-n",
            help="Number of coefficients; even values are rounded up to odd (1-501)",
            min=1,
            max=501,
        ),
    ] = 11,
    t: Annotated[
        float,
        typer.Option("--at", "-t", help="Curve parameter to evaluate", min=0.0, max=1.0),
    ] = 0.0,
    terms: Annotated[
        int,
        typer.Option("--terms", "-k", help="Number of terms to list, in frequency order", min=0),
    ] = 10,
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", help="Adaptive quadrature tolerance"),
    ] = 1e-5,
    max_depth: Annotated[
        int,
        typer.Option("--max-depth", help="Adaptive quadrature depth budget", min=0, max=32),
    ] = 16,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker processes (default: sequential)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Compute the Fourier series of an SVG path.

    Example:
        fourierpath analyze heart.svg -n 51 --at 0.25
    """
    _check_input(svg_file)

    if not 0 < tolerance <= 1:
        print_error(f"Invalid tolerance: {tolerance}", details="Tolerance must be in (0, 1].")
        raise typer.Exit(code=1)

    count = coerce_odd(coefficients)

    settings = FourierPathSettings(
        quadrature=QuadratureConfig(tolerance=tolerance, max_depth=max_depth),
        series=SeriesConfig(coefficient_count=count, max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
            quiet=quiet,
        ),
    )

    try:
        if not quiet:
            print_header(__version__)
            print_step("Loading path")

        start = time.time()
        processor = SeriesProcessor(settings)
        path_function = processor.load_path(svg_file)

        if not quiet:
            print_path_info(str(svg_file), _count_paths(svg_file), path_function.segment_count)
            note = f" (rounded up from {coefficients})" if count != coefficients else ""
            print_step(f"Computing {count} coefficients{note}")

        series = processor.analyze_path(path_function, count)

        if not quiet:
            if terms:
                print_terms_table(series.terms_by_frequency(), terms)
            print_success(
                total_time_s=time.time() - start,
                coefficients=len(series),
                evaluations=processor.stats.function_evaluations,
            )
            print_step("Evaluation")
            print_point("Path", t, path_function.evaluate(t))

        print_point("Series", t, series.evaluate(t))

    except SvgLoadError as e:
        print_error(f"Could not load SVG: {e.reason}")
        raise typer.Exit(code=1)
    except PathError as e:
        print_error("SVG path is invalid or not supported", details=str(e))
        raise typer.Exit(code=1)
    except FourierPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

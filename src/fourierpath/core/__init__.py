"""Core numerical algorithms for fourierpath.

This module contains the core algorithms for:

- Numerical integration (fixed Gauss-Legendre rule, adaptive refinement)
- Curve construction (command validation, cubic Bezier evaluation)
- Fourier analysis (coefficients of a periodic complex function)
- Pipeline orchestration (SVG file to Fourier series)

All numeric functions are:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- gauss_legendre: 16-point Gauss-Legendre rule on [a, b]
- adaptive_integrate: Depth-bounded adaptive quadrature
- build_path_function: Build a PathFunction from drawing commands
- translate_commands: Validate raw path commands
- analyze: Compute Fourier series coefficients

Key classes:
- PathFunction: A path as a function of t in [0, 1]
- SeriesProcessor: Orchestrates loading, validation and analysis
"""

from fourierpath.core.curve import (
    PathFunction,
    build_path_from_raw,
    build_path_function,
    cubic_bezier,
    sample_curve,
    translate_command,
    translate_commands,
)
from fourierpath.core.fourier import analyze, coefficient
from fourierpath.core.processor import SeriesProcessor, SeriesResult
from fourierpath.core.quadrature import (
    IntegrationStats,
    adaptive_integrate,
    gauss_legendre,
)

__all__ = [
    # Quadrature
    "IntegrationStats",
    # Curve classes
    "PathFunction",
    # Processor classes
    "SeriesProcessor",
    "SeriesResult",
    "adaptive_integrate",
    # Fourier functions
    "analyze",
    "build_path_from_raw",
    "build_path_function",
    "coefficient",
    "cubic_bezier",
    "gauss_legendre",
    "sample_curve",
    "translate_command",
    "translate_commands",
]

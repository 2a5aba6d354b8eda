"""Fourier analysis of periodic complex-valued functions.

Coefficients of the continuous-time Fourier series over one period [0, 1]

    c_k = integral_0^1 f(t) * exp(-2*pi*i*k*t) dt

are computed independently with adaptive Gauss-Legendre quadrature, for k in
the symmetric range [-(n-1)/2, (n-1)/2].
"""

import cmath
import math
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from fourierpath.core.quadrature import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_TOLERANCE,
    IntegrationStats,
    adaptive_integrate,
)
from fourierpath.domain import FourierSeriesDescriptor

PeriodicFunction = Callable[[float], complex]


def _harmonic(func: PeriodicFunction, k: int, t: float) -> complex:
    return func(t) * cmath.exp(complex(0.0, -2.0 * math.pi * k * t))


def coefficient(
    func: PeriodicFunction,
    k: int,
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
    stats: IntegrationStats | None = None,
) -> complex:
    """Compute the Fourier coefficient of frequency k.

    Top-level so it can be submitted to a ProcessPoolExecutor; ``func`` must
    then be picklable (a PathFunction is).

    Args:
        func: Periodic function of t in [0, 1]
        k: Signed frequency
        tolerance: Adaptive quadrature tolerance
        max_depth: Adaptive quadrature depth budget
        stats: Optional collector for evaluation counters

    Returns:
        Complex coefficient c_k
    """
    return complex(
        adaptive_integrate(
            partial(_harmonic, func, k),
            0.0,
            1.0,
            tolerance=tolerance,
            max_depth=max_depth,
            stats=stats,
        )
    )


def _coefficient_with_stats(
    func: PeriodicFunction,
    k: int,
    tolerance: float,
    max_depth: int,
) -> tuple[complex, IntegrationStats]:
    # Counters travel back with the coefficient
    stats = IntegrationStats()
    c = coefficient(func, k, tolerance=tolerance, max_depth=max_depth, stats=stats)
    return c, stats


def analyze(
    func: PeriodicFunction,
    n: int,
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_workers: int | None = None,
    stats: IntegrationStats | None = None,
) -> FourierSeriesDescriptor:
    """Compute an n-term Fourier series approximation of func.

    The count must be odd; callers holding a user-supplied count should pass
    it through ``coerce_odd`` first.

    Args:
        func: Periodic complex-valued function of t in [0, 1]
        n: Odd number of coefficients
        tolerance: Adaptive quadrature tolerance
        max_depth: Adaptive quadrature depth budget
        max_workers: Worker processes for the per-coefficient loop
            (None or 1 = sequential)
        stats: Optional collector for evaluation counters; worker counters
            are merged into it

    Returns:
        Descriptor with coefficients ordered by increasing k

    Raises:
        AssertionError: If n is even or not positive
    """
    assert n > 0 and n % 2 == 1, f"coefficient count must be odd and positive, got {n}"
    half_range = (n - 1) // 2
    frequencies = range(-half_range, half_range + 1)

    if max_workers is None or max_workers <= 1:
        coefficients = [
            coefficient(func, k, tolerance=tolerance, max_depth=max_depth, stats=stats)
            for k in frequencies
        ]
    else:
        compute = partial(_coefficient_with_stats, func, tolerance=tolerance, max_depth=max_depth)
        coefficients = []
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            # map() yields results in submission order
            for c, worker_stats in executor.map(compute, frequencies):
                coefficients.append(c)
                if stats is not None:
                    stats.merge(worker_stats)

    return FourierSeriesDescriptor(coefficients=tuple(coefficients))

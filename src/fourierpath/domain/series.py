"""Truncated Fourier series of a periodic complex-valued function.

The descriptor stores coefficients c_k for k in [-(n-1)/2, (n-1)/2] ordered
by increasing k, and evaluates

    f(t) = sum_k c_k * exp(2*pi*i*k*t)
"""

import cmath
import math
from collections.abc import Iterator
from dataclasses import dataclass


def coerce_odd(n: int) -> int:
    """Round an even coefficient count up to the next odd number.

    Examples:
        >>> coerce_odd(10)
        11
        >>> coerce_odd(11)
        11
    """
    return n + 1 if n % 2 == 0 else n


@dataclass(frozen=True, slots=True)
class FourierSeriesDescriptor:
    """Coefficients of a truncated Fourier series.

    Storage index 0 holds the coefficient of the most negative frequency
    ``-(n-1)/2``; the middle element is the constant term.

    Attributes:
        coefficients: Complex coefficients, odd count, ordered by increasing k
    """

    coefficients: tuple[complex, ...]

    def __post_init__(self) -> None:
        assert len(self.coefficients) % 2 == 1, "coefficient count must be odd"

    def __len__(self) -> int:
        return len(self.coefficients)

    def __call__(self, t: float) -> complex:
        return self.evaluate(t)

    @property
    def half_range(self) -> int:
        """Largest frequency magnitude in the series."""
        return (len(self.coefficients) - 1) // 2

    def frequencies(self) -> range:
        """Signed frequencies in storage order."""
        return range(-self.half_range, self.half_range + 1)

    def coefficient(self, k: int) -> complex:
        """Return the coefficient of frequency k.

        Raises:
            IndexError: If |k| exceeds the half range
        """
        if abs(k) > self.half_range:
            raise IndexError(f"frequency {k} outside [-{self.half_range}, {self.half_range}]")
        return self.coefficients[k + self.half_range]

    def indexed_terms(self) -> Iterator[tuple[int, complex]]:
        """Yield (k, c_k) pairs in storage order."""
        return zip(self.frequencies(), self.coefficients, strict=True)

    def evaluate(self, t: float) -> complex:
        """Evaluate the series at parameter t.

        Args:
            t: Curve parameter, normally in [0, 1]

        Returns:
            Reconstructed point in the complex plane
        """
        return sum(
            (c * cmath.exp(complex(0.0, 2.0 * math.pi * k * t)) for k, c in self.indexed_terms()),
            0j,
        )

    def terms_by_frequency(self) -> list[tuple[int, complex]]:
        """Return (k, c_k) pairs ordered by ascending |k|.

        At equal magnitude the positive frequency comes before the negative
        one, giving 0, 1, -1, 2, -2, ...
        """
        return sorted(self.indexed_terms(), key=lambda term: (abs(term[0]), term[0] < 0))

    def partial_sums(self, t: float) -> list[complex]:
        """Running sums of the rotating terms at t, in frequency order.

        Each element is the tip of one epicycle arm; the last element equals
        ``evaluate(t)`` up to rounding.
        """
        sums: list[complex] = []
        total = 0j
        for k, c in self.terms_by_frequency():
            total += c * cmath.exp(complex(0.0, 2.0 * math.pi * k * t))
            sums.append(total)
        return sums

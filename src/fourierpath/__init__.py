"""Fourierpath - Approximate SVG paths with Fourier series.

Fourierpath turns a closed path made of cubic Bezier segments into a
continuous function of a parameter t in [0, 1] and reduces that function to a
truncated set of complex Fourier coefficients.

Example:
    $ fourierpath analyze heart.svg -n 51

This prints the coefficients ordered by frequency and the reconstructed point
at the requested parameter.
"""

__version__ = "0.1.0"
__author__ = "Fourierpath contributors"

__all__ = ["__author__", "__version__"]

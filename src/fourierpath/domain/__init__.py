"""Domain models for fourierpath.

This module contains the data flowing through the pipeline:

- Immutable (frozen dataclasses)
- Picklable for use in worker processes
- Independent of the SVG document format

Key classes:
- RawCommand: Path-data command as written, before validation
- MoveTo / CubicCurveTo: Validated drawing commands
- FourierSeriesDescriptor: Truncated series with evaluation and term access
"""

from fourierpath.domain.commands import CubicCurveTo, DrawCommand, MoveTo, RawCommand
from fourierpath.domain.series import FourierSeriesDescriptor, coerce_odd

__all__: list[str] = [
    "CubicCurveTo",
    "DrawCommand",
    "FourierSeriesDescriptor",
    "MoveTo",
    "RawCommand",
    "coerce_odd",
]

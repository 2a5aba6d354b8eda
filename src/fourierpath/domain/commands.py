"""Path command types.

This module defines the command types that flow from an SVG document into the
curve builder:
- RawCommand: A path-data command exactly as written (letter plus numbers)
- MoveTo: Moves the cursor without drawing
- CubicCurveTo: One cubic Bezier segment starting at the cursor
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawCommand:
    """A single command from SVG path data, before validation.

    A command letter may carry several parameter groups, e.g. ``C`` with 12
    numbers encodes two consecutive cubic segments.

    Attributes:
        letter: SVG command letter, case preserved
        params: Numeric parameters following the letter
    """

    letter: str
    params: tuple[float, ...] = ()

    @property
    def is_absolute(self) -> bool:
        """Whether the command uses absolute coordinates."""
        return self.letter.isupper()

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if not self.params:
            return self.letter
        numbers = " ".join(f"{p:g}" for p in self.params)
        return f"{self.letter} {numbers}"


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Move the cursor to an absolute point.

    Attributes:
        point: Target position
    """

    point: complex


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier segment from the current cursor.

    Attributes:
        control1: First control point
        control2: Second control point
        endpoint: End of the segment, the new cursor position
    """

    control1: complex
    control2: complex
    endpoint: complex


DrawCommand = MoveTo | CubicCurveTo

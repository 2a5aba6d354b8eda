"""Curve construction from path commands.

This module turns validated drawing commands into a single continuous
function of a parameter t in [0, 1]:
- Command validation (raw SVG command -> MoveTo / CubicCurveTo)
- Cubic Bezier evaluation
- PathFunction, which splits [0, 1] uniformly across the cubic segments
- Sampling helper for previews

The parametrization is uniform per segment, not per unit of arc length.
"""

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from fourierpath.domain import CubicCurveTo, DrawCommand, MoveTo, RawCommand
from fourierpath.exceptions import InvalidParameterError, UnrecognizedCommandError

CUBIC_GROUP_SIZE = 6


def cubic_bezier(p0: complex, p1: complex, p2: complex, p3: complex, t: float) -> complex:
    """Evaluate a cubic Bezier curve with the Bernstein form.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve

    Examples:
        >>> cubic_bezier(0j, 1 + 0j, 1 + 1j, 1j, 0.0)
        0j
        >>> cubic_bezier(0j, 1 + 0j, 1 + 1j, 1j, 1.0)
        1j
    """
    inv_t = 1.0 - t
    return (
        inv_t**3 * p0
        + 3.0 * inv_t**2 * t * p1
        + 3.0 * inv_t * t**2 * p2
        + t**3 * p3
    )


def translate_command(raw: RawCommand) -> list[DrawCommand]:
    """Validate one raw command and convert it to drawing commands.

    Only absolute move-to, absolute cubic-curve-to and close are supported.
    A cubic command may hold several consecutive segments.

    Args:
        raw: Command as read from path data

    Returns:
        Drawing commands; empty for close

    Raises:
        UnrecognizedCommandError: For any other command kind
        InvalidParameterError: For a wrong parameter count
    """
    letter = raw.letter
    params = raw.params

    if letter == "M":
        if len(params) != 2:
            raise InvalidParameterError(letter, len(params), "move-to takes exactly 2 numbers")
        return [MoveTo(complex(params[0], params[1]))]

    if letter == "C":
        if not params or len(params) % CUBIC_GROUP_SIZE != 0:
            raise InvalidParameterError(
                letter, len(params), "cubic-curve-to takes a multiple of 6 numbers"
            )
        commands: list[DrawCommand] = []
        for i in range(0, len(params), CUBIC_GROUP_SIZE):
            x1, y1, x2, y2, x3, y3 = params[i : i + CUBIC_GROUP_SIZE]
            commands.append(CubicCurveTo(complex(x1, y1), complex(x2, y2), complex(x3, y3)))
        return commands

    if letter in ("Z", "z"):
        return []

    raise UnrecognizedCommandError(raw.describe())


def translate_commands(raws: Iterable[RawCommand]) -> list[DrawCommand]:
    """Validate and convert a whole command sequence.

    The first invalid command aborts the translation; no partial result is
    returned.
    """
    commands: list[DrawCommand] = []
    for raw in raws:
        commands.extend(translate_command(raw))
    return commands


@dataclass(frozen=True, slots=True)
class PathFunction:
    """A path as a function of one real parameter.

    The interval [0, 1] is divided into ``segment_count`` equal parts, one per
    cubic segment in command order. Move-to commands reposition the cursor
    without consuming a part.

    Attributes:
        commands: Ordered drawing commands
        segment_count: Number of cubic segments in ``commands``
    """

    commands: tuple[DrawCommand, ...]
    segment_count: int

    def __call__(self, t: float) -> complex:
        return self.evaluate(t)

    def evaluate(self, t: float) -> complex:
        """Return the point of the path at parameter t.

        Past the last segment (t == 1, or rounding beyond it) the final cursor
        position is returned. Below 0 the first segment is extrapolated.

        Args:
            t: Curve parameter in [0, 1]

        Returns:
            Point in the complex plane
        """
        idx_prog = t * self.segment_count
        idx = max(math.floor(idx_prog), 0)
        local_t = idx_prog - idx

        cursor = 0j
        consumed = 0
        for command in self.commands:
            if isinstance(command, MoveTo):
                cursor = command.point
                continue
            consumed += 1
            if consumed > idx:
                return cubic_bezier(
                    cursor, command.control1, command.control2, command.endpoint, local_t
                )
            cursor = command.endpoint

        return cursor


def build_path_function(commands: Sequence[DrawCommand]) -> PathFunction:
    """Build a PathFunction from validated drawing commands.

    Args:
        commands: Ordered MoveTo / CubicCurveTo commands

    Returns:
        PathFunction capturing a copy of the commands
    """
    segment_count = sum(1 for command in commands if isinstance(command, CubicCurveTo))
    return PathFunction(commands=tuple(commands), segment_count=segment_count)


def build_path_from_raw(raws: Iterable[RawCommand]) -> PathFunction:
    """Validate raw commands and build the path function in one step.

    Raises:
        UnrecognizedCommandError: For an unsupported command kind
        InvalidParameterError: For a wrong parameter count
    """
    return build_path_function(translate_commands(raws))


def sample_curve(
    func: Callable[[float], complex],
    count: int = 1000,
    upto: float = 1.0,
) -> list[complex]:
    """Sample a curve function at evenly spaced parameters.

    Args:
        func: Function of t returning a complex point
        count: Number of steps; ``count + 1`` samples are returned
        upto: Last parameter value sampled, the range starts at 0

    Returns:
        Points at t = i / count * upto for i in 0..count
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    return [func(i / count * upto) for i in range(count + 1)]

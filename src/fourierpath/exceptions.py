"""Exception hierarchy for Fourierpath."""


class FourierPathError(Exception):
    """Base exception for all Fourierpath errors."""

    pass


class PathError(FourierPathError):
    """Errors related to path data and command validation."""

    pass


class UnrecognizedCommandError(PathError):
    """A path command other than move-to, cubic-curve-to or close was found."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Found unrecognized command `{description}`")


class InvalidParameterError(PathError):
    """A path command carries the wrong number of parameters."""

    def __init__(self, command: str, count: int, reason: str) -> None:
        self.command = command
        self.count = count
        self.reason = reason
        super().__init__(
            f"Invalid parameters for command '{command}' ({count} given): {reason}"
        )


class PathDataError(PathError):
    """Path data text could not be tokenized."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed path data: {reason}")


class SvgError(FourierPathError):
    """Errors related to SVG document loading."""

    pass


class SvgLoadError(SvgError):
    """Error loading an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load SVG '{path}': {reason}")

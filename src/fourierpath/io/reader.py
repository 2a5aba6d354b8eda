"""SVG reader for extracting path commands.

This module provides the SvgReader class for loading SVG documents and the
path-data tokenizer that turns a ``d`` attribute into RawCommand values.
Commands are returned as written; validation happens in the curve builder.
"""

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from fourierpath.domain import RawCommand
from fourierpath.exceptions import PathDataError, SvgLoadError

SVG_NS = "{http://www.w3.org/2000/svg}"

# Command letters, then numbers: integers, decimals and exponents. Numbers
# may run together without separators ("1-2", ".5.5").
_TOKEN_PATTERN = re.compile(
    r"(?P<command>[MmZzLlHhVvCcSsQqTtAa])"
    r"|(?P<number>[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?)"
    r"|(?P<separator>[\s,]+)"
    r"|(?P<invalid>.)",
    re.DOTALL,
)


def parse_path_data(d: str) -> list[RawCommand]:
    """Tokenize SVG path data into raw commands.

    Every number following a command letter belongs to that command until the
    next letter, so ``C`` with 12 numbers is one RawCommand.

    Args:
        d: Content of a path ``d`` attribute

    Returns:
        Commands in the order they appear

    Raises:
        PathDataError: If the text has stray characters or numbers before the
            first command

    Examples:
        >>> [c.letter for c in parse_path_data("M0 0 C1,0 1,1 0,1 Z")]
        ['M', 'C', 'Z']
        >>> parse_path_data("M1-2")[0].params
        (1.0, -2.0)
    """
    commands: list[RawCommand] = []
    letter: str | None = None
    params: list[float] = []

    for match in _TOKEN_PATTERN.finditer(d):
        kind = match.lastgroup
        token = match.group()
        if kind == "command":
            if letter is not None:
                commands.append(RawCommand(letter, tuple(params)))
            letter = token
            params = []
        elif kind == "number":
            if letter is None:
                raise PathDataError(f"number '{token}' before first command")
            params.append(float(token))
        elif kind == "invalid":
            raise PathDataError(f"unexpected character '{token}' at offset {match.start()}")

    if letter is not None:
        commands.append(RawCommand(letter, tuple(params)))

    return commands


class SvgReader:
    """Loads SVG documents and extracts path commands.

    All ``<path>`` elements are read in document order and their commands
    concatenated into a single sequence.

    Example:
        reader = SvgReader(Path("heart.svg"))
        reader.load()
        commands = reader.read_commands()
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._root: ET.Element | None = None

    def load(self) -> None:
        """Load and parse the SVG file.

        Raises:
            FileNotFoundError: If the file does not exist
            SvgLoadError: If the file is not well-formed XML
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        try:
            self._root = ET.parse(self._svg_path).getroot()
        except ET.ParseError as e:
            raise SvgLoadError(str(self._svg_path), str(e)) from e

    @property
    def path_count(self) -> int:
        """Number of ``<path>`` elements in the document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        return sum(1 for _ in self._iter_path_elements())

    def _iter_path_elements(self) -> Iterator[ET.Element]:
        if self._root is None:
            raise RuntimeError("SVG not loaded. Call load() first.")

        for element in self._root.iter():
            if element.tag in ("path", f"{SVG_NS}path"):
                yield element

    def iter_path_data(self) -> Iterator[str]:
        """Yield the ``d`` attribute of every path in document order.

        Raises:
            RuntimeError: If the document has not been loaded yet
            SvgLoadError: If a path has no ``d`` attribute
        """
        for element in self._iter_path_elements():
            d = element.get("d")
            if d is None:
                raise SvgLoadError(str(self._svg_path), "<path> element without 'd' attribute")
            yield d

    def read_commands(self) -> list[RawCommand]:
        """Return the raw commands of all paths, concatenated.

        Raises:
            RuntimeError: If the document has not been loaded yet
            SvgLoadError: If a path has no ``d`` attribute
            PathDataError: If path data is malformed
        """
        commands: list[RawCommand] = []
        for d in self.iter_path_data():
            commands.extend(parse_path_data(d))
        return commands

    def close(self) -> None:
        """Release the parsed document."""
        self._root = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

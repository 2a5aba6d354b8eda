"""SVG input layer for fourierpath.

This module reads SVG documents and tokenizes path data. It keeps the XML
details away from the numeric core, which only sees RawCommand values.

Key responsibilities:
- Load SVG files
- Collect the ``d`` attribute of every ``<path>`` element
- Tokenize path data into command letters and parameters

Key classes:
- SvgReader: Load documents and extract raw commands
"""

from fourierpath.io.reader import SvgReader, parse_path_data

__all__ = [
    "SvgReader",
    "parse_path_data",
]

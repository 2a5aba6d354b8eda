"""Unit tests for the SVG I/O layer.

Tests for the path-data tokenizer and SvgReader.
"""

from pathlib import Path

import pytest

from fourierpath.domain import RawCommand
from fourierpath.exceptions import PathDataError, PathError, SvgLoadError
from fourierpath.io import SvgReader, parse_path_data

SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
{body}
</svg>
"""


def write_svg(directory: Path, body: str, name: str = "shape.svg") -> Path:
    """Write an SVG document with the given body to directory."""
    path = directory / name
    path.write_text(SVG_TEMPLATE.format(body=body), encoding="utf-8")
    return path


class TestParsePathData:
    """Tests for parse_path_data function."""

    def test_basic_commands(self):
        """Test a simple closed cubic path."""
        commands = parse_path_data("M 0 0 C 1 0 1 1 0 1 Z")
        assert commands == [
            RawCommand("M", (0.0, 0.0)),
            RawCommand("C", (1.0, 0.0, 1.0, 1.0, 0.0, 1.0)),
            RawCommand("Z"),
        ]

    def test_comma_separators(self):
        """Test commas and whitespace are interchangeable."""
        assert parse_path_data("M10,20") == [RawCommand("M", (10.0, 20.0))]

    def test_numbers_without_separators(self):
        """Test signs and decimal points split numbers."""
        commands = parse_path_data("M1-2C.5.5-1e1,2E-1 3 4")
        assert commands[0].params == (1.0, -2.0)
        assert commands[1].params == (0.5, 0.5, -10.0, 0.2, 3.0, 4.0)

    def test_repeated_cubic_params_stay_on_one_command(self):
        """Test implicit repetition keeps all numbers on one command."""
        commands = parse_path_data("M0 0 C" + " 1" * 12)
        assert len(commands) == 2
        assert len(commands[1].params) == 12

    def test_commands_kept_as_written(self):
        """Test unsupported and relative letters are passed through."""
        commands = parse_path_data("m 1 1 l 2 2 A 1 1 0 0 1 5 5 z")
        assert [c.letter for c in commands] == ["m", "l", "A", "z"]

    def test_empty_data(self):
        """Test empty path data yields no commands."""
        assert parse_path_data("") == []
        assert parse_path_data("   \n ") == []

    def test_number_before_command(self):
        """Test a leading number is rejected."""
        with pytest.raises(PathDataError, match="before first command"):
            parse_path_data("10 20 M 0 0")

    def test_invalid_character(self):
        """Test stray characters are rejected."""
        with pytest.raises(PathDataError, match="unexpected character"):
            parse_path_data("M 0 0 C 1 # 2")

    def test_data_error_is_path_error(self):
        """Test malformed data shares the path error base."""
        with pytest.raises(PathError):
            parse_path_data("M 0 0 ;")


class TestSvgReader:
    """Tests for SvgReader class."""

    def test_init(self):
        """Test SvgReader initialization."""
        path = Path("test.svg")
        reader = SvgReader(path)
        assert reader._svg_path == path
        assert reader._root is None

    def test_load_nonexistent_file(self, tmp_path: Path):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = SvgReader(tmp_path / "missing.svg")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_load_malformed_xml(self, tmp_path: Path):
        """Test malformed documents raise SvgLoadError."""
        path = tmp_path / "broken.svg"
        path.write_text("<svg><path d='M 0 0'></svg", encoding="utf-8")

        reader = SvgReader(path)
        with pytest.raises(SvgLoadError) as exc_info:
            reader.load()
        assert exc_info.value.path == str(path)

    def test_read_before_load(self):
        """Test reading before loading raises RuntimeError."""
        reader = SvgReader(Path("test.svg"))
        with pytest.raises(RuntimeError, match="SVG not loaded"):
            reader.read_commands()

    def test_path_count_before_load(self):
        """Test path_count before loading raises RuntimeError."""
        reader = SvgReader(Path("test.svg"))
        with pytest.raises(RuntimeError, match="SVG not loaded"):
            _ = reader.path_count

    def test_read_namespaced_document(self, tmp_path: Path):
        """Test paths in the SVG namespace are found."""
        path = write_svg(tmp_path, '<path d="M 0 0 C 1 0 1 1 0 1 Z"/>')

        with SvgReader(path) as reader:
            assert reader.path_count == 1
            commands = reader.read_commands()

        assert [c.letter for c in commands] == ["M", "C", "Z"]

    def test_read_document_without_namespace(self, tmp_path: Path):
        """Test plain <path> tags are found too."""
        path = tmp_path / "plain.svg"
        path.write_text('<svg><g><path d="M 1 2"/></g></svg>', encoding="utf-8")

        with SvgReader(path) as reader:
            assert reader.read_commands() == [RawCommand("M", (1.0, 2.0))]

    def test_multiple_paths_concatenated(self, tmp_path: Path):
        """Test all paths are read in document order."""
        path = write_svg(
            tmp_path,
            '<path d="M 0 0 C 1 0 1 1 0 1"/>\n'
            '<g><path d="M 5 5 C 6 5 6 6 5 6 Z"/></g>',
        )

        with SvgReader(path) as reader:
            assert reader.path_count == 2
            commands = reader.read_commands()

        assert [c.letter for c in commands] == ["M", "C", "M", "C", "Z"]
        assert commands[2].params == (5.0, 5.0)

    def test_other_elements_ignored(self, tmp_path: Path):
        """Test non-path shapes contribute nothing."""
        path = write_svg(tmp_path, '<rect width="10" height="10"/><circle r="4"/>')

        with SvgReader(path) as reader:
            assert reader.path_count == 0
            assert reader.read_commands() == []

    def test_path_without_d(self, tmp_path: Path):
        """Test a path element without data raises SvgLoadError."""
        path = write_svg(tmp_path, '<path fill="red"/>')

        with SvgReader(path) as reader:
            with pytest.raises(SvgLoadError, match="without 'd'"):
                reader.read_commands()

    def test_iter_path_data(self, tmp_path: Path):
        """Test raw d attributes are yielded unchanged."""
        path = write_svg(tmp_path, '<path d="M 0 0"/><path d="M 1 1"/>')

        with SvgReader(path) as reader:
            assert list(reader.iter_path_data()) == ["M 0 0", "M 1 1"]

    def test_context_manager_closes(self, tmp_path: Path):
        """Test exiting the context releases the document."""
        path = write_svg(tmp_path, '<path d="M 0 0"/>')

        with SvgReader(path) as reader:
            assert reader._root is not None

        assert reader._root is None

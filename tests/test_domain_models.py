"""Tests for domain models to verify they work correctly."""

import cmath
import math
import pickle

import pytest

from fourierpath.domain import (
    CubicCurveTo,
    FourierSeriesDescriptor,
    MoveTo,
    RawCommand,
)


class TestRawCommand:
    """Tests for RawCommand class."""

    def test_raw_command_creation(self) -> None:
        """Test basic raw command creation."""
        cmd = RawCommand("M", (1.0, 2.0))
        assert cmd.letter == "M"
        assert cmd.params == (1.0, 2.0)

    def test_close_has_no_params(self) -> None:
        """Test close command defaults to empty params."""
        assert RawCommand("Z").params == ()

    def test_is_absolute(self) -> None:
        """Test absolute/relative detection from letter case."""
        assert RawCommand("C", (0.0,) * 6).is_absolute
        assert not RawCommand("c", (0.0,) * 6).is_absolute

    def test_describe(self) -> None:
        """Test description used in error messages."""
        assert RawCommand("A", (1.0, 2.5)).describe() == "A 1 2.5"
        assert RawCommand("z").describe() == "z"

    def test_raw_command_immutable(self) -> None:
        """Test that raw command is immutable."""
        cmd = RawCommand("M", (1.0, 2.0))
        with pytest.raises(AttributeError):
            cmd.letter = "L"  # type: ignore


class TestDrawCommands:
    """Tests for MoveTo and CubicCurveTo."""

    def test_move_to(self) -> None:
        """Test move-to holds a complex point."""
        move = MoveTo(3 + 4j)
        assert move.point == 3 + 4j

    def test_cubic_curve_to(self) -> None:
        """Test cubic command holds control points and endpoint."""
        cubic = CubicCurveTo(1 + 0j, 1 + 1j, 1j)
        assert cubic.control1 == 1 + 0j
        assert cubic.control2 == 1 + 1j
        assert cubic.endpoint == 1j

    def test_commands_hashable(self) -> None:
        """Test commands can be used in sets."""
        commands = {MoveTo(0j), MoveTo(0j), CubicCurveTo(1, 2, 3)}
        assert len(commands) == 2

    def test_commands_picklable(self) -> None:
        """Test commands survive pickling for worker processes."""
        cubic = CubicCurveTo(1 + 0j, 1 + 1j, 1j)
        assert pickle.loads(pickle.dumps(cubic)) == cubic


class TestFourierSeriesDescriptor:
    """Tests for FourierSeriesDescriptor class."""

    def test_even_count_rejected(self) -> None:
        """Test that an even coefficient count fails the invariant."""
        with pytest.raises(AssertionError):
            FourierSeriesDescriptor(coefficients=(0j, 0j))

    def test_half_range_and_frequencies(self) -> None:
        """Test symmetric frequency range."""
        desc = FourierSeriesDescriptor(coefficients=(0j,) * 7)
        assert len(desc) == 7
        assert desc.half_range == 3
        assert list(desc.frequencies()) == [-3, -2, -1, 0, 1, 2, 3]

    def test_coefficient_lookup(self) -> None:
        """Test lookup by signed frequency."""
        desc = FourierSeriesDescriptor(coefficients=(1j, 2 + 0j, 3 + 0j))
        assert desc.coefficient(-1) == 1j
        assert desc.coefficient(0) == 2
        assert desc.coefficient(1) == 3

    def test_coefficient_out_of_range(self) -> None:
        """Test lookup outside the range raises IndexError."""
        desc = FourierSeriesDescriptor(coefficients=(0j, 0j, 0j))
        with pytest.raises(IndexError):
            desc.coefficient(2)

    def test_evaluate_single_term(self) -> None:
        """Test a lone k=1 term traces the unit circle."""
        desc = FourierSeriesDescriptor(coefficients=(0j, 0j, 1 + 0j))
        assert desc.evaluate(0.0) == pytest.approx(1 + 0j)
        assert desc.evaluate(0.25) == pytest.approx(1j)
        assert desc(0.5) == pytest.approx(-1 + 0j)

    def test_evaluate_constant_term(self) -> None:
        """Test the middle coefficient is the constant offset."""
        desc = FourierSeriesDescriptor(coefficients=(0j, 2 - 3j, 0j))
        for t in (0.0, 0.3, 0.9):
            assert desc.evaluate(t) == pytest.approx(2 - 3j)

    def test_evaluate_sums_all_terms(self) -> None:
        """Test evaluation against a direct sum."""
        coefficients = (0.5j, -1 + 0j, 2 + 1j, 0.25 + 0j, -0.5j)
        desc = FourierSeriesDescriptor(coefficients=coefficients)
        t = 0.37
        expected = sum(
            c * cmath.exp(2j * math.pi * k * t)
            for k, c in zip(range(-2, 3), coefficients, strict=True)
        )
        assert desc.evaluate(t) == pytest.approx(expected)

    def test_terms_by_frequency_order(self) -> None:
        """Test ascending |k| with positive before negative."""
        desc = FourierSeriesDescriptor(coefficients=tuple(complex(i) for i in range(7)))
        order = [k for k, _ in desc.terms_by_frequency()]
        assert order == [0, 1, -1, 2, -2, 3, -3]

    def test_terms_by_frequency_keeps_pairs(self) -> None:
        """Test coefficients stay attached to their frequency."""
        desc = FourierSeriesDescriptor(coefficients=(10j, 20j, 30j, 40j, 50j))
        terms = dict(desc.terms_by_frequency())
        assert terms == {-2: 10j, -1: 20j, 0: 30j, 1: 40j, 2: 50j}

    def test_partial_sums_end_at_evaluation(self) -> None:
        """Test last partial sum equals the full evaluation."""
        desc = FourierSeriesDescriptor(coefficients=(0.1j, 1 + 0j, 0.5 + 0j, 0.3j, -0.2 + 0j))
        sums = desc.partial_sums(0.42)
        assert len(sums) == 5
        assert sums[0] == pytest.approx(0.5 + 0j)
        assert sums[-1] == pytest.approx(desc.evaluate(0.42))

    def test_descriptor_immutable(self) -> None:
        """Test that descriptor is immutable."""
        desc = FourierSeriesDescriptor(coefficients=(0j,))
        with pytest.raises(AttributeError):
            desc.coefficients = (1j,)  # type: ignore

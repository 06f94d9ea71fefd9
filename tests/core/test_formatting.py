"""Tests for display formatting."""

import pytest

from statify.core.engine import NO_MODE
from statify.core.formatting import format_mode, format_number, format_raw


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (4, "4"),
            (4.0, "4"),
            (-12.0, "-12"),
            (4.571428571428571, "4.5714"),
            (2.5, "2.5"),
            (0.1 + 0.2, "0.3"),
            (1.99999, "2"),
            (-0.0, "0"),
            (0.00001, "0"),
            (-2.25, "-2.25"),
            (0.03125, "0.0313"),
            (-0.03125, "-0.0313"),
            (-0.00001, "0"),
        ],
    )
    def test_default_precision(self, value: float, expected: str) -> None:
        """Test integers stay integral and others round to four places."""
        assert format_number(value) == expected

    def test_custom_precision(self) -> None:
        """Test rounding to a requested precision."""
        assert format_number(3.14159, precision=2) == "3.14"
        assert format_number(3.14159, precision=0) == "3"

    def test_halves_round_up(self) -> None:
        """Test exact binary halves round away from zero."""
        assert format_number(2.5, precision=0) == "3"
        assert format_number(0.125, precision=2) == "0.13"
        assert format_number(1.005, precision=2) == "1"

    def test_no_exponent(self) -> None:
        """Test small values keep plain decimal notation."""
        assert format_number(0.00001234, precision=8) == "0.00001234"
        assert format_number(1.5e-7, precision=10) == "0.00000015"

    @pytest.mark.parametrize("value", [None, float("nan"), float("inf"), float("-inf")])
    def test_undefined(self, value: float | None) -> None:
        """Test undefined values stay None rather than '0' or ''."""
        assert format_number(value) is None


class TestFormatMode:
    """Tests for format_mode."""

    def test_numbers(self) -> None:
        """Test each mode value is formatted."""
        assert format_mode([1.0, 2.5]) == ["1", "2.5"]

    def test_sentinel_passthrough(self) -> None:
        """Test the no-mode sentinel is kept as is."""
        assert format_mode([NO_MODE]) == [NO_MODE]

    def test_none(self) -> None:
        """Test an undefined mode stays None."""
        assert format_mode(None) is None


class TestFormatRaw:
    """Tests for full-precision sample formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (2.0, "2"),
            (-7.0, "-7"),
            (1.23456, "1.23456"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1.5e-7, "1.5e-07"),
            (1e20, "1e+20"),
        ],
    )
    def test_full_precision(self, value: float, expected: str) -> None:
        """Test values are not rounded."""
        assert format_raw(value) == expected

"""Unit tests for shared helpers."""

import pytest

from semantic_guard.utils.helpers import float_divide, to_fixed


@pytest.mark.unit
class TestToFixed:
    """Test suite for fixed-point formatting of anomaly figures."""

    @pytest.mark.parametrize("value,digits,expected", [
        (0.125, 2, "0.13"),
        (12.5, 0, "13"),
        (2.5, 0, "3"),
        (-2.5, 0, "-3"),
        (1.005, 2, "1.00"),
        (42.0, 1, "42.0"),
    ])
    def test_rounding(self, value, digits, expected):
        """Test ties round away from zero on the binary value."""
        assert to_fixed(value, digits) == expected

    def test_non_finite(self):
        """Test infinities and NaN are spelled out."""
        assert to_fixed(float("inf"), 1) == "Infinity"
        assert to_fixed(float("-inf"), 1) == "-Infinity"
        assert to_fixed(float("nan"), 1) == "NaN"

    def test_negative_zero(self):
        """Test negative zero prints without a sign."""
        assert to_fixed(-0.0, 2) == "0.00"


@pytest.mark.unit
class TestFloatDivide:
    """Test suite for float_divide."""

    def test_zero_denominator(self):
        """Test IEEE results instead of ZeroDivisionError."""
        assert float_divide(1.0, 0.0) == float("inf")
        assert float_divide(-1.0, 0.0) == float("-inf")
        assert float_divide(0.0, 0.0) != float_divide(0.0, 0.0)

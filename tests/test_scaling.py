"""Tests for integer/float scaling primitives and the rounding rule.

Python 3.13+. Uses pytest.
"""

import math

import pytest

from moneythings.scaling import (
    float_number_to_integer_with_decimals,
    integer_with_decimals_to_float_number,
    parse_float_prefix,
    round_half_away_from_zero,
)


class TestRoundHalfAwayFromZero:
    """Ties round away from zero, everything else to nearest."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, 1),
            (-0.5, -1),
            (2.5, 3),
            (-2.5, -3),
            (1.4999, 1),
            (-1.4999, -1),
            (12.5, 13),
            (0.0, 0),
        ],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        """Ties go away from zero, not to even."""
        assert round_half_away_from_zero(value) == expected

    def test_returns_int(self) -> None:
        """Finite input rounds to a real int."""
        assert isinstance(round_half_away_from_zero(3.7), int)

    def test_nan_passes_through(self) -> None:
        """NaN is returned unchanged instead of raising."""
        assert math.isnan(round_half_away_from_zero(math.nan))

    def test_infinity_passes_through(self) -> None:
        """Infinities are returned unchanged."""
        assert round_half_away_from_zero(math.inf) == math.inf
        assert round_half_away_from_zero(-math.inf) == -math.inf


class TestIntegerWithDecimalsToFloatNumber:
    """Whole cents -> float."""

    def test_divides_by_hundred(self) -> None:
        """1550 cents is 15.5."""
        assert integer_with_decimals_to_float_number(1550) == 15.5

    def test_negative(self) -> None:
        """Negative amounts keep their sign."""
        assert integer_with_decimals_to_float_number(-1) == -0.01

    def test_big_integer_is_narrowed(self) -> None:
        """Arbitrary-precision ints are narrowed to float."""
        result = integer_with_decimals_to_float_number(10**30)
        assert isinstance(result, float)
        assert result == pytest.approx(1e28)

    @pytest.mark.parametrize(("amount", "expected"), [(10**400, math.inf), (-10**400, -math.inf)])
    def test_beyond_float_range_is_infinite(self, amount: int, expected: float) -> None:
        """Ints too large for a float narrow to signed infinity."""
        assert integer_with_decimals_to_float_number(amount) == expected


class TestFloatNumberToIntegerWithDecimals:
    """Float -> whole cents."""

    def test_scales(self) -> None:
        """15.5 is 1550 cents."""
        assert float_number_to_integer_with_decimals(15.5) == 1550

    def test_float_noise_is_rounded(self) -> None:
        """0.29 * 100 is 28.999999999999996 in binary and still gives 29."""
        assert float_number_to_integer_with_decimals(0.29) == 29

    def test_exact_tie_rounds_away_from_zero(self) -> None:
        """0.125 * 100 is exactly 12.5."""
        assert float_number_to_integer_with_decimals(0.125) == 13
        assert float_number_to_integer_with_decimals(-0.125) == -13

    def test_binary_value_decides_near_ties(self) -> None:
        """1.005 * 100 is 100.49999999999999, below the tie."""
        assert float_number_to_integer_with_decimals(1.005) == 100

    def test_nan_propagates(self) -> None:
        """NaN stays NaN."""
        assert math.isnan(float_number_to_integer_with_decimals(math.nan))


class TestParseFloatPrefix:
    """Lenient parsing of the leading number."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12.5", 12.5),
            ("  12.5abc", 12.5),
            ("-3e2", -300.0),
            (".5", 0.5),
            ("+7", 7.0),
            ("1e", 1.0),
            ("12.", 12.0),
            ("1234.56.78", 1234.56),
        ],
    )
    def test_numeric_prefix(self, text: str, expected: float) -> None:
        """The longest numeric prefix is parsed."""
        assert parse_float_prefix(text) == expected

    def test_infinity(self) -> None:
        """Infinity literals are recognized."""
        assert parse_float_prefix("Infinity") == math.inf
        assert parse_float_prefix("-Infinity") == -math.inf

    @pytest.mark.parametrize("text", ["", "abc", "-", ".", "$12", "NaN"])
    def test_no_number_gives_nan(self, text: str) -> None:
        """Text without a leading number yields NaN."""
        assert math.isnan(parse_float_prefix(text))

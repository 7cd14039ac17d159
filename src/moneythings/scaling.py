"""Integer/float scaling primitives.

Integer-with-decimals amounts are whole cents (major units x 100). Python
int is arbitrary precision, so there is a single numeric path for small and
big integers; the only narrowing happens when an int is divided into a
float, where magnitudes beyond 2**53 cents lose precision and magnitudes
beyond the float range become signed infinity.

Rounding Rule:
    round_half_away_from_zero() is used everywhere an amount is rounded to
    whole cents: 0.5 -> 1, -0.5 -> -1, 2.5 -> 3. It operates on the exact
    binary value of the float, so 1.005 * 100 (= 100.49999999999999) -> 100.

NaN Propagation:
    Nothing here raises for malformed text. parse_float_prefix() returns
    NaN when there is no number, and the scaling functions pass non-finite
    floats through unchanged.

Python 3.13+.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from .constants import DECIMALS_FACTOR

__all__ = [
    "float_number_to_integer_with_decimals",
    "integer_with_decimals_to_float_number",
    "parse_float_prefix",
    "round_half_away_from_zero",
]

# Longest numeric prefix, in the spirit of a lenient float parser:
# "12.5abc" -> "12.5", "  -3e2" -> "-3e2", ".5" -> ".5", "Infinity" -> inf
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|Infinity))"
)


def round_half_away_from_zero(value: float) -> int | float:
    """Round a float to the nearest integer, ties away from zero.

    Args:
        value: Float to round

    Returns:
        Rounded int, or the input unchanged if it is NaN or infinite

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(2.4999)
        2
    """
    if not math.isfinite(value):
        return value
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def integer_with_decimals_to_float_number(integer_with_decimals: int) -> float:
    """Convert whole cents to a float in major units (1550 -> 15.5).

    Amounts beyond the float range narrow to inf or -inf.
    """
    try:
        return integer_with_decimals / DECIMALS_FACTOR
    except OverflowError:
        return math.inf if integer_with_decimals > 0 else -math.inf


def float_number_to_integer_with_decimals(number: float) -> int | float:
    """Convert a float in major units to whole cents (15.5 -> 1550).

    Non-finite input is returned as-is so that NaN from a failed parse keeps
    propagating instead of raising.
    """
    return round_half_away_from_zero(number * DECIMALS_FACTOR)


def parse_float_prefix(text: str) -> float:
    """Parse the longest numeric prefix of text as a float.

    Leading whitespace is skipped and trailing garbage is ignored.

    Args:
        text: Text starting with a number

    Returns:
        Parsed float, or NaN if text does not start with a number

    Examples:
        >>> parse_float_prefix("12.50 EUR")
        12.5
        >>> parse_float_prefix("abc")
        nan
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return math.nan
    token = match.group(1)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)

"""Amount -> amount string conversion.

Amounts are rendered by Babel into a canonical "1.234,56" form (pattern
#,##0.00 in the de_DE locale), split into digit groups and a two-digit
fraction, and reassembled with the caller's separators. Reassembly works on
the split parts, never by find-and-replace, so any decimal point or
thousands separator is safe, including "." and "," swapped:

    >>> integer_with_decimals_to_amount_string(123456789, decimal_point=".", thousands_separator=",")
    '1,234,567.89'

Decimal Policies:
    - showAlways: always two fractional digits ("5,00")
    - hideIfZero: fraction only when it is not "00" ("5", "5,50")
    - hideAlways: fraction dropped, never rounded into the integer part ("5" for 599)

Thread Safety:
    Thread-safe. Uses Babel with an explicit locale (no global locale state).

Python 3.13+. Uses Babel for CLDR number patterns.
"""

import math
from decimal import localcontext

from babel.numbers import format_decimal

from .constants import (
    CANONICAL_DECIMAL_SEPARATOR,
    CANONICAL_GROUP_SEPARATOR,
    CANONICAL_LOCALE,
    CANONICAL_PATTERN,
    DEFAULT_DECIMAL_POINT,
    DEFAULT_DECIMAL_POLICY,
    DEFAULT_THOUSANDS_SEPARATOR,
)
from .enums import DecimalPolicy
from .scaling import float_number_to_integer_with_decimals, integer_with_decimals_to_float_number

__all__ = [
    "float_number_to_amount_string",
    "integer_with_decimals_to_amount_string",
]

# Babel quantizes in the current decimal context; the float range needs up to
# 309 integer digits plus two fractional digits.
_CANONICAL_PRECISION = 320


def integer_with_decimals_to_amount_string(
    amount: int | float,
    *,
    decimal_point: str = DEFAULT_DECIMAL_POINT,
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR,
    decimal_policy: DecimalPolicy | str = DEFAULT_DECIMAL_POLICY,
) -> str:
    """Format whole cents as an amount string.

    Args:
        amount: Amount in cents (1550 -> 15,50)
        decimal_point: Text placed between integer part and fraction
        thousands_separator: Text placed between groups of three digits
        decimal_policy: hideIfZero, showAlways or hideAlways

    Returns:
        Formatted amount, without currency symbol. Non-finite input renders
        as "NaN", "Infinity" or "-Infinity".

    Raises:
        ValueError: If decimal_policy is not a known policy

    Examples:
        >>> integer_with_decimals_to_amount_string(500)
        '5'
        >>> integer_with_decimals_to_amount_string(500, decimal_policy="showAlways")
        '5,00'
        >>> integer_with_decimals_to_amount_string(123456700)
        '1 234 567'
    """
    policy = DecimalPolicy(decimal_policy)
    float_number = integer_with_decimals_to_float_number(amount)
    if not math.isfinite(float_number):
        return _non_finite_string(float_number)

    groups, fraction = _split_canonical(abs(float_number))
    show_fraction = policy is DecimalPolicy.SHOW_ALWAYS or (
        policy is DecimalPolicy.HIDE_IF_ZERO and fraction.strip("0") != ""
    )

    amount_string = thousands_separator.join(groups)
    if show_fraction:
        amount_string = f"{amount_string}{decimal_point}{fraction}"

    # "-0" is never rendered: the sign needs a visible non-zero digit
    visible_digits = "".join(groups) + (fraction if show_fraction else "")
    if float_number < 0 and visible_digits.strip("0"):
        amount_string = f"-{amount_string}"
    return amount_string


def float_number_to_amount_string(
    amount: float,
    *,
    decimal_point: str = DEFAULT_DECIMAL_POINT,
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR,
    decimal_policy: DecimalPolicy | str = DEFAULT_DECIMAL_POLICY,
) -> str:
    """Format a float in major units as an amount string (15.5 -> "15,50").

    The float is first scaled to whole cents, so 1.005 renders as "1".
    """
    return integer_with_decimals_to_amount_string(
        float_number_to_integer_with_decimals(amount),
        decimal_point=decimal_point,
        thousands_separator=thousands_separator,
        decimal_policy=decimal_policy,
    )


def _split_canonical(value: float) -> tuple[list[str], str]:
    """Render a non-negative value canonically and split it into groups and fraction."""
    with localcontext(prec=_CANONICAL_PRECISION):
        canonical = format_decimal(value, format=CANONICAL_PATTERN, locale=CANONICAL_LOCALE)
    integer_part, _, fraction = canonical.rpartition(CANONICAL_DECIMAL_SEPARATOR)
    return integer_part.split(CANONICAL_GROUP_SEPARATOR), fraction


def _non_finite_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "-Infinity" if value < 0 else "Infinity"

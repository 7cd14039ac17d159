"""Amount string -> amount conversion.

Inverse of moneythings.formatting. These converters trust their input:
a string that is not a number yields NaN instead of raising, and the NaN
propagates through any further arithmetic. Validate user input with the
validators in moneythings.validators first.

    >>> amount_string_to_integer_with_decimals("1 234,56")
    123456
    >>> amount_string_to_integer_with_decimals("abc")
    nan

Python 3.13+.
"""

from .constants import DEFAULT_DECIMAL_POINT, DEFAULT_THOUSANDS_SEPARATOR
from .scaling import (
    float_number_to_integer_with_decimals,
    integer_with_decimals_to_float_number,
    parse_float_prefix,
)

__all__ = [
    "amount_string_to_float_number",
    "amount_string_to_integer_with_decimals",
]


def amount_string_to_integer_with_decimals(
    amount_string: str,
    *,
    decimal_point: str = DEFAULT_DECIMAL_POINT,
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR,
) -> int | float:
    """Parse an amount string into whole cents.

    Every thousands separator is removed, the first decimal point becomes
    ".", and the longest numeric prefix is parsed, scaled by 100 and
    rounded half away from zero.

    Args:
        amount_string: Formatted amount, e.g. "1 234,56"
        decimal_point: Decimal point used in amount_string
        thousands_separator: Group separator used in amount_string

    Returns:
        Amount in cents, or NaN if amount_string holds no number
    """
    if thousands_separator:
        amount_string = amount_string.replace(thousands_separator, "")
    if decimal_point:
        amount_string = amount_string.replace(decimal_point, ".", 1)
    return float_number_to_integer_with_decimals(parse_float_prefix(amount_string))


def amount_string_to_float_number(
    amount_string: str,
    *,
    decimal_point: str = DEFAULT_DECIMAL_POINT,
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR,
) -> float:
    """Parse an amount string into a float in major units ("15,50" -> 15.5).

    Goes through whole cents, so extra fractional digits are rounded away.
    Returns NaN if amount_string holds no number.
    """
    return integer_with_decimals_to_float_number(
        amount_string_to_integer_with_decimals(
            amount_string,
            decimal_point=decimal_point,
            thousands_separator=thousands_separator,
        )
    )

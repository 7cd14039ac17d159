"""Enumerations for moneythings type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so callers may pass either the
member or its plain value ("showAlways" == DecimalPolicy.SHOW_ALWAYS).

Python 3.13+.
"""

from enum import StrEnum


class AmountType(StrEnum):
    """Numeric representation of an amount handed to the formatters.

    StrEnum provides automatic string conversion: str(AmountType.FLOAT_NUMBER) == "floatNumber"
    """

    INTEGER_WITH_DECIMALS = "integerWithDecimals"
    """Scaled integer, amount x 100 (cents): 1550 -> 15,50"""

    FLOAT_NUMBER = "floatNumber"
    """Plain float in major units: 15.5 -> 15,50"""


class DecimalPolicy(StrEnum):
    """Rule for showing the two-digit fractional part of an amount string."""

    HIDE_IF_ZERO = "hideIfZero"
    """Show decimals only when they are not "00": 500 -> 5, 550 -> 5,50"""

    SHOW_ALWAYS = "showAlways"
    """Always exactly two decimals: 500 -> 5,00"""

    HIDE_ALWAYS = "hideAlways"
    """Never show decimals, truncating them: 599 -> 5"""


class SymbolPosition(StrEnum):
    """Placement of the currency symbol relative to the amount string."""

    BEFORE = "before"
    """Symbol first: $15"""

    AFTER = "after"
    """Symbol last: 15 €"""


__all__ = [
    "AmountType",
    "DecimalPolicy",
    "SymbolPosition",
]

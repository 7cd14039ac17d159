"""Validators for user-entered amount strings and currency codes.

Built on pydantic v2. Each builder returns an Annotated type that can be
used as a pydantic model field or wrapped in a TypeAdapter:

    >>> from pydantic import TypeAdapter
    >>> from moneythings.config import MoneyConfig
    >>> config = MoneyConfig(currencies=("usd",))
    >>> TypeAdapter(amount_integer_with_decimals_type(config)).validate_python("12,34")
    1234

Check Order:
    Checks run as a chain of AfterValidators and stop at the first failure:
    1. pattern     (amount_pattern)   digits, optional whitespace grouping,
                                      optional decimal point + 0-2 digits
    2. refinement  (amount_negative)  parsed value is a number and >= 0
    3. range       (amount_range)     limited variants only
    4. transform                      *_integer_with_decimals / *_float_number only
    A string failing 1-3 never reaches the transform.

Decimal Point in the Pattern:
    A one-character decimal point is regex-escaped and used as-is. Any other
    length falls back to "." for building the pattern only, while parsing
    still uses the configured decimal point. With decimal point " dot ",
    "12.34" is accepted and "12 dot 34" is rejected.

Python 3.13+. Uses pydantic for schema validation.
"""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

from .constants import AMOUNT_PATTERN_MESSAGE, AMOUNT_RANGE_MESSAGE, PATTERN_FALLBACK_DECIMAL_POINT
from .enums import DecimalPolicy
from .errors import MoneyConfigError
from .formatting import integer_with_decimals_to_amount_string
from .parsing import amount_string_to_float_number, amount_string_to_integer_with_decimals

if TYPE_CHECKING:
    from collections.abc import Callable

    from .config import MoneyConfig

__all__ = [
    "amount_float_number_type",
    "amount_integer_with_decimals_type",
    "amount_raw_type",
    "build_amount_pattern",
    "currency_type",
    "pattern_decimal_point",
]

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


def pattern_decimal_point(decimal_point: str) -> str:
    """Return the decimal point the amount pattern is built with.

    Examples:
        >>> pattern_decimal_point(",")
        ','
        >>> pattern_decimal_point(" dot ")
        '.'
    """
    return decimal_point if len(decimal_point) == 1 else PATTERN_FALLBACK_DECIMAL_POINT


def build_amount_pattern(decimal_point: str) -> re.Pattern[str]:
    """Compile the amount-string pattern, to be used with fullmatch().

    Only Latin digits are accepted. Digit groups may be separated by any
    whitespace; "1 234 567,89" and "1234567" both match.
    """
    escaped = re.escape(pattern_decimal_point(decimal_point))
    return re.compile(rf"\s*[0-9][\s0-9]*(?:{escaped}[0-9]{{0,2}})?")


def currency_type(config: MoneyConfig) -> Any:
    """Literal type accepting exactly the configured currency codes."""
    return Literal[config.currencies]  # type: ignore[valid-type]


def amount_raw_type(
    config: MoneyConfig,
    minimum: int | None = None,
    maximum: int | None = None,
) -> Any:
    """Annotated str type accepting well-formed, non-negative amount strings.

    Args:
        config: Supplies decimal point and thousands separator
        minimum: Smallest allowed amount in cents (inclusive), or None for no range
        maximum: Largest allowed amount in cents (inclusive), given together with minimum

    Returns:
        Annotated[str, ...] that validates to the input string unchanged

    Raises:
        MoneyConfigError: If only one bound is given, or minimum is greater than maximum
    """
    pattern = build_amount_pattern(config.default_decimal_point)

    def check_pattern(value: str) -> str:
        if pattern.fullmatch(value) is None:
            raise PydanticCustomError("amount_pattern", AMOUNT_PATTERN_MESSAGE)
        return value

    def check_non_negative(value: str) -> str:
        number = amount_string_to_float_number(
            _normalize(value, config), decimal_point=config.default_decimal_point, thousands_separator=""
        )
        if not math.isfinite(number) or number < 0:
            raise PydanticCustomError("amount_negative", AMOUNT_PATTERN_MESSAGE)
        return value

    validators = [AfterValidator(check_pattern), AfterValidator(check_non_negative)]
    if (minimum is None) != (maximum is None):
        raise MoneyConfigError("Both minimum and maximum are required for a limited amount", field_name="maximum")
    if minimum is not None and maximum is not None:
        validators.append(AfterValidator(_range_check(config, minimum, maximum)))
    return Annotated[str, *validators]


def amount_integer_with_decimals_type(
    config: MoneyConfig,
    minimum: int | None = None,
    maximum: int | None = None,
) -> Any:
    """Like amount_raw_type(), then converted to whole cents ("12,34" -> 1234)."""

    def transform(value: str) -> int | float:
        return amount_string_to_integer_with_decimals(
            _normalize(value, config), decimal_point=config.default_decimal_point, thousands_separator=""
        )

    return Annotated[amount_raw_type(config, minimum, maximum), AfterValidator(transform)]


def amount_float_number_type(
    config: MoneyConfig,
    minimum: int | None = None,
    maximum: int | None = None,
) -> Any:
    """Like amount_raw_type(), then converted to a float ("12,34" -> 12.34)."""

    def transform(value: str) -> float:
        return amount_string_to_float_number(
            _normalize(value, config), decimal_point=config.default_decimal_point, thousands_separator=""
        )

    return Annotated[amount_raw_type(config, minimum, maximum), AfterValidator(transform)]


def _normalize(value: str, config: MoneyConfig) -> str:
    """Drop whitespace and thousands separators before numeric parsing."""
    value = _WHITESPACE.sub("", value)
    if config.default_thousands_separator:
        value = value.replace(config.default_thousands_separator, "")
    return value


def _range_check(config: MoneyConfig, minimum: int, maximum: int) -> Callable[[str], str]:
    if minimum > maximum:
        msg = f"Minimum amount {minimum} is greater than maximum amount {maximum}"
        raise MoneyConfigError(msg, field_name="minimum")

    bounds = {
        "minimum": _render_bound(minimum, config),
        "maximum": _render_bound(maximum, config),
    }
    logger.debug("Built amount range check [%s, %s]", bounds["minimum"], bounds["maximum"])

    def check_range(value: str) -> str:
        cents = amount_string_to_integer_with_decimals(
            _normalize(value, config), decimal_point=config.default_decimal_point, thousands_separator=""
        )
        if not minimum <= cents <= maximum:
            raise PydanticCustomError("amount_range", AMOUNT_RANGE_MESSAGE, bounds)
        return value

    return check_range


def _render_bound(bound: int, config: MoneyConfig) -> str:
    return integer_with_decimals_to_amount_string(
        bound,
        decimal_point=config.default_decimal_point,
        thousands_separator=config.default_thousands_separator,
        decimal_policy=DecimalPolicy.SHOW_ALWAYS,
    )

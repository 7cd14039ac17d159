"""Currency-symbol-decorated amount strings.

format_money() is the single formatting path: it takes one ToMoneyOptions
record and resolves every unset field against a MoneyConfig. The
convenience entry points on MoneyThings (to_money(amount) and
to_money(amount, **options)) only build that record.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import AmountType, DecimalPolicy, SymbolPosition
from .formatting import integer_with_decimals_to_amount_string
from .scaling import float_number_to_integer_with_decimals, round_half_away_from_zero

if TYPE_CHECKING:
    from .config import MoneyConfig

__all__ = ["ToMoneyOptions", "format_money", "to_integer_with_decimals"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToMoneyOptions:
    """Everything to_money() accepts, amount included.

    Fields left as None fall back to the MoneyConfig defaults. symbol=None
    means "look the currency up in the symbol map"; pass symbol="" to render
    no symbol while keeping the delimiter.

    Attributes:
        amount: Amount to format, interpreted according to amount_type
        amount_type: integerWithDecimals (cents) or floatNumber (major units)
        currency: Currency whose symbol is shown
        decimal_point: Decimal point override
        decimal_policy: Decimal policy override
        thousands_separator: Thousands separator override
        symbol: Explicit symbol, bypassing the currency symbol map
        symbol_position: before or after
        symbol_delimiter: Text between symbol and amount
        hide_symbol: Return the bare amount string
    """

    amount: int | float
    amount_type: AmountType | str | None = None
    currency: str | None = None
    decimal_point: str | None = None
    decimal_policy: DecimalPolicy | str | None = None
    thousands_separator: str | None = None
    symbol: str | None = None
    symbol_position: SymbolPosition | str | None = None
    symbol_delimiter: str | None = None
    hide_symbol: bool = False


def to_integer_with_decimals(amount: int | float, amount_type: AmountType | str) -> int | float:
    """Normalize an amount of the given type to whole cents.

    Examples:
        >>> to_integer_with_decimals(15.5, "floatNumber")
        1550
        >>> to_integer_with_decimals(1549.6, "integerWithDecimals")
        1550
        >>> to_integer_with_decimals(10**30, "integerWithDecimals")
        1000000000000000000000000000000
    """
    if AmountType(amount_type) is AmountType.FLOAT_NUMBER:
        return float_number_to_integer_with_decimals(amount)
    if isinstance(amount, int):
        return amount
    return round_half_away_from_zero(amount)


def format_money(options: ToMoneyOptions, config: MoneyConfig) -> str:
    """Format an amount with its currency symbol.

    Args:
        options: Amount and per-call overrides
        config: Defaults for every override left unset

    Returns:
        Amount string decorated with the currency symbol

    Raises:
        ValueError: If an enum-valued option holds an unknown value

    Examples:
        >>> from moneythings.config import MoneyConfig
        >>> config = MoneyConfig(currencies=("usd", "eur"))
        >>> format_money(ToMoneyOptions(amount=1500), config)
        '$15'
        >>> format_money(
        ...     ToMoneyOptions(amount=1550, currency="eur", symbol_position="after", symbol_delimiter=" "),
        ...     config,
        ... )
        '15,50 €'
    """
    amount_type = config.default_amount_type if options.amount_type is None else options.amount_type
    amount_string = integer_with_decimals_to_amount_string(
        to_integer_with_decimals(options.amount, amount_type),
        decimal_point=_pick(options.decimal_point, config.default_decimal_point),
        thousands_separator=_pick(options.thousands_separator, config.default_thousands_separator),
        decimal_policy=_pick(options.decimal_policy, config.default_decimal_policy),
    )
    if options.hide_symbol:
        return amount_string

    symbol = options.symbol
    if symbol is None:
        currency = _pick(options.currency, config.resolved_default_currency)
        symbol = config.symbol_for(currency)
        if symbol is None:
            logger.warning("No symbol configured for currency '%s'", currency)
            symbol = ""

    delimiter = _pick(options.symbol_delimiter, config.default_symbol_delimiter)
    position = SymbolPosition(_pick(options.symbol_position, config.default_symbol_position))
    if position is SymbolPosition.BEFORE:
        return f"{symbol}{delimiter}{amount_string}"
    return f"{amount_string}{delimiter}{symbol}"


def _pick[T](value: T | None, default: T) -> T:
    return default if value is None else value

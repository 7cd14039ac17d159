"""Quickstart example for moneythings.

Shows formatting with currency symbols, parsing user input back to cents,
and validating form input with pydantic.
"""

from pydantic import BaseModel, ValidationError

from moneythings import ToMoneyOptions, create_money_things

money = create_money_things(["usd", "eur"])

# Example 1: Formatting
print("=" * 50)
print("Example 1: Formatting")
print("=" * 50)

print(money.to_money(1500))
# Output: $15
print(money.to_money(123456789))
# Output: $1 234 567,89
print(money.to_money(1550, currency="eur", symbol_position="after", symbol_delimiter=" "))
# Output: 15,50 €
print(money.to_money(15.5, amount_type="floatNumber", decimal_policy="showAlways"))
# Output: $15,50
print(money.format_money(ToMoneyOptions(amount=999, hide_symbol=True, decimal_policy="hideAlways")))
# Output: 9

# Example 2: Parsing
print("\n" + "=" * 50)
print("Example 2: Parsing")
print("=" * 50)

print(money.amount_string_to_integer_with_decimals("1 234,56"))
# Output: 123456
print(money.amount_string_to_float_number("15,50"))
# Output: 15.5
print(money.amount_string_to_integer_with_decimals("not money"))
# Output: nan

# Example 3: Validating form input
print("\n" + "=" * 50)
print("Example 3: Validation")
print("=" * 50)

price_validator = money.amount_integer_with_decimals_limited_validator(0, 100000)
print(price_validator.validate_python("999,99"))
# Output: 99999

try:
    price_validator.validate_python("1 500")
except ValidationError as e:
    print(e.errors()[0]["msg"])
    # Output: Should be between 0,00 and 1 000,00


class Payment(BaseModel):
    amount: money.amount_integer_with_decimals_type  # type: ignore[name-defined]
    currency: money.currency_type  # type: ignore[name-defined]


print(Payment(amount="12,50", currency="eur"))
# Output: amount=1250 currency='eur'

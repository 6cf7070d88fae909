"""
Monetary helpers shared by the lending calculators.

Amounts are carried as Decimal so that repeated additions across a schedule
do not drift. Rounding is always half-up, matching how members see amounts
on statements (37.5 -> 38, never banker's rounding).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from coop_lending.domain.exceptions import InvalidAmountException

Amount = Union[int, float, Decimal]

KOBO = Decimal("0.01")
UNIT = Decimal("1")


def to_decimal(value: Amount) -> Decimal:
    """Convert an amount to Decimal without picking up float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def to_kobo(value: Amount) -> Decimal:
    """Quantize to two decimal places, half-up."""
    return to_decimal(value).quantize(KOBO, rounding=ROUND_HALF_UP)


def round_to_unit(value: Amount) -> int:
    """Round to the nearest whole currency unit, half-up."""
    return int(to_decimal(value).quantize(UNIT, rounding=ROUND_HALF_UP))


def require_non_negative(field: str, value: Amount) -> Decimal:
    amount = to_decimal(value)
    if amount < 0:
        raise InvalidAmountException(field, value)
    return amount


def format_naira(value: Amount) -> str:
    """Format an amount the way member-facing messages show it: ₦20,000."""
    amount = to_decimal(value)
    if amount == amount.to_integral_value():
        return f"₦{int(amount):,}"
    return f"₦{to_kobo(amount):,}"

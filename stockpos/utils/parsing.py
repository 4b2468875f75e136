"""Lenient parsing of form input into numbers."""

from decimal import Decimal, InvalidOperation
from typing import Any


def parse_amount(value: Any, default: Decimal | None = Decimal("0")) -> Decimal | None:
    """
    Parse a money or percentage value.

    Blank or non-numeric input yields ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    if isinstance(value, (int, float)):
        value = str(value)
    text = str(value).strip()
    if not text:
        return default
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return default
    return amount if amount.is_finite() else default


def parse_quantity(value: Any, default: int | None = 0) -> int | None:
    """
    Parse a whole-unit quantity.

    Fractional input is truncated toward zero; blank or non-numeric input
    yields ``default``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    amount = parse_amount(value, default=None)
    if amount is None:
        return default
    return int(amount)

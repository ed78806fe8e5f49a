"""Currency helpers

Amounts are ``Decimal`` inside the front-end. They become floats only in
request payloads and ``$x.xx`` strings only when displayed.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

CENT = Decimal("0.01")
ZERO = Decimal("0")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert an API number to Decimal.

    Floats go through ``str`` so 3.5 becomes Decimal("3.5") rather than
    its binary expansion. Empty strings count as zero, matching
    how the price field of a blank form is submitted.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError("Boolean is not an amount")
    if isinstance(value, str):
        value = value.strip() or "0"
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def round_money(amount: Decimal) -> Decimal:
    """Round to cents, half up"""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def money_to_json(amount: Decimal) -> float:
    """Payload representation: a JSON number with at most 2 decimals"""
    return float(round_money(amount))


def format_money(amount: Decimal) -> str:
    """Display representation, e.g. $7.00"""
    return f"${round_money(amount):.2f}"

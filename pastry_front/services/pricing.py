"""Cart pricing"""

from decimal import Decimal
from typing import Iterable, Mapping

from ..core.money import ZERO, to_decimal
from ..models.catalog import Pastry
from ..models.order import Totals


def compute_totals(
    cart: Mapping[str, int],
    catalog: Iterable[Pastry],
    delivery_fee: Decimal = ZERO,
) -> Totals:
    """
    Price a cart against the current catalog.

    Walks the catalog rather than the cart, so lines for pastries the
    catalog no longer lists contribute nothing and the result does not
    depend on cart order. Lines with quantity <= 0 are skipped. Cart keys
    are compared as text, matching the string ids of parsed pastries.
    """
    delivery_fee = to_decimal(delivery_fee)
    if delivery_fee < 0:
        raise ValueError("Delivery fee cannot be negative")

    quantities = {str(pastry_id): quantity for pastry_id, quantity in cart.items()}

    subtotal = ZERO
    for pastry in catalog:
        quantity = quantities.get(str(pastry.id), 0)
        if quantity > 0:
            subtotal += pastry.price * quantity

    return Totals(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        total=subtotal + delivery_fee,
    )

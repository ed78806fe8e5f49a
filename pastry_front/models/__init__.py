# Front-end Models

from .catalog import Pastry, PastryCreate
from .business import Business, BusinessSignup
from .order import Totals, OrderItem, OrderDraft, PlacedOrder

__all__ = [
    "Pastry",
    "PastryCreate",
    "Business",
    "BusinessSignup",
    "Totals",
    "OrderItem",
    "OrderDraft",
    "PlacedOrder",
]

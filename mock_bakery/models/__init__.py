# Mock Bakery Models

from .pastry import Pastry, PastryCreateRequest
from .business import Business, BusinessSignupRequest, ApprovalRequest
from .order import Order, OrderItem, OrderRequest, OrderStatus

__all__ = [
    "Pastry",
    "PastryCreateRequest",
    "Business",
    "BusinessSignupRequest",
    "ApprovalRequest",
    "Order",
    "OrderItem",
    "OrderRequest",
    "OrderStatus",
]

# Front-end services

from .bakery_client import BakeryClient, BakeryAPIError
from .cart import Cart
from .catalog import CatalogView
from .directory import SignupForm, AdminPanel
from .order_composer import OrderComposer, SubmissionState
from .pricing import compute_totals

__all__ = [
    "BakeryClient",
    "BakeryAPIError",
    "Cart",
    "CatalogView",
    "SignupForm",
    "AdminPanel",
    "OrderComposer",
    "SubmissionState",
    "compute_totals",
]

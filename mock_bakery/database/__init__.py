# Database modules

from .pastries import pastry_db, PastryDatabase
from .businesses import business_db, BusinessDatabase
from .orders import order_db, OrderDatabase

__all__ = [
    "pastry_db",
    "PastryDatabase",
    "business_db",
    "BusinessDatabase",
    "order_db",
    "OrderDatabase",
]

# API Routes

from .pastries import router as pastries_router
from .business import router as business_router
from .orders import router as orders_router

__all__ = ["pastries_router", "business_router", "orders_router"]

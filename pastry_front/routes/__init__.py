# API Routes

from .session import router as session_router
from .order import router as order_router
from .signup import router as signup_router
from .admin import router as admin_router

__all__ = ["session_router", "order_router", "signup_router", "admin_router"]

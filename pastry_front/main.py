"""
Pastry Front Application

Ordering front-end for the bakery: business sign-up,
approvals and catalog admin, and delivery orders.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Query
from fastapi.templating import Jinja2Templates
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .routes import session_router, order_router, signup_router, admin_router
from .routes import deps
from .core.config import settings
from .core.money import format_money
from .core.session import session_manager

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Pastry Front starting up...")
    logger.info(f"Bakery API: {settings.bakery_api_url}")
    logger.info(f"Delivery fee: {format_money(settings.delivery_fee)}")

    yield

    logger.info("Pastry Front shutting down...")
    for session_id in list(session_manager.sessions):
        session_manager.delete_session(session_id)
    if deps.bakery_client:
        await deps.bakery_client.close()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Sign up, get approved, and place pastry orders",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Templates
templates_dir = os.path.join(os.path.dirname(__file__), "templates")
templates = Jinja2Templates(directory=templates_dir) if os.path.exists(templates_dir) else None
if templates:
    templates.env.filters["money"] = format_money

# Include routers
app.include_router(session_router)
app.include_router(order_router)
app.include_router(signup_router)
app.include_router(admin_router)


@app.get("/")
async def home(request: Request, session_id: Optional[str] = Query(None)):
    """Order summary page for a session"""
    session = session_manager.get_session(session_id) if session_id else None
    if templates and session:
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": settings.app_name,
                "session": session,
                "totals": session.composer.totals(),
            },
        )
    return {
        "message": "Pastry Orders API",
        "docs": "/docs",
        "endpoints": {
            "sessions": "/api/sessions",
            "order": "/api/sessions/{session_id}/order",
            "signup": "/api/sessions/{session_id}/signup",
            "businesses": "/api/sessions/{session_id}/businesses",
            "pastries": "/api/sessions/{session_id}/pastries",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "pastry-front",
        "bakery_api_url": settings.bakery_api_url,
        "sessions": len(session_manager.sessions),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pastry_front.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )

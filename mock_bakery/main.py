"""
Mock Bakery Application

An in-memory stand-in for the bakery ordering API.
Serves the pastry catalog, the business directory and order intake.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .routes import pastries_router, business_router, orders_router
from .database import pastry_db, business_db

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Mock Bakery starting up...")
    logger.info(f"Catalog loaded with {len(pastry_db.list_pastries())} pastries")
    yield
    logger.info("Mock Bakery shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Mock Bakery",
    description="Simulated bakery API for the pastry ordering front-end",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("MOCK_BAKERY_CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(pastries_router)
app.include_router(business_router)
app.include_router(orders_router)


@app.get("/")
async def home():
    """API index"""
    return {
        "message": "Mock Bakery API",
        "docs": "/docs",
        "endpoints": {
            "pastries": "/api/pastries",
            "business": "/api/business",
            "orders": "/api/orders",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "mock-bakery",
        "businesses": len(business_db.list_businesses()),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mock_bakery.main:app",
        host=os.getenv("MOCK_BAKERY_HOST", "0.0.0.0"),
        port=int(os.getenv("MOCK_BAKERY_PORT", "8001")),
        reload=True,
    )

"""Pastry catalog routes for mock bakery"""

import logging
from fastapi import APIRouter, HTTPException

from ..models.pastry import Pastry, PastryCreateRequest
from ..database.pastries import pastry_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pastries", tags=["Pastries"])


@router.get("", response_model=list[Pastry])
async def list_pastries():
    """List the pastry catalog"""
    return pastry_db.list_pastries()


@router.post("", response_model=Pastry)
async def create_pastry(request: PastryCreateRequest):
    """Add a pastry to the catalog"""
    pastry = pastry_db.create_pastry(
        name=request.name.strip(),
        price=round(request.price, 2),
        description=request.description or None,
        active=request.active,
    )
    logger.info(f"Pastry {pastry.id} added: {pastry.name} at ${pastry.price:.2f}")
    return pastry


@router.get("/{pastry_id}", response_model=Pastry)
async def get_pastry(pastry_id: str):
    """Get a pastry by ID"""
    pastry = pastry_db.get_pastry(pastry_id)
    if not pastry:
        raise HTTPException(status_code=404, detail="Pastry not found")
    return pastry

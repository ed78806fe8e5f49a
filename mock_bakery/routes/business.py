"""Business directory routes for mock bakery"""

import logging
from fastapi import APIRouter, HTTPException, Query

from ..models.business import Business, BusinessSignupRequest, ApprovalRequest
from ..database.businesses import business_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/business", tags=["Business"])


@router.get("", response_model=list[Business])
async def list_businesses(
    only_pending: bool = Query(False, description="Only businesses awaiting approval"),
):
    """List registered businesses"""
    return business_db.list_businesses(only_pending=only_pending)


@router.post("/signup", response_model=Business)
async def signup(request: BusinessSignupRequest):
    """
    Register a business.

    New businesses start unapproved and cannot place orders
    until an administrator approves them.
    """
    if business_db.find_by_email(request.email):
        raise HTTPException(
            status_code=409,
            detail="A business with this email is already registered",
        )

    business = business_db.register(request)
    logger.info(f"Business {business.id} registered: {business.name}")
    return business


@router.get("/{business_id}", response_model=Business)
async def get_business(business_id: str):
    """Get a business by ID"""
    business = business_db.get_business(business_id)
    if not business:
        raise HTTPException(status_code=404, detail="Business not found")
    return business


@router.patch("/{business_id}/approve", response_model=Business)
async def set_approval(business_id: str, request: ApprovalRequest):
    """Approve or revoke a business"""
    business = business_db.set_approval(business_id, request.approved)
    if not business:
        raise HTTPException(status_code=404, detail="Business not found")

    logger.info(
        f"Business {business.id} {'approved' if business.approved else 'unapproved'}"
    )
    return business

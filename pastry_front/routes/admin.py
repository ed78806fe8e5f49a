"""Admin routes: approvals and pastry creation"""

from typing import Optional
from pydantic import BaseModel
from fastapi import APIRouter, Depends

from ..core.session import FrontSession
from ..services.results import Err
from .deps import get_front_session, raise_for_failure

router = APIRouter(prefix="/api/sessions/{session_id}", tags=["Admin"])


class PendingFilterRequest(BaseModel):
    only_pending: bool


class ApproveRequest(BaseModel):
    approved: bool = True


class PastryFormRequest(BaseModel):
    """Pastry form fields; price is kept as typed until submission"""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    active: Optional[bool] = None


# ==================== Approvals ====================

@router.get("/businesses")
async def refresh_businesses(session: FrontSession = Depends(get_front_session)):
    """Reload the business list with the current filter"""
    await session.admin.refresh()
    return session.admin.to_dict()


@router.put("/businesses/filter")
async def set_pending_filter(
    request: PendingFilterRequest,
    session: FrontSession = Depends(get_front_session),
):
    """Toggle 'only pending' and reload the list"""
    await session.admin.set_only_pending(request.only_pending)
    return session.admin.to_dict()


@router.post("/businesses/{business_id}/approve")
async def approve_business(
    business_id: str,
    request: Optional[ApproveRequest] = None,
    session: FrontSession = Depends(get_front_session),
):
    """Approve (or revoke) a business"""
    approved = request.approved if request else True
    result = await session.admin.approve(business_id, approved)
    if isinstance(result, Err):
        raise_for_failure(result)
    return session.admin.to_dict()


# ==================== Pastries ====================

@router.get("/pastries")
async def refresh_pastries(session: FrontSession = Depends(get_front_session)):
    """Reload the catalog"""
    await session.catalog.refresh()
    return session.catalog.to_dict()


@router.put("/pastries/form")
async def update_pastry_form(
    request: PastryFormRequest,
    session: FrontSession = Depends(get_front_session),
):
    """Edit the pastry creation form"""
    session.admin.update_pastry_form(**request.model_dump(exclude_none=True))
    return session.admin.to_dict()


@router.post("/pastries/form")
async def create_pastry(session: FrontSession = Depends(get_front_session)):
    """Add the pastry typed into the form to the catalog"""
    result = await session.admin.create_pastry()
    if isinstance(result, Err):
        raise_for_failure(result)
    return {
        "pastry": result.value.model_dump(),
        "admin": session.admin.to_dict(),
        "catalog": session.catalog.to_dict(),
    }

"""Order form routes: cart, delivery details and submission"""

from datetime import date, time
from typing import Optional
from pydantic import BaseModel, field_validator
from fastapi import APIRouter, Depends, HTTPException

from ..core.session import FrontSession
from ..services.results import Err
from .deps import get_front_session, raise_for_failure

router = APIRouter(prefix="/api/sessions/{session_id}", tags=["Order"])


class QuantityRequest(BaseModel):
    """Quantity typed into a cart line; negatives are clamped to zero"""
    quantity: int


class OrderDetailsRequest(BaseModel):
    """Fields of the order form; omitted fields are left unchanged"""
    business_id: Optional[str] = None
    delivery_date: Optional[str] = None
    delivery_time: Optional[str] = None
    delivery_address: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("delivery_date")
    @classmethod
    def _check_date(cls, value: Optional[str]) -> Optional[str]:
        # Empty clears the field; anything else must be YYYY-MM-DD
        if value:
            date.fromisoformat(value)
        return value

    @field_validator("delivery_time")
    @classmethod
    def _check_time(cls, value: Optional[str]) -> Optional[str]:
        if value:
            time.fromisoformat(value)
        return value


def _cart_line(session: FrontSession, pastry_id: str, quantity: int) -> dict:
    return {
        "pastry_id": pastry_id,
        "quantity": quantity,
        "totals": session.composer.totals().model_dump(),
    }


@router.put("/cart/{pastry_id}")
async def set_quantity(
    pastry_id: str,
    request: QuantityRequest,
    session: FrontSession = Depends(get_front_session),
):
    """Set the quantity of one pastry"""
    quantity = session.composer.set_quantity(pastry_id, request.quantity)
    return _cart_line(session, pastry_id, quantity)


@router.post("/cart/{pastry_id}/increment")
async def increment(
    pastry_id: str,
    session: FrontSession = Depends(get_front_session),
):
    """Add one of a pastry"""
    quantity = session.composer.increment(pastry_id)
    return _cart_line(session, pastry_id, quantity)


@router.post("/cart/{pastry_id}/decrement")
async def decrement(
    pastry_id: str,
    session: FrontSession = Depends(get_front_session),
):
    """Remove one of a pastry, never below zero"""
    quantity = session.composer.decrement(pastry_id)
    return _cart_line(session, pastry_id, quantity)


@router.put("/order/details")
async def update_details(
    request: OrderDetailsRequest,
    session: FrontSession = Depends(get_front_session),
):
    """Update the business id and delivery fields"""
    composer = session.composer
    if request.business_id is not None:
        composer.set_business_id(request.business_id)
    composer.update_delivery(
        date=request.delivery_date,
        time=request.delivery_time,
        address=request.delivery_address,
        notes=request.notes,
    )
    return composer.to_dict()


@router.post("/order")
async def place_order(session: FrontSession = Depends(get_front_session)):
    """
    Submit the order.

    On failure the cart and delivery fields are kept so the
    user can fix them and try again.
    """
    composer = session.composer
    result = await composer.submit()

    # Session deleted while the order was in flight; its outcome is discarded
    if composer.closed:
        raise HTTPException(status_code=404, detail="Session not found")

    composer.acknowledge()

    if isinstance(result, Err):
        raise_for_failure(result)

    return {
        "order_id": result.value.id,
        "message": composer.message,
        "order": composer.to_dict(),
    }

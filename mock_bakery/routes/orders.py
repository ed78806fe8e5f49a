"""Order routes for mock bakery"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from ..models.order import Order, OrderRequest
from ..database.businesses import business_db
from ..database.orders import order_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])

# Half a cent of slack when comparing client-side totals
TOTALS_TOLERANCE = 0.005


@router.post("", response_model=Order)
async def create_order(request: OrderRequest):
    """
    Accept an order from an approved business.

    Totals are computed by the client; they are checked
    against the submitted items but not recomputed from the catalog.
    """
    business = business_db.get_business(request.business_id)
    if not business:
        raise HTTPException(status_code=404, detail="Business not found")

    if not business.approved:
        raise HTTPException(status_code=403, detail="Business is not approved")

    expected_subtotal = round(
        sum(item.quantity * item.unit_price for item in request.items), 2
    )
    if abs(expected_subtotal - request.subtotal) > TOTALS_TOLERANCE:
        raise HTTPException(
            status_code=400,
            detail=f"Subtotal mismatch: expected {expected_subtotal:.2f}",
        )

    if abs(request.subtotal + request.delivery_fee - request.total) > TOTALS_TOLERANCE:
        raise HTTPException(status_code=400, detail="Total must equal subtotal plus delivery fee")

    order = order_db.create_order(request)

    logger.info(
        f"Order {order.id} created for {business.name}: ${order.total:.2f} "
        f"on {order.delivery_date} {order.delivery_time}"
    )
    return order


@router.get("", response_model=list[Order])
async def list_orders(
    business_id: Optional[str] = Query(None),
    limit: int = Query(50, ge=1, le=200),
):
    """List recent orders"""
    return order_db.list_orders(business_id=business_id, limit=limit)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: str):
    """Get order details"""
    order = order_db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order

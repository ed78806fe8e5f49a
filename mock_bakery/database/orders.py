"""Order storage for mock bakery"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from ..models.order import Order, OrderRequest, OrderStatus


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def reset(self) -> None:
        """Drop every stored order"""
        self.orders = {}

    def create_order(self, request: OrderRequest) -> Order:
        """Store a submitted order"""
        order = Order(
            id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            status=OrderStatus.RECEIVED,
            created_at=datetime.now(timezone.utc),
            **request.model_dump(),
        )

        self.orders[order.id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def list_orders(
        self,
        business_id: Optional[str] = None,
        limit: int = 50,
    ) -> list[Order]:
        """List recent orders"""
        orders = list(self.orders.values())
        if business_id:
            orders = [o for o in orders if o.business_id == business_id]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]


# Singleton instance
order_db = OrderDatabase()

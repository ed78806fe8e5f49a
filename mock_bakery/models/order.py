"""Order models for mock bakery"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, date
from enum import Enum


class OrderStatus(str, Enum):
    RECEIVED = "received"
    SCHEDULED = "scheduled"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderItem(BaseModel):
    """Line of an order, priced at submission time"""
    pastry_id: str
    name: str
    quantity: int = Field(gt=0)
    unit_price: float = Field(ge=0)


class OrderRequest(BaseModel):
    """Order submitted by a business"""
    business_id: str = Field(min_length=1)
    items: list[OrderItem] = Field(min_length=1)
    delivery_date: date
    delivery_time: str = Field(min_length=1)
    delivery_address: str = Field(min_length=1)
    notes: Optional[str] = None
    subtotal: float = Field(ge=0)
    delivery_fee: float = Field(ge=0, default=0.0)
    total: float = Field(ge=0)


class Order(BaseModel):
    """Stored order"""
    id: str
    status: OrderStatus
    business_id: str
    items: list[OrderItem]
    delivery_date: date
    delivery_time: str
    delivery_address: str
    notes: Optional[str] = None
    subtotal: float
    delivery_fee: float
    total: float
    created_at: datetime

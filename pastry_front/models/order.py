"""Order models for the ordering front-end"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..core.money import money_to_json


class Totals(BaseModel):
    """Derived pricing for a cart"""
    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal

    @field_serializer("subtotal", "delivery_fee", "total")
    def _amount_as_number(self, amount: Decimal) -> float:
        return money_to_json(amount)


class OrderItem(BaseModel):
    """Cart line snapshotted at submission time"""
    model_config = ConfigDict(frozen=True)

    pastry_id: str
    name: str
    quantity: int = Field(ge=1)
    unit_price: Decimal

    @field_serializer("unit_price")
    def _price_as_number(self, price: Decimal) -> float:
        return money_to_json(price)


class OrderDraft(BaseModel):
    """
    Finalized order, built fresh for each submission attempt.

    ``to_payload()`` is the body of ``POST /api/orders``:
    amounts rounded to cents, empty notes omitted.
    """
    model_config = ConfigDict(frozen=True)

    business_id: str
    items: tuple[OrderItem, ...] = Field(min_length=1)
    delivery_date: str
    delivery_time: str
    delivery_address: str
    notes: Optional[str] = None
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal

    @field_serializer("subtotal", "delivery_fee", "total")
    def _amount_as_number(self, amount: Decimal) -> float:
        return money_to_json(amount)

    def to_payload(self) -> dict:
        """Request body for the order sink"""
        payload = self.model_dump(exclude_none=True)
        payload["items"] = list(payload["items"])
        return payload


class PlacedOrder(BaseModel):
    """Order sink response; only the identifier is relied upon"""
    model_config = ConfigDict(extra="allow")

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return str(value)

"""Catalog models as seen by the ordering front-end"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator, field_serializer

from ..core.money import to_decimal, round_money, money_to_json


class Pastry(BaseModel):
    """Pastry listed by the catalog source"""
    id: str
    name: str
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    active: bool = True

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        # Numeric ids from the API and path parameters must hit the same cart line
        return str(value)

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_decimal(cls, value):
        # Rounded once here so order lines and the subtotal use the same cents
        return round_money(to_decimal(value))

    @field_serializer("price")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)


class PastryCreate(BaseModel):
    """Body of a pastry creation request"""
    name: str
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    active: bool = True

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_decimal(cls, value):
        return to_decimal(value)

    @field_serializer("price")
    def _price_as_number(self, price: Decimal) -> float:
        return money_to_json(price)

"""Pastry models for mock bakery"""

from pydantic import BaseModel, Field
from typing import Optional


class Pastry(BaseModel):
    """Pastry in the catalog"""
    id: str
    name: str
    description: Optional[str] = None
    price: float = Field(ge=0)
    active: bool = True


class PastryCreateRequest(BaseModel):
    """Request to add a pastry to the catalog"""
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)
    active: bool = True

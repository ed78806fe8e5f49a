"""Business models for mock bakery"""

from pydantic import BaseModel, Field
from datetime import datetime


class Business(BaseModel):
    """Registered business"""
    id: str
    name: str
    email: str
    phone: str
    business_type: str
    address: str
    approved: bool = False
    created_at: datetime


class BusinessSignupRequest(BaseModel):
    """Request to register a business"""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str = ""
    business_type: str = ""
    address: str = ""


class ApprovalRequest(BaseModel):
    """Request to change the approval flag of a business"""
    approved: bool

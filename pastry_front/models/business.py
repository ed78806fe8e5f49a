"""Business directory models"""

from pydantic import BaseModel, ConfigDict, field_validator


class Business(BaseModel):
    """Business record from the directory"""
    id: str
    name: str
    email: str = ""
    phone: str = ""
    business_type: str = ""
    address: str = ""
    approved: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return str(value)


class BusinessSignup(BaseModel):
    """Sign-up form, also the body of the signup request"""
    model_config = ConfigDict(extra="forbid")

    name: str = ""
    email: str = ""
    phone: str = ""
    business_type: str = ""
    address: str = ""

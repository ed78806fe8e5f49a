"""Business sign-up routes"""

from typing import Optional
from pydantic import BaseModel
from fastapi import APIRouter, Depends

from ..core.session import FrontSession
from ..services.results import Err
from .deps import get_front_session, raise_for_failure

router = APIRouter(prefix="/api/sessions/{session_id}/signup", tags=["Signup"])


class SignupFieldsRequest(BaseModel):
    """Sign-up form fields; omitted fields are left unchanged"""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    business_type: Optional[str] = None
    address: Optional[str] = None


@router.put("")
async def update_signup(
    request: SignupFieldsRequest,
    session: FrontSession = Depends(get_front_session),
):
    """Edit the sign-up form"""
    session.signup.update(**request.model_dump(exclude_none=True))
    return session.signup.to_dict()


@router.post("")
async def submit_signup(session: FrontSession = Depends(get_front_session)):
    """Register the business typed into the form"""
    result = await session.signup.submit()
    if isinstance(result, Err):
        raise_for_failure(result)

    return {
        "business_id": result.value.id,
        "signup": session.signup.to_dict(),
        "admin": session.admin.to_dict(),
    }

"""Shared route dependencies"""

from typing import Optional
from fastapi import HTTPException

from ..core.config import settings
from ..core.session import session_manager, FrontSession
from ..services.bakery_client import BakeryClient
from ..services.results import Err, ValidationFailure, ValidationKind

# Initialize services (overridden through app.dependency_overrides in tests)
bakery_client: Optional[BakeryClient] = None


def get_bakery_client() -> BakeryClient:
    """Get or create bakery client"""
    global bakery_client
    if bakery_client is None:
        bakery_client = BakeryClient(
            base_url=settings.bakery_api_url,
            timeout=settings.request_timeout,
        )
    return bakery_client


def get_front_session(session_id: str) -> FrontSession:
    """Resolve the session named in the path"""
    session = session_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    session.touch()
    return session


def raise_for_failure(result: Err) -> None:
    """
    Translate a failed result into an HTTP error.

    409 for a request already in flight, 422 for other local
    validation failures, 502 when the bakery API failed.
    """
    reason = result.reason
    if isinstance(reason, ValidationFailure):
        status_code = 409 if reason.kind == ValidationKind.REQUEST_IN_PROGRESS else 422
        raise HTTPException(
            status_code=status_code,
            detail={"kind": reason.kind.value, "message": reason.message},
        )
    raise HTTPException(
        status_code=502,
        detail={"kind": "transport", "message": reason.message},
    )

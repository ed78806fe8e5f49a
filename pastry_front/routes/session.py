"""Session lifecycle routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..core.config import settings
from ..core.session import session_manager, FrontSession
from ..services.bakery_client import BakeryClient
from .deps import get_bakery_client, get_front_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["Sessions"])


@router.post("")
async def create_session(client: BakeryClient = Depends(get_bakery_client)):
    """
    Start a session.

    Loads the catalog and the pending business list before returning,
    like the first render of the page. Idle sessions are swept first.
    """
    removed = session_manager.cleanup_old_sessions(settings.session_max_age_hours)
    if removed:
        logger.info(f"Dropped {removed} idle session(s)")

    session = session_manager.create_session(
        client,
        delivery_fee=settings.delivery_fee,
        flash_seconds=settings.flash_seconds,
    )
    await session.load()
    return session.to_dict()


@router.get("/{session_id}")
async def get_session(session: FrontSession = Depends(get_front_session)):
    """Serialized view state"""
    return session.to_dict()


@router.delete("/{session_id}")
async def delete_session(session_id: str):
    """Tear down a session"""
    if session_manager.delete_session(session_id):
        return {"message": "Session deleted"}
    raise HTTPException(status_code=404, detail="Session not found")

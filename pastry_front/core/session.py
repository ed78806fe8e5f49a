"""Session management for front-end views"""

import uuid
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from dataclasses import dataclass

from ..services.bakery_client import BakeryClient
from ..services.catalog import CatalogView
from ..services.directory import SignupForm, AdminPanel
from ..services.order_composer import OrderComposer

logger = logging.getLogger(__name__)


@dataclass
class FrontSession:
    """View state of one browser session, one controller per view"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    catalog: CatalogView
    admin: AdminPanel
    signup: SignupForm
    composer: OrderComposer

    @classmethod
    def create(
        cls,
        client: BakeryClient,
        delivery_fee: Decimal,
        flash_seconds: float,
    ) -> "FrontSession":
        now = datetime.now(timezone.utc)
        catalog = CatalogView(client)
        admin = AdminPanel(client, catalog, flash_seconds=flash_seconds)
        return cls(
            session_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            catalog=catalog,
            admin=admin,
            signup=SignupForm(client, on_registered=admin.refresh),
            composer=OrderComposer(client, catalog, delivery_fee=delivery_fee),
        )

    async def load(self) -> None:
        """Initial fetch of the catalog and the business list"""
        await self.catalog.refresh()
        await self.admin.refresh()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def close(self) -> None:
        """Tear down; responses still in flight are discarded"""
        self.composer.close()

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "catalog": self.catalog.to_dict(),
            "signup": self.signup.to_dict(),
            "admin": self.admin.to_dict(),
            "order": self.composer.to_dict(),
        }


class SessionManager:
    """Manages front-end sessions"""

    def __init__(self):
        self.sessions: dict[str, FrontSession] = {}

    def create_session(
        self,
        client: BakeryClient,
        delivery_fee: Decimal = Decimal("0"),
        flash_seconds: float = 1.5,
    ) -> FrontSession:
        """Create a new session"""
        session = FrontSession.create(client, delivery_fee, flash_seconds)
        self.sessions[session.session_id] = session
        logger.debug(f"Session {session.session_id} created")
        return session

    def get_session(self, session_id: str) -> Optional[FrontSession]:
        """Get session by ID"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Delete a session"""
        session = self.sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        return True

    def cleanup_old_sessions(self, max_age_hours: int = 24) -> int:
        """Remove sessions idle for more than max_age_hours"""
        now = datetime.now(timezone.utc)
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            self.delete_session(sid)
        return len(old_sessions)


# Singleton instance
session_manager = SessionManager()

"""Business directory storage for mock bakery"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from ..models.business import Business, BusinessSignupRequest


class BusinessDatabase:
    """In-memory business directory"""

    def __init__(self):
        self.businesses: dict[str, Business] = {}

    def reset(self) -> None:
        """Forget every registered business"""
        self.businesses = {}

    def register(self, request: BusinessSignupRequest) -> Business:
        """Register a business, pending approval"""
        business = Business(
            id=f"biz-{uuid.uuid4().hex[:8]}",
            approved=False,
            created_at=datetime.now(timezone.utc),
            **request.model_dump(),
        )
        self.businesses[business.id] = business
        return business

    def get_business(self, business_id: str) -> Optional[Business]:
        """Get a business by ID"""
        return self.businesses.get(business_id)

    def find_by_email(self, email: str) -> Optional[Business]:
        """Find a business by its contact email (case-insensitive)"""
        email_lower = email.strip().lower()
        return next(
            (b for b in self.businesses.values() if b.email.lower() == email_lower),
            None,
        )

    def list_businesses(self, only_pending: bool = False) -> list[Business]:
        """List businesses, oldest first"""
        results = sorted(self.businesses.values(), key=lambda b: b.created_at)
        if only_pending:
            results = [b for b in results if not b.approved]
        return results

    def set_approval(self, business_id: str, approved: bool) -> Optional[Business]:
        """Update the approval flag"""
        business = self.get_business(business_id)
        if not business:
            return None

        business.approved = approved
        return business


# Singleton instance
business_db = BusinessDatabase()

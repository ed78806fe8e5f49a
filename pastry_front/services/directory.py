"""
Business directory controllers

SignupForm backs the self-registration view, AdminPanel the approval
list and the pastry creation form. Both refresh their listings
explicitly after a mutation succeeds.
"""

import time
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.money import to_decimal
from ..models.business import Business, BusinessSignup
from ..models.catalog import Pastry, PastryCreate
from .bakery_client import BakeryClient, BakeryAPIError
from .catalog import CatalogView
from .results import Ok, Err, Result, TransportFailure, ValidationFailure, ValidationKind

logger = logging.getLogger(__name__)


@dataclass
class SignupResult:
    """Outcome shown under the sign-up form"""
    success: bool
    message: str
    business_id: Optional[str] = None


class SignupForm:
    """Business self-registration"""

    def __init__(
        self,
        client: BakeryClient,
        on_registered: Optional[Callable] = None,
    ):
        self.client = client
        self.form = BusinessSignup()
        self.submitting = False
        self.result: Optional[SignupResult] = None
        # Awaited after a successful signup, e.g. the admin list refresh
        self._on_registered = on_registered

    def update(self, **fields) -> BusinessSignup:
        """Update form fields by name; unknown or mistyped fields raise ValidationError"""
        self.form = BusinessSignup.model_validate({**self.form.model_dump(), **fields})
        return self.form

    async def submit(self) -> Result:
        if self.submitting:
            return Err(ValidationFailure(ValidationKind.REQUEST_IN_PROGRESS))

        self.submitting = True
        self.result = None
        try:
            business = await self.client.signup_business(self.form)
        except BakeryAPIError as e:
            message = e.user_message("Signup failed")
            logger.warning(f"Signup failed: {message}")
            self.result = SignupResult(success=False, message=f"Error: {message}")
            return Err(TransportFailure(message))
        finally:
            self.submitting = False

        self.result = SignupResult(
            success=True,
            message=f"Saved. Your business ID is {business.id}. Pending approval.",
            business_id=business.id,
        )
        self.form = BusinessSignup()
        logger.info(f"Business {business.id} signed up")

        if self._on_registered:
            await self._on_registered()
        return Ok(business)

    def to_dict(self) -> dict:
        return {
            "form": self.form.model_dump(),
            "submitting": self.submitting,
            "result": None if self.result is None else {
                "success": self.result.success,
                "message": self.result.message,
                "business_id": self.result.business_id,
            },
        }


@dataclass
class PastryForm:
    """Pastry creation fields as typed; price stays text until submitted"""
    name: str = ""
    description: str = ""
    price: str = ""
    active: bool = True

    def to_request(self) -> PastryCreate:
        return PastryCreate(
            name=self.name,
            description=self.description or None,
            price=to_decimal(self.price),
            active=self.active,
        )


class AdminPanel:
    """Approvals list and pastry creation"""

    def __init__(
        self,
        client: BakeryClient,
        catalog: CatalogView,
        flash_seconds: float = 1.5,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.catalog = catalog
        self.businesses: list[Business] = []
        self.only_pending = True
        self.pastry_form = PastryForm()
        self.creating_pastry = False
        self.flash_seconds = flash_seconds
        self._clock = clock
        self._message = ""
        self._message_expires_at: Optional[float] = None

    # ==================== Status message ====================

    @property
    def message(self) -> str:
        """Current status text; success messages fade after flash_seconds"""
        if self._message_expires_at is not None and self._clock() >= self._message_expires_at:
            self._message = ""
            self._message_expires_at = None
        return self._message

    def _flash(self, message: str) -> None:
        self._message = message
        self._message_expires_at = self._clock() + self.flash_seconds

    def _show(self, message: str) -> None:
        self._message = message
        self._message_expires_at = None

    # ==================== Approvals ====================

    async def refresh(self) -> list[Business]:
        """Reload the business list with the current filter"""
        try:
            self.businesses = await self.client.list_businesses(only_pending=self.only_pending)
        except BakeryAPIError as e:
            logger.error(f"Failed to load businesses: {e.message}")
        return self.businesses

    async def set_only_pending(self, only_pending: bool) -> list[Business]:
        """Change the pending filter and reload"""
        self.only_pending = only_pending
        return await self.refresh()

    async def approve(self, business_id: str, approved: bool = True) -> Result:
        try:
            business = await self.client.set_approval(business_id, approved)
        except BakeryAPIError as e:
            logger.warning(f"Approval of {business_id} failed: {e.message}")
            self._show("Failed to update approval")
            return Err(TransportFailure(e.user_message("Failed to update approval")))

        await self.refresh()
        self._flash("Updated approval status")
        return Ok(business)

    # ==================== Pastry creation ====================

    def update_pastry_form(self, **fields) -> PastryForm:
        for name, value in fields.items():
            setattr(self.pastry_form, name, value)
        return self.pastry_form

    async def create_pastry(self) -> Result:
        if self.creating_pastry:
            return Err(ValidationFailure(ValidationKind.REQUEST_IN_PROGRESS))

        try:
            request = self.pastry_form.to_request()
        except ValueError as e:
            logger.info(f"Pastry form rejected: {e}")
            self._show("Failed to add pastry")
            return Err(ValidationFailure(ValidationKind.INVALID_PRICE))

        self.creating_pastry = True
        self._show("")
        try:
            pastry: Pastry = await self.client.create_pastry(request)
        except BakeryAPIError as e:
            logger.warning(f"Pastry creation failed: {e.message}")
            self._show("Failed to add pastry")
            return Err(TransportFailure(e.user_message("Failed to add pastry")))
        finally:
            self.creating_pastry = False

        self.pastry_form = PastryForm()
        await self.catalog.refresh()
        self._flash("Pastry added")
        logger.info(f"Pastry {pastry.id} added")
        return Ok(pastry)

    def to_dict(self) -> dict:
        return {
            "only_pending": self.only_pending,
            "businesses": [b.model_dump() for b in self.businesses],
            "pastry_form": {
                "name": self.pastry_form.name,
                "description": self.pastry_form.description,
                "price": self.pastry_form.price,
                "active": self.pastry_form.active,
            },
            "creating_pastry": self.creating_pastry,
            "message": self.message,
        }

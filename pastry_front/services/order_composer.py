"""
Order Composer

Owns the cart, the delivery form and the order submission for one session:
1. Quantities are set per pastry (clamped at zero)
2. Totals are derived from the cart and the current catalog on every read
3. Submission validates locally, snapshots an OrderDraft and posts it once
"""

import logging
from dataclasses import dataclass, asdict
from decimal import Decimal
from enum import Enum
from typing import Optional

from ..core.money import ZERO
from ..models.order import OrderDraft, OrderItem, PlacedOrder, Totals
from .bakery_client import BakeryClient, BakeryAPIError
from .cart import Cart
from .catalog import CatalogView
from .pricing import compute_totals
from .results import Ok, Err, Result, ValidationFailure, ValidationKind, TransportFailure

logger = logging.getLogger(__name__)

ORDER_FAILED_MESSAGE = "Failed to place order"


class SubmissionState(str, Enum):
    """Where the order form is in its submission cycle"""
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class DeliveryForm:
    """Delivery fields as typed into the order form"""
    date: str = ""
    time: str = ""
    address: str = ""
    notes: str = ""

    def is_complete(self) -> bool:
        """Date, time and address are mandatory; notes are not"""
        return all(value.strip() for value in (self.date, self.time, self.address))

    def clear(self) -> None:
        self.date = ""
        self.time = ""
        self.address = ""
        self.notes = ""


class OrderComposer:
    """
    Order form controller.

    Failed submissions never touch the cart or the delivery form;
    only a successful one resets them.
    """

    def __init__(
        self,
        client: BakeryClient,
        catalog: CatalogView,
        delivery_fee: Decimal = ZERO,
    ):
        self.client = client
        self.catalog = catalog
        self.delivery_fee = delivery_fee
        self.business_id = ""
        self.cart = Cart()
        self.delivery = DeliveryForm()
        self.state = SubmissionState.IDLE
        self.message = ""
        self._closed = False

    @property
    def submitting(self) -> bool:
        return self.state == SubmissionState.SUBMITTING

    @property
    def closed(self) -> bool:
        return self._closed

    # ==================== Cart ====================

    def set_quantity(self, pastry_id: str, quantity: int) -> int:
        return self.cart.set_quantity(pastry_id, quantity)

    def increment(self, pastry_id: str) -> int:
        return self.cart.increment(pastry_id)

    def decrement(self, pastry_id: str) -> int:
        return self.cart.decrement(pastry_id)

    def totals(self) -> Totals:
        """Current subtotal, delivery fee and total"""
        return compute_totals(self.cart, self.catalog.pastries, self.delivery_fee)

    # ==================== Form fields ====================

    def set_business_id(self, business_id: str) -> None:
        self.business_id = business_id.strip()

    def update_delivery(
        self,
        date: Optional[str] = None,
        time: Optional[str] = None,
        address: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> DeliveryForm:
        """Update the given delivery fields, leaving the others as they are"""
        if date is not None:
            self.delivery.date = date
        if time is not None:
            self.delivery.time = time
        if address is not None:
            self.delivery.address = address
        if notes is not None:
            self.delivery.notes = notes
        return self.delivery

    # ==================== Submission ====================

    def validate(self) -> Optional[ValidationFailure]:
        """First failing rule, or None when the order may be sent"""
        if not self.business_id:
            return ValidationFailure(ValidationKind.BUSINESS_ID_REQUIRED)

        if not self._selected_pastries():
            return ValidationFailure(ValidationKind.EMPTY_CART)

        if not self.delivery.is_complete():
            return ValidationFailure(ValidationKind.DELIVERY_DETAILS_REQUIRED)

        return None

    def build_draft(self) -> OrderDraft:
        """Snapshot the cart, prices and delivery fields into an order"""
        items = tuple(
            OrderItem(
                pastry_id=pastry.id,
                name=pastry.name,
                quantity=self.cart.quantity(pastry.id),
                unit_price=pastry.price,
            )
            for pastry in self._selected_pastries()
        )
        totals = self.totals()

        return OrderDraft(
            business_id=self.business_id,
            items=items,
            delivery_date=self.delivery.date,
            delivery_time=self.delivery.time,
            delivery_address=self.delivery.address,
            notes=self.delivery.notes or None,
            subtotal=totals.subtotal,
            delivery_fee=totals.delivery_fee,
            total=totals.total,
        )

    async def submit(self) -> Result:
        """
        Validate and place the order.

        Returns Ok(PlacedOrder) or Err with a validation or transport reason.
        A second call while a request is in flight is rejected without
        changing state.
        """
        if self.submitting:
            return Err(ValidationFailure(ValidationKind.REQUEST_IN_PROGRESS))

        self.message = ""
        self.state = SubmissionState.VALIDATING

        failure = self.validate()
        if failure:
            logger.info(f"Order rejected locally: {failure.kind.value}")
            self._fail(failure.message)
            return Err(failure)

        draft = self.build_draft()
        self.state = SubmissionState.SUBMITTING
        logger.info(
            f"Placing order for business {draft.business_id}: "
            f"{len(draft.items)} item(s), total {draft.total}"
        )

        try:
            placed: PlacedOrder = await self.client.create_order(draft)
        except BakeryAPIError as e:
            reason = TransportFailure(e.user_message(ORDER_FAILED_MESSAGE))
            if self._closed:
                logger.debug("Session closed while ordering, dropping failure")
                return Err(reason)
            self._fail(reason.message)
            return Err(reason)

        if self._closed:
            logger.debug(f"Session closed while ordering, order {placed.id} not shown")
            return Ok(placed)

        self.state = SubmissionState.SUCCEEDED
        self.message = f"Order placed. ID: {placed.id}"
        self.cart.clear()
        self.delivery.clear()
        logger.info(f"Order {placed.id} placed")
        return Ok(placed)

    def acknowledge(self) -> None:
        """Caller has seen the outcome; a terminal state goes back to IDLE"""
        if self.state in (SubmissionState.SUCCEEDED, SubmissionState.FAILED):
            self.state = SubmissionState.IDLE

    def close(self) -> None:
        """Stop applying results of requests still in flight"""
        self._closed = True

    def _fail(self, message: str) -> None:
        self.state = SubmissionState.FAILED
        self.message = message

    def _selected_pastries(self) -> list:
        return [p for p in self.catalog.pastries if self.cart.quantity(p.id) > 0]

    def to_dict(self) -> dict:
        totals = self.totals()
        return {
            "business_id": self.business_id,
            "cart": self.cart.to_dict(),
            "delivery": asdict(self.delivery),
            "totals": totals.model_dump(),
            "state": self.state.value,
            "submitting": self.submitting,
            "message": self.message,
        }

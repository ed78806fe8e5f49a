"""Outcome of a front-end operation"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ValidationKind(str, Enum):
    """Local validation failures; none of them reaches the network"""
    BUSINESS_ID_REQUIRED = "business_id_required"
    EMPTY_CART = "empty_cart"
    DELIVERY_DETAILS_REQUIRED = "delivery_details_required"
    REQUEST_IN_PROGRESS = "request_in_progress"
    INVALID_PRICE = "invalid_price"

    @property
    def message(self) -> str:
        return VALIDATION_MESSAGES[self]


VALIDATION_MESSAGES = {
    ValidationKind.BUSINESS_ID_REQUIRED: "Business ID is required",
    ValidationKind.EMPTY_CART: "Please add at least one pastry",
    ValidationKind.DELIVERY_DETAILS_REQUIRED: "Delivery details are required",
    ValidationKind.REQUEST_IN_PROGRESS: "Please wait for the current request to finish",
    ValidationKind.INVALID_PRICE: "Price must be a non-negative amount",
}


@dataclass(frozen=True)
class ValidationFailure:
    kind: ValidationKind

    @property
    def message(self) -> str:
        return self.kind.message


@dataclass(frozen=True)
class TransportFailure:
    """Network error or non-2xx response"""
    message: str


Reason = Union[ValidationFailure, TransportFailure]


@dataclass(frozen=True)
class Ok:
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    reason: Reason

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.reason.message


Result = Union[Ok, Err]

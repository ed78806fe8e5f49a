"""
Bakery API Client

HTTP client for the bakery catalog, business directory and order sink.
No retries, no caching, no pagination: every call is one request.
"""

import json
import logging
from typing import Optional, Any

import httpx
from pydantic import ValidationError

from ..models.catalog import Pastry, PastryCreate
from ..models.business import Business, BusinessSignup
from ..models.order import OrderDraft, PlacedOrder

logger = logging.getLogger(__name__)


class BakeryAPIError(Exception):
    """
    Transport or server failure talking to the bakery API.

    ``message`` is the response body text when the server sent one,
    otherwise a description of the transport error. It may be empty.
    """

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def user_message(self, fallback: str) -> str:
        """Text to show the user, falling back when the server said nothing"""
        return self.message.strip() or fallback


class BakeryClient:
    """
    Client for the bakery HTTP API.

    Usage:
        client = BakeryClient("http://localhost:8001")
        pastries = await client.list_pastries()
        order = await client.create_order(draft)
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize bakery client.

        Args:
            base_url: Base URL of the bakery API
            timeout: Request timeout in seconds, None for no timeout
            transport: Custom httpx transport (tests use MockTransport/ASGITransport)
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> Any:
        """Make an HTTP request, raising BakeryAPIError on any failure"""
        url = f"{self.base_url}{path}"
        body_str = json.dumps(body) if body is not None else None

        headers = {"Accept": "application/json"}
        if body_str is not None:
            headers["Content-Type"] = "application/json"

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                content=body_str,
            )
        except httpx.HTTPError as e:
            logger.error(f"Request {method} {url} failed: {e!r}")
            raise BakeryAPIError(str(e)) from e

        if not response.is_success:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            raise BakeryAPIError(response.text, status_code=response.status_code)

        # An empty 2xx body reads as null; listings treat that as no results
        if not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {method} {url}: {e}")
            raise BakeryAPIError(
                "Invalid response from server",
                status_code=response.status_code,
            ) from e

    def _parse(self, model, data: Any):
        """Validate a response body into a model"""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected {model.__name__} payload: {e}")
            raise BakeryAPIError(f"Unexpected response from server: {e.error_count()} invalid field(s)") from e

    def _parse_list(self, model, data: Any) -> list:
        """Validate a listing; a missing body is an empty listing"""
        if data is None:
            return []
        if not isinstance(data, list):
            raise BakeryAPIError("Unexpected response from server: expected a list")
        return [self._parse(model, item) for item in data]

    # ==================== Catalog APIs ====================

    async def list_pastries(self) -> list[Pastry]:
        """List the pastry catalog"""
        data = await self._request("GET", "/api/pastries")
        return self._parse_list(Pastry, data)

    async def create_pastry(self, pastry: PastryCreate) -> Pastry:
        """Add a pastry to the catalog"""
        data = await self._request(
            "POST",
            "/api/pastries",
            body=pastry.model_dump(exclude_none=True),
        )
        return self._parse(Pastry, data)

    # ==================== Business Directory APIs ====================

    async def list_businesses(self, only_pending: bool = False) -> list[Business]:
        """List businesses, optionally only those awaiting approval"""
        data = await self._request(
            "GET",
            "/api/business",
            params={"only_pending": "true" if only_pending else "false"},
        )
        return self._parse_list(Business, data)

    async def signup_business(self, signup: BusinessSignup) -> Business:
        """Register a business"""
        data = await self._request(
            "POST",
            "/api/business/signup",
            body=signup.model_dump(),
        )
        return self._parse(Business, data)

    async def set_approval(self, business_id: str, approved: bool) -> Business:
        """Approve or revoke a business"""
        data = await self._request(
            "PATCH",
            f"/api/business/{business_id}/approve",
            body={"approved": approved},
        )
        return self._parse(Business, data)

    # ==================== Order APIs ====================

    async def create_order(self, draft: OrderDraft) -> PlacedOrder:
        """Submit a finalized order"""
        data = await self._request("POST", "/api/orders", body=draft.to_payload())
        return self._parse(PlacedOrder, data)

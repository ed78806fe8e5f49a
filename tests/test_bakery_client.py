"""
Tests for the bakery HTTP client.
"""

import json
from decimal import Decimal

import httpx
import pytest

from pastry_front.models.business import BusinessSignup
from pastry_front.models.catalog import PastryCreate
from pastry_front.services.bakery_client import BakeryAPIError

from helpers import RecordingHandler, mock_client


@pytest.mark.asyncio
async def test_list_pastries_normalises_ids_and_prices():
    handler = RecordingHandler({
        "GET /api/pastries": httpx.Response(200, json=[
            {"id": 1, "name": "Croissant", "price": 3.5, "active": True},
            {"id": "abc", "name": "Tart", "description": "Fruit", "price": 5, "active": False},
        ]),
    })
    client = mock_client(handler)

    pastries = await client.list_pastries()

    assert [p.id for p in pastries] == ["1", "abc"]
    assert pastries[0].price == Decimal("3.5")
    assert pastries[0].description is None
    assert pastries[1].active is False


@pytest.mark.asyncio
async def test_null_listing_is_empty():
    client = mock_client(RecordingHandler({
        "GET /api/pastries": httpx.Response(200, content=b"null"),
        "GET /api/business": httpx.Response(200, json=[]),
    }))

    assert await client.list_pastries() == []
    assert await client.list_businesses() == []


@pytest.mark.asyncio
async def test_empty_listing_body_is_empty():
    client = mock_client(RecordingHandler({
        "GET /api/business": httpx.Response(200, content=b""),
    }))

    assert await client.list_businesses(only_pending=True) == []


@pytest.mark.asyncio
async def test_empty_body_for_single_record_raises():
    client = mock_client(RecordingHandler({
        "PATCH /api/business/biz-1/approve": httpx.Response(200, content=b""),
    }))

    with pytest.raises(BakeryAPIError):
        await client.set_approval("biz-1", True)


@pytest.mark.asyncio
async def test_list_businesses_sends_pending_filter():
    handler = RecordingHandler({
        "GET /api/business": httpx.Response(200, json=[
            {"id": "biz-1", "name": "Cafe Nord", "email": "hi@nord.test",
             "phone": "555", "business_type": "cafe", "address": "1 Main", "approved": False},
        ]),
    })
    client = mock_client(handler)

    businesses = await client.list_businesses(only_pending=True)

    assert businesses[0].name == "Cafe Nord"
    assert handler.requests[0].url.params["only_pending"] == "true"


@pytest.mark.asyncio
async def test_create_pastry_omits_empty_description():
    handler = RecordingHandler({
        "POST /api/pastries": lambda request: httpx.Response(
            200, json={"id": "pst-9", **json.loads(request.content)}
        ),
    })
    client = mock_client(handler)

    pastry = await client.create_pastry(PastryCreate(name="Eclair", price="2.5"))

    assert handler.bodies("POST /api/pastries") == [
        {"name": "Eclair", "price": 2.5, "active": True},
    ]
    assert pastry.id == "pst-9"
    assert pastry.price == Decimal("2.5")


@pytest.mark.asyncio
async def test_set_approval_patches_flag():
    handler = RecordingHandler({
        "PATCH /api/business/biz-1/approve": httpx.Response(200, json={
            "id": "biz-1", "name": "Cafe Nord", "approved": True,
        }),
    })
    client = mock_client(handler)

    business = await client.set_approval("biz-1", True)

    assert business.approved is True
    assert handler.bodies("PATCH /api/business/biz-1/approve") == [{"approved": True}]


@pytest.mark.asyncio
async def test_non_2xx_raises_with_body_text():
    client = mock_client(RecordingHandler({
        "POST /api/business/signup": httpx.Response(409, text="Email already registered"),
    }))

    with pytest.raises(BakeryAPIError) as exc_info:
        await client.signup_business(BusinessSignup(name="Cafe", email="a@b.test"))

    assert exc_info.value.status_code == 409
    assert exc_info.value.message == "Email already registered"
    assert exc_info.value.user_message("Signup failed") == "Email already registered"


@pytest.mark.asyncio
async def test_unexpected_payload_raises():
    client = mock_client(RecordingHandler({
        "GET /api/pastries": httpx.Response(200, json={"pastries": []}),
    }))

    with pytest.raises(BakeryAPIError):
        await client.list_pastries()


@pytest.mark.asyncio
async def test_invalid_json_raises():
    client = mock_client(RecordingHandler({
        "POST /api/orders": httpx.Response(200, text="<html>oops</html>"),
    }))

    with pytest.raises(BakeryAPIError) as exc_info:
        await client._request("POST", "/api/orders", body={})

    assert exc_info.value.message == "Invalid response from server"


@pytest.mark.asyncio
async def test_against_mock_bakery(bakery_client):
    pastries = await bakery_client.list_pastries()
    assert {p.name for p in pastries} >= {"Butter Croissant", "Pain au Chocolat"}

    business = await bakery_client.signup_business(BusinessSignup(
        name="Cafe Nord", email="hello@nord.test", phone="555-0100",
        business_type="cafe", address="1 Harbour St",
    ))
    assert business.approved is False

    pending = await bakery_client.list_businesses(only_pending=True)
    assert [b.id for b in pending] == [business.id]

    await bakery_client.set_approval(business.id, True)
    assert await bakery_client.list_businesses(only_pending=True) == []

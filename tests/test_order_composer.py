"""
Tests for the order composer: validation, submission and state resets.
"""

import asyncio
from decimal import Decimal

import httpx
import pytest

from pastry_front.services.order_composer import OrderComposer, SubmissionState
from pastry_front.services.results import Ok, Err, ValidationFailure, ValidationKind, TransportFailure

from helpers import RecordingHandler, mock_client, make_catalog


CATALOG = [
    {"id": 1, "name": "Croissant", "price": 3.50, "active": True},
    {"id": 2, "name": "Financier", "price": 2.00, "active": True},
]


def composer_for(handler) -> OrderComposer:
    client = mock_client(handler)
    return OrderComposer(client, make_catalog(client, CATALOG))


def fill_form(composer: OrderComposer) -> None:
    composer.set_business_id("biz-1")
    composer.update_delivery(
        date="2026-11-02",
        time="07:30",
        address="12 Rue du Four",
    )


@pytest.mark.asyncio
async def test_missing_business_id_fails_without_request():
    handler = RecordingHandler()
    composer = composer_for(handler)
    fill_form(composer)
    composer.set_business_id("")
    composer.set_quantity("1", 1)

    result = await composer.submit()

    assert isinstance(result, Err)
    assert result.reason == ValidationFailure(ValidationKind.BUSINESS_ID_REQUIRED)
    assert composer.message == "Business ID is required"
    assert composer.state == SubmissionState.FAILED
    assert handler.requests == []


@pytest.mark.asyncio
async def test_empty_cart_fails_without_request():
    handler = RecordingHandler()
    composer = composer_for(handler)
    fill_form(composer)
    composer.set_quantity("1", 0)
    composer.set_quantity("2", -2)

    result = await composer.submit()

    assert result.reason.kind == ValidationKind.EMPTY_CART
    assert result.message == "Please add at least one pastry"
    assert handler.requests == []


@pytest.mark.asyncio
async def test_cart_lines_outside_catalog_do_not_count():
    handler = RecordingHandler()
    composer = composer_for(handler)
    fill_form(composer)
    composer.set_quantity("discontinued", 4)

    result = await composer.submit()

    assert result.reason.kind == ValidationKind.EMPTY_CART
    assert handler.requests == []


@pytest.mark.asyncio
async def test_missing_address_fails_without_request():
    handler = RecordingHandler()
    composer = composer_for(handler)
    fill_form(composer)
    composer.update_delivery(address="")
    composer.set_quantity("1", 5)
    composer.set_quantity("2", 1)

    result = await composer.submit()

    assert result.reason.kind == ValidationKind.DELIVERY_DETAILS_REQUIRED
    assert result.message == "Delivery details are required"
    assert handler.requests == []


@pytest.mark.asyncio
async def test_successful_submission_sends_snapshot_and_resets():
    handler = RecordingHandler({
        "POST /api/orders": httpx.Response(200, json={"id": "ORD-42", "status": "received"}),
    })
    composer = composer_for(handler)
    fill_form(composer)
    composer.update_delivery(notes="Back door")
    composer.set_quantity("1", 2)
    composer.set_quantity("2", 0)

    result = await composer.submit()

    assert isinstance(result, Ok)
    assert result.value.id == "ORD-42"
    assert handler.bodies("POST /api/orders") == [{
        "business_id": "biz-1",
        "items": [
            {"pastry_id": "1", "name": "Croissant", "quantity": 2, "unit_price": 3.5},
        ],
        "delivery_date": "2026-11-02",
        "delivery_time": "07:30",
        "delivery_address": "12 Rue du Four",
        "notes": "Back door",
        "subtotal": 7.0,
        "delivery_fee": 0.0,
        "total": 7.0,
    }]

    assert composer.state == SubmissionState.SUCCEEDED
    assert composer.message == "Order placed. ID: ORD-42"
    assert composer.cart.to_dict() == {}
    assert (composer.delivery.date, composer.delivery.time,
            composer.delivery.address, composer.delivery.notes) == ("", "", "", "")
    assert composer.business_id == "biz-1"


@pytest.mark.asyncio
async def test_empty_notes_are_omitted():
    handler = RecordingHandler({
        "POST /api/orders": httpx.Response(200, json={"id": 7}),
    })
    composer = composer_for(handler)
    fill_form(composer)
    composer.set_quantity("2", 3)

    result = await composer.submit()

    assert result.value.id == "7"
    body = handler.bodies("POST /api/orders")[0]
    assert "notes" not in body
    assert body["total"] == 6.0


@pytest.mark.asyncio
async def test_server_error_text_is_surfaced_and_state_kept():
    handler = RecordingHandler({
        "POST /api/orders": httpx.Response(403, text="Business is not approved"),
    })
    composer = composer_for(handler)
    fill_form(composer)
    composer.set_quantity("1", 2)

    result = await composer.submit()

    assert result.reason == TransportFailure("Business is not approved")
    assert composer.message == "Business is not approved"
    assert composer.state == SubmissionState.FAILED
    assert composer.cart.to_dict() == {"1": 2}
    assert composer.delivery.address == "12 Rue du Four"
    assert len(handler.requests) == 1


@pytest.mark.asyncio
async def test_empty_error_body_uses_generic_message():
    handler = RecordingHandler({
        "POST /api/orders": httpx.Response(500, text=""),
    })
    composer = composer_for(handler)
    fill_form(composer)
    composer.set_quantity("1", 1)

    result = await composer.submit()

    assert result.message == "Failed to place order"


@pytest.mark.asyncio
async def test_network_error_is_a_transport_failure():
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    composer = composer_for(RecordingHandler({"POST /api/orders": refuse}))
    fill_form(composer)
    composer.set_quantity("1", 1)

    result = await composer.submit()

    assert isinstance(result.reason, TransportFailure)
    assert result.message == "Connection refused"
    assert composer.cart.to_dict() == {"1": 1}


@pytest.mark.asyncio
async def test_failure_is_recoverable():
    responses = iter([
        httpx.Response(503, text="Kitchen closed"),
        httpx.Response(200, json={"id": "ORD-2"}),
    ])
    handler = RecordingHandler({"POST /api/orders": lambda request: next(responses)})
    composer = composer_for(handler)
    fill_form(composer)
    composer.set_quantity("1", 1)

    first = await composer.submit()
    composer.acknowledge()
    second = await composer.submit()

    assert not first.ok
    assert second.ok
    assert composer.message == "Order placed. ID: ORD-2"


@pytest.mark.asyncio
async def test_second_submit_while_in_flight_is_rejected():
    release = asyncio.Event()
    seen = []

    async def slow(request):
        seen.append(request)
        await release.wait()
        return httpx.Response(200, json={"id": "ORD-1"})

    client = mock_client(slow)
    composer = OrderComposer(client, make_catalog(client, CATALOG))
    fill_form(composer)
    composer.set_quantity("1", 1)

    first = asyncio.create_task(composer.submit())
    while not seen:
        await asyncio.sleep(0)
    assert composer.submitting

    second = await composer.submit()
    assert second.reason.kind == ValidationKind.REQUEST_IN_PROGRESS
    assert composer.state == SubmissionState.SUBMITTING

    release.set()
    assert (await first).ok
    assert len(seen) == 1


@pytest.mark.asyncio
async def test_closed_composer_discards_late_response():
    release = asyncio.Event()

    async def slow(request):
        await release.wait()
        return httpx.Response(200, json={"id": "ORD-9"})

    client = mock_client(slow)
    composer = OrderComposer(client, make_catalog(client, CATALOG))
    fill_form(composer)
    composer.set_quantity("1", 1)

    task = asyncio.create_task(composer.submit())
    await asyncio.sleep(0)
    composer.close()
    release.set()
    result = await task

    assert result.ok
    assert composer.message == ""
    assert composer.cart.to_dict() == {"1": 1}


@pytest.mark.asyncio
async def test_acknowledge_returns_to_idle():
    composer = composer_for(RecordingHandler())

    await composer.submit()
    assert composer.state == SubmissionState.FAILED

    composer.acknowledge()
    assert composer.state == SubmissionState.IDLE
    assert composer.message == "Business ID is required"


def test_totals_follow_the_catalog():
    composer = composer_for(RecordingHandler())
    composer.set_quantity("1", 2)
    composer.increment("2")

    state = composer.to_dict()

    assert state["totals"] == {"subtotal": 9.0, "delivery_fee": 0.0, "total": 9.0}
    assert state["cart"] == {"1": 2, "2": 1}
    assert state["state"] == "idle"


@pytest.mark.asyncio
async def test_numeric_ids_reach_the_order():
    handler = RecordingHandler({
        "POST /api/orders": httpx.Response(200, json={"id": "ORD-3"}),
    })
    composer = composer_for(handler)
    fill_form(composer)
    composer.set_quantity(1, 2)

    assert composer.totals().subtotal == Decimal("7.00")

    result = await composer.submit()

    assert result.ok
    assert handler.bodies("POST /api/orders")[0]["items"] == [
        {"pastry_id": "1", "name": "Croissant", "quantity": 2, "unit_price": 3.5},
    ]


@pytest.mark.asyncio
async def test_line_prices_add_up_to_subtotal():
    handler = RecordingHandler({
        "POST /api/orders": httpx.Response(200, json={"id": "ORD-4"}),
    })
    client = mock_client(handler)
    composer = OrderComposer(client, make_catalog(client, [
        {"id": "m", "name": "Macaron", "price": 0.335},
        {"id": "c", "name": "Canele", "price": 1.004},
    ]))
    fill_form(composer)
    composer.set_quantity("m", 3)
    composer.set_quantity("c", 7)

    await composer.submit()

    body = handler.bodies("POST /api/orders")[0]
    lines = sum(Decimal(str(i["unit_price"])) * i["quantity"] for i in body["items"])
    assert lines == Decimal(str(body["subtotal"]))
    assert body["subtotal"] == 8.02

"""
Tests for the shared catalog view.
"""

import httpx
import pytest

from pastry_front.services.catalog import CatalogView

from helpers import RecordingHandler, mock_client


CROISSANT = {"id": "pst-001", "name": "Butter Croissant", "price": 3.5, "active": True}


@pytest.mark.asyncio
async def test_failed_load_keeps_list_and_reports_error():
    responses = iter([
        httpx.Response(200, json=[CROISSANT]),
        httpx.Response(503, text="Oven maintenance"),
        httpx.Response(200, json=[CROISSANT]),
    ])
    catalog = CatalogView(mock_client(RecordingHandler({
        "GET /api/pastries": lambda request: next(responses),
    })))

    await catalog.refresh()
    await catalog.refresh()

    state = catalog.to_dict()
    assert state["error"] == "Oven maintenance"
    assert [p["id"] for p in state["pastries"]] == ["pst-001"]
    assert state["loading"] is False

    await catalog.refresh()
    assert catalog.to_dict()["error"] is None


@pytest.mark.asyncio
async def test_connection_failure_without_text_uses_fallback():
    def refuse(request):
        raise httpx.ConnectError("", request=request)

    catalog = CatalogView(mock_client(RecordingHandler({"GET /api/pastries": refuse})))

    await catalog.refresh()

    assert catalog.to_dict()["error"] == "Failed to load pastries"
    assert catalog.pastries == []

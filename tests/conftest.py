"""
Shared test fixtures for the pastry ordering suite.
"""

import httpx
import pytest
import pytest_asyncio

from mock_bakery.main import app as bakery_app
from mock_bakery.database import pastry_db, business_db, order_db
from pastry_front.main import app as front_app
from pastry_front.core.session import session_manager
from pastry_front.routes.deps import get_bakery_client
from pastry_front.services.bakery_client import BakeryClient

from helpers import BAKERY_URL


@pytest.fixture(autouse=True)
def reset_state():
    """Every test starts with the seeded catalog and no sessions"""
    pastry_db.reset()
    business_db.reset()
    order_db.reset()
    session_manager.sessions.clear()
    yield
    session_manager.sessions.clear()


# ============================================================================
# Clients wired to the in-process mock bakery
# ============================================================================


@pytest_asyncio.fixture
async def bakery_client():
    """BakeryClient talking to the mock bakery app in-process"""
    client = BakeryClient(BAKERY_URL, transport=httpx.ASGITransport(app=bakery_app))
    yield client
    await client.close()


@pytest_asyncio.fixture
async def bakery_http():
    """Raw HTTP client for the mock bakery app"""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=bakery_app),
        base_url=BAKERY_URL,
    ) as client:
        yield client


@pytest_asyncio.fixture
async def front(bakery_client):
    """HTTP client for the front-end app, whose bakery client hits the mock bakery"""
    front_app.dependency_overrides[get_bakery_client] = lambda: bakery_client
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=front_app),
        base_url="http://front.test",
    ) as client:
        yield client
    front_app.dependency_overrides.clear()

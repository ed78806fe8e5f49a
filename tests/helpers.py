"""
Test helpers: canned bakery responses and preloaded controllers.
"""

import json
from typing import Callable, Optional

import httpx

from pastry_front.models.catalog import Pastry
from pastry_front.services.bakery_client import BakeryClient
from pastry_front.services.catalog import CatalogView


BAKERY_URL = "http://bakery.test"


class RecordingHandler:
    """
    MockTransport handler that records requests and replays canned responses.

    ``routes`` maps "METHOD /path" to a response or a callable taking the request.
    """

    def __init__(self, routes: Optional[dict] = None):
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.method} {request.url.path}"
        route = self.routes.get(key)
        if route is None:
            return httpx.Response(404, text="Not Found")
        if callable(route):
            return route(request)
        return route

    def bodies(self, key: str) -> list:
        method, path = key.split(" ", 1)
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == method and r.url.path == path
        ]


def mock_client(handler: Callable) -> BakeryClient:
    """BakeryClient backed by an httpx.MockTransport"""
    return BakeryClient(BAKERY_URL, transport=httpx.MockTransport(handler))


def make_catalog(client: BakeryClient, pastries: list[dict]) -> CatalogView:
    """CatalogView preloaded without going through the client"""
    catalog = CatalogView(client)
    catalog.pastries = [Pastry.model_validate(p) for p in pastries]
    return catalog

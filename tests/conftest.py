# tests/conftest.py
from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio

from shopify_admin.services.client import ClientConfig, ShopifyClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SHOP_URL = "https://fooshop.myshopify.com"
TEST_API_VERSION = "2024-01"
PATH_PREFIX = f"/admin/api/{TEST_API_VERSION}"
TEST_ACCESS_TOKEN = "abcd"


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURES_DIR / name).read_text())


def api_path(path: str) -> str:
    return f"{PATH_PREFIX}/{path}"


@dataclass
class Route:
    method: str
    path: str
    query: dict[str, str] | None
    status: int
    body: bytes
    headers: dict[str, str]
    error: Exception | None = None


@dataclass
class MockShop:
    """Responder registry behind an `httpx.MockTransport`.

    Routes match on method, path and (optionally) the exact query
    parameters. The most recently registered matching route wins.
    """

    routes: list[Route] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json_body: Any = None,
        body: str | bytes = b"",
        headers: dict[str, str] | None = None,
        query: dict[str, str] | None = None,
        error: Exception | None = None,
    ) -> None:
        if json_body is not None:
            body = json.dumps(json_body)
        if isinstance(body, str):
            body = body.encode()
        self.routes.append(
            Route(method, api_path(path), query, status, body, dict(headers or {}), error)
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params = dict(request.url.params)
        for route in reversed(self.routes):
            if route.method != request.method or route.path != request.url.path:
                continue
            if route.query is not None and route.query != params:
                continue
            if route.error is not None:
                raise route.error
            return httpx.Response(route.status, content=route.body, headers=route.headers)
        return httpx.Response(404, json={"errors": f"No route for {request.method} {request.url}"})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def mock_shop() -> MockShop:
    return MockShop()


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        shop_name="fooshop",
        access_token=TEST_ACCESS_TOKEN,
        api_version=TEST_API_VERSION,
        user_agent="shopify-admin-tests",
    )


@pytest_asyncio.fixture
async def client(client_config: ClientConfig, mock_shop: MockShop) -> AsyncIterator[ShopifyClient]:
    shop_client = ShopifyClient(client_config, transport=mock_shop.transport())
    try:
        yield shop_client
    finally:
        await shop_client.close()


@pytest.fixture
def load_json() -> Callable[[str], Any]:
    return load_fixture

"""HTTP client for the Admin REST API.

This module provides the ShopifyClient class that handles all communication
with a shop's Admin API. It includes:

- Lazily created httpx client with authentication headers
- Mapping of non-2xx responses onto the error hierarchy
- Link-header pagination for list endpoints
- Metrics collection for monitoring
- Resource services (products, collections, payouts, ...) as attributes
"""

from __future__ import annotations

import asyncio
import logging
import re
import time
from collections import Counter
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

import httpx

from shopify_admin.core.errors import (
    RateLimitError,
    ResponseDecodingError,
    ResponseError,
    ShopifyError,
    ShopifyTransportError,
)
from shopify_admin.core.settings import settings
from shopify_admin.schemas.common import CountOptions, QueryOptions, query_params
from shopify_admin.services.collections import SmartCollectionService
from shopify_admin.services.pagination import LINK_HEADER, Pagination, extract_pagination
from shopify_admin.services.payments import PaymentsTransactionService, PayoutService
from shopify_admin.services.products import ProductListingService, ProductService

# Configure logger for this module
logger = logging.getLogger(__name__)

HTTP_TOO_MANY_REQUESTS = 429
ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"
SHOP_DOMAIN_SUFFIX = ".myshopify.com"
_ID_SEGMENT = re.compile(r"/\d+(?=/|\.json$)")


def endpoint_template(method: str, path: str) -> str:
    """Return the metrics key for a request, with resource ids collapsed.

    `GET products/632910392/metafields/7.json` becomes
    `GET products/:id/metafields/:id.json`, so the number of keys is bounded
    by the endpoints the client knows rather than the ids it touches.
    """

    return f"{method} {_ID_SEGMENT.sub('/:id', path)}"


@dataclass
class EndpointStats:
    """Counters for one endpoint template."""

    requests: int = 0
    failures: int = 0
    total_seconds: float = 0.0
    max_seconds: float = 0.0

    def record(self, seconds: float, ok: bool) -> None:
        self.requests += 1
        self.total_seconds += seconds
        self.max_seconds = max(self.max_seconds, seconds)
        if not ok:
            self.failures += 1

    @property
    def average_seconds(self) -> float:
        return self.total_seconds / self.requests if self.requests else 0.0


@dataclass
class RequestMetrics:
    """Per-client request counters.

    Responses are counted by status code; failures that never produced a
    response are counted separately as transport errors.
    """

    endpoints: dict[str, EndpointStats] = field(default_factory=dict)
    status_counts: Counter[int] = field(default_factory=Counter)
    transport_errors: int = 0

    def _stats(self, endpoint: str) -> EndpointStats:
        return self.endpoints.setdefault(endpoint, EndpointStats())

    def record_response(self, endpoint: str, status: int, seconds: float) -> None:
        self.status_counts[status] += 1
        self._stats(endpoint).record(seconds, 200 <= status < 300)

    def record_transport_error(self, endpoint: str, seconds: float) -> None:
        self.transport_errors += 1
        self._stats(endpoint).record(seconds, False)

    @property
    def request_count(self) -> int:
        return sum(stats.requests for stats in self.endpoints.values())

    @property
    def failure_count(self) -> int:
        return sum(stats.failures for stats in self.endpoints.values())

    def snapshot(self) -> dict[str, Any]:
        """Return a plain-dict copy safe to hand out to callers."""

        return {
            "request_count": self.request_count,
            "failure_count": self.failure_count,
            "transport_errors": self.transport_errors,
            "rate_limited": self.status_counts[HTTP_TOO_MANY_REQUESTS],
            "status_counts": dict(self.status_counts),
            "endpoints": {
                name: {
                    "requests": stats.requests,
                    "failures": stats.failures,
                    "average_seconds": stats.average_seconds,
                    "max_seconds": stats.max_seconds,
                }
                for name, stats in self.endpoints.items()
            },
        }


def shop_base_url(shop_name: str) -> str:
    """Normalise a shop name into its `https://<shop>.myshopify.com` origin.

    Accepts the bare handle ("fooshop"), the full domain, or a full URL.
    """

    name = shop_name.strip().lower()
    for scheme in ("https://", "http://"):
        if name.startswith(scheme):
            name = name[len(scheme):]
    name = name.strip("./")
    if not name.endswith(SHOP_DOMAIN_SUFFIX):
        name = f"{name}{SHOP_DOMAIN_SUFFIX}"
    return f"https://{name}"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for API requests."""

    shop_name: str
    access_token: str | None = None
    api_version: str | None = None
    timeout_seconds: float = 10.0
    user_agent: str = "shopify-admin"

    @property
    def path_prefix(self) -> str:
        if self.api_version:
            return f"admin/api/{self.api_version}"
        return "admin"

    @property
    def base_url(self) -> str:
        """Return the URL every endpoint path is resolved against."""
        return f"{shop_base_url(self.shop_name)}/{self.path_prefix}/"


def load_client_config() -> ClientConfig:
    """Build configuration object from global settings."""

    if not settings.shop_name:
        raise ShopifyError("SHOPIFY_SHOP_NAME is not configured")

    return ClientConfig(
        shop_name=settings.shop_name,
        access_token=settings.access_token,
        api_version=settings.api_version,
        timeout_seconds=float(settings.http_timeout_seconds),
        user_agent=settings.user_agent,
    )


def _retry_after_seconds(response: httpx.Response) -> int:
    raw = response.headers.get("Retry-After", "")
    try:
        return int(float(raw))
    except ValueError:
        return 0


def build_response_error(response: httpx.Response) -> ShopifyError:
    """Translate a non-2xx response into the matching exception.

    The body may carry `{"error": "..."}` or `{"errors": ...}` where `errors`
    is a string, a list, or a mapping of field name to a list of messages.
    """

    status = response.status_code
    body = response.content
    error_value: Any = None
    errors_value: Any = None

    if body:
        try:
            payload = response.json()
        except ValueError as exc:
            return ResponseDecodingError(str(exc), body=body, status=status)
        if isinstance(payload, dict):
            error_value = payload.get("error")
            errors_value = payload.get("errors")

    message = error_value if isinstance(error_value, str) else ""
    errors: list[str] = []

    if isinstance(errors_value, str):
        message = errors_value
    elif isinstance(errors_value, list):
        errors = [str(item) for item in errors_value]
        message = ", ".join(errors)
    elif isinstance(errors_value, dict):
        for topic, entries in errors_value.items():
            if not isinstance(entries, list):
                continue
            for entry in entries:
                topic_and_entry = f"{topic}: {entry}"
                if not message:
                    message = topic_and_entry
                errors.append(topic_and_entry)

    if status == HTTP_TOO_MANY_REQUESTS:
        return RateLimitError(
            status, message, errors, retry_after=_retry_after_seconds(response)
        )
    return ResponseError(status, message, errors)


def _decode_json(response: httpx.Response) -> dict[str, Any]:
    if not response.content:
        return {}
    payload = response.json()
    return payload if isinstance(payload, dict) else {}


class ShopifyClient:
    """HTTP client wrapper for Admin API interactions."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or load_client_config()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()
        self._metrics = RequestMetrics()

        self.products = ProductService(self)
        self.product_listings = ProductListingService(self)
        self.smart_collections = SmartCollectionService(self)
        self.payouts = PayoutService(self)
        self.payments_transactions = PaymentsTransactionService(self)

    async def __aenter__(self) -> ShopifyClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    base_url=self.config.base_url,
                    timeout=httpx.Timeout(self.config.timeout_seconds),
                    headers=self._build_headers(),
                    transport=self._transport,
                )

        return self._client

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.access_token:
            headers[ACCESS_TOKEN_HEADER] = self.config.access_token
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_data: Any | None = None,
    ) -> httpx.Response:
        client = await self._ensure_client()

        start_time = time.monotonic()
        endpoint = endpoint_template(method, path)

        try:
            response = await client.request(method, path, params=params, json=json_data)
        except httpx.HTTPError as exc:
            self._metrics.record_transport_error(endpoint, time.monotonic() - start_time)
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ShopifyTransportError(f"Request {method} {path} failed: {exc}") from exc

        elapsed = time.monotonic() - start_time
        self._metrics.record_response(endpoint, response.status_code, elapsed)
        logger.debug("%s %s -> %d (%.1f ms)", method, path, response.status_code, elapsed * 1000)

        if not response.is_success:
            error = build_response_error(response)
            logger.warning("%s %s responded with %d: %s", method, path, response.status_code, error)
            raise error

        return response

    async def get(self, path: str, options: QueryOptions | None = None) -> dict[str, Any]:
        """Perform a GET and return the decoded JSON body."""

        response = await self._request("GET", path, params=query_params(options))
        return _decode_json(response)

    async def list_with_pagination(
        self, path: str, options: QueryOptions | None = None
    ) -> tuple[dict[str, Any], Pagination]:
        """Perform a GET on a list endpoint.

        Returns:
            The decoded JSON body and the pagination extracted from the
            `Link` header.
        """

        response = await self._request("GET", path, params=query_params(options))
        payload = _decode_json(response)
        pagination = extract_pagination(response.headers.get(LINK_HEADER))
        return payload, pagination

    async def count(self, path: str, options: CountOptions | None = None) -> int:
        """Perform a GET on a `count.json` endpoint."""

        payload = await self.get(path, options)
        return int(payload.get("count", 0))

    async def post(self, path: str, data: Any) -> dict[str, Any]:
        response = await self._request("POST", path, json_data=data)
        return _decode_json(response)

    async def put(self, path: str, data: Any) -> dict[str, Any]:
        response = await self._request("PUT", path, json_data=data)
        return _decode_json(response)

    async def delete(self, path: str) -> None:
        await self._request("DELETE", path)

    def get_metrics(self) -> dict[str, Any]:
        """Return request counters keyed by endpoint template and status code."""
        return self._metrics.snapshot()

    async def close(self) -> None:
        """Clean up underlying HTTP client resources."""

        async with self._client_lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None

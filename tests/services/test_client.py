import logging

import httpx
import pytest

from shopify_admin.core.errors import (
    RateLimitError,
    ResponseDecodingError,
    ResponseError,
    ShopifyError,
    ShopifyTransportError,
)
from shopify_admin.services.client import (
    ClientConfig,
    ShopifyClient,
    build_response_error,
    endpoint_template,
    load_client_config,
    shop_base_url,
)


@pytest.mark.parametrize(
    "shop_name",
    [
        "fooshop",
        "FooShop",
        "fooshop.myshopify.com",
        "https://fooshop.myshopify.com",
        "https://fooshop.myshopify.com/",
        "  fooshop  ",
    ],
)
def test_shop_base_url_normalises_names(shop_name):
    assert shop_base_url(shop_name) == "https://fooshop.myshopify.com"


def test_client_config_path_prefix():
    assert ClientConfig(shop_name="fooshop").path_prefix == "admin"
    assert ClientConfig(shop_name="fooshop", api_version="2024-01").path_prefix == "admin/api/2024-01"
    assert ClientConfig(shop_name="fooshop").base_url == "https://fooshop.myshopify.com/admin/"


def test_load_client_config_requires_shop_name(mocker):
    mocker.patch("shopify_admin.services.client.settings.shop_name", None)

    with pytest.raises(ShopifyError, match="SHOPIFY_SHOP_NAME"):
        load_client_config()


def test_load_client_config_from_settings(mocker):
    mocker.patch("shopify_admin.services.client.settings.shop_name", "fooshop")
    mocker.patch("shopify_admin.services.client.settings.access_token", "secret")
    mocker.patch("shopify_admin.services.client.settings.api_version", None)

    config = load_client_config()

    assert config.shop_name == "fooshop"
    assert config.access_token == "secret"
    assert config.path_prefix == "admin"


def _response(status, body=b"", headers=None):
    return httpx.Response(status, content=body, headers=headers or {})


@pytest.mark.parametrize(
    ("status", "body", "message", "errors"),
    [
        (500, b"", "", []),
        (400, b'{"error": "bad request"}', "bad request", []),
        (404, b'{"errors": "Not Found"}', "Not Found", []),
        (422, b'{"errors": ["one", "two"]}', "one, two", ["one", "two"]),
        (
            422,
            b'{"errors": {"title": ["can\'t be blank"], "handle": ["is taken"]}}',
            "title: can't be blank",
            ["title: can't be blank", "handle: is taken"],
        ),
        (400, b'{"error": "outer", "errors": {"title": ["missing"]}}', "outer", ["title: missing"]),
    ],
)
def test_build_response_error(status, body, message, errors):
    error = build_response_error(_response(status, body))

    assert type(error) is ResponseError
    assert error.status == status
    assert error.message == message
    assert error.errors == errors


def test_response_error_string_falls_back_to_sorted_errors():
    assert str(ResponseError(422, errors=["b: x", "a: y"])) == "a: y, b: x"
    assert str(ResponseError(500)) == "Unknown Error"


def test_build_response_error_rate_limit():
    error = build_response_error(
        _response(429, b'{"errors": "Exceeded 2 calls per second"}', {"Retry-After": "2.0"})
    )

    assert isinstance(error, RateLimitError)
    assert error.retry_after == 2
    assert str(error) == "Exceeded 2 calls per second"


def test_build_response_error_rate_limit_without_hint():
    error = build_response_error(_response(429))

    assert isinstance(error, RateLimitError)
    assert error.retry_after == 0


def test_build_response_error_undecodable_body():
    error = build_response_error(_response(502, b"<html>Bad Gateway</html>"))

    assert isinstance(error, ResponseDecodingError)
    assert error.status == 502
    assert error.body == b"<html>Bad Gateway</html>"


@pytest.mark.asyncio
async def test_rate_limited_request_raises(client, mock_shop):
    mock_shop.add(
        "GET", "products.json",
        status=429,
        body='{"errors": "Exceeded 2 calls per second for api client. Reduce request rates to resume uninterrupted service."}',
        headers={"Retry-After": "2.0"},
    )

    with pytest.raises(RateLimitError) as exc_info:
        await client.products.list()

    assert exc_info.value.retry_after == 2


@pytest.mark.asyncio
async def test_transport_errors_are_wrapped(client, mock_shop):
    failure = httpx.ConnectError("connection refused")
    mock_shop.add("GET", "products.json", error=failure)

    with pytest.raises(ShopifyTransportError) as exc_info:
        await client.products.list()

    assert exc_info.value.__cause__ is failure


@pytest.mark.asyncio
async def test_unversioned_client_uses_admin_prefix():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"products": []})

    config = ClientConfig(shop_name="fooshop.myshopify.com", access_token="abcd")
    async with ShopifyClient(config, transport=httpx.MockTransport(handler)) as shop_client:
        await shop_client.products.list()

    assert str(seen[0].url) == "https://fooshop.myshopify.com/admin/products.json"


@pytest.mark.asyncio
async def test_request_without_token_omits_auth_header():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"count": 0})

    config = ClientConfig(shop_name="fooshop")
    async with ShopifyClient(config, transport=httpx.MockTransport(handler)) as shop_client:
        assert await shop_client.products.count() == 0

    assert "X-Shopify-Access-Token" not in seen[0].headers


@pytest.mark.parametrize(
    ("method", "path", "expected"),
    [
        ("GET", "products.json", "GET products.json"),
        ("GET", "products/count.json", "GET products/count.json"),
        ("PUT", "products/632910392.json", "PUT products/:id.json"),
        ("GET", "products/1/metafields/7.json", "GET products/:id/metafields/:id.json"),
        ("GET", "shopify_payments/balance/transactions.json", "GET shopify_payments/balance/transactions.json"),
    ],
)
def test_endpoint_template_collapses_ids(method, path, expected):
    assert endpoint_template(method, path) == expected


@pytest.mark.asyncio
async def test_get_metrics_tracks_requests(client, mock_shop):
    mock_shop.add("GET", "products/count.json", body='{"count": 1}')
    mock_shop.add("GET", "products/1.json", status=404, body='{"errors": "Not Found"}')
    mock_shop.add("GET", "products/2.json", status=429, headers={"Retry-After": "1"})
    mock_shop.add("GET", "products/3.json", error=httpx.ConnectError("connection refused"))

    await client.products.count()
    with pytest.raises(ResponseError):
        await client.products.get(1)
    with pytest.raises(RateLimitError):
        await client.products.get(2)
    with pytest.raises(ShopifyTransportError):
        await client.products.get(3)

    metrics = client.get_metrics()
    assert metrics["request_count"] == 4
    assert metrics["failure_count"] == 3
    assert metrics["transport_errors"] == 1
    assert metrics["rate_limited"] == 1
    assert metrics["status_counts"] == {200: 1, 404: 1, 429: 1}
    assert set(metrics["endpoints"]) == {"GET products/count.json", "GET products/:id.json"}
    assert metrics["endpoints"]["GET products/:id.json"]["requests"] == 3
    assert metrics["endpoints"]["GET products/:id.json"]["failures"] == 3
    assert metrics["endpoints"]["GET products/count.json"]["failures"] == 0


@pytest.mark.asyncio
async def test_get_metrics_keys_stay_bounded_across_ids(client, mock_shop):
    for product_id in range(1, 21):
        mock_shop.add("GET", f"products/{product_id}/metafields.json", body='{"metafields": []}')

    for product_id in range(1, 21):
        await client.products.metafields(product_id).list()

    endpoints = client.get_metrics()["endpoints"]
    assert list(endpoints) == ["GET products/:id/metafields.json"]
    assert endpoints["GET products/:id/metafields.json"]["requests"] == 20


def test_get_metrics_before_any_request(client_config):
    metrics = ShopifyClient(client_config).get_metrics()

    assert metrics["request_count"] == 0
    assert metrics["failure_count"] == 0
    assert metrics["rate_limited"] == 0
    assert metrics["endpoints"] == {}


@pytest.mark.asyncio
async def test_error_responses_are_logged_with_deferred_arguments(client, mock_shop, caplog):
    mock_shop.add("GET", "products/1.json", status=404, body='{"errors": "Not Found"}')

    with caplog.at_level(logging.WARNING, logger="shopify_admin.services.client"):
        with pytest.raises(ResponseError):
            await client.products.get(1)

    record = caplog.records[-1]
    assert record.msg == "%s %s responded with %d: %s"
    assert record.args[:3] == ("GET", "products/1.json", 404)
    assert record.getMessage() == "GET products/1.json responded with 404: Not Found"


@pytest.mark.asyncio
async def test_close_releases_http_client(client, mock_shop):
    mock_shop.add("GET", "products/count.json", body='{"count": 1}')

    await client.products.count()
    assert client._client is not None

    await client.close()
    assert client._client is None

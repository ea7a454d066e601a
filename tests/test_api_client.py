import asyncio
from decimal import Decimal

import httpx
import pytest

from app import app
from errors import ProductListClientError
from services.api_client import fetch_product_list
from services.catalog import generate_products


def test_fetches_products_from_app(client):
    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport) as http:
            return await fetch_product_list("http://testserver/", client=http)

    products = asyncio.run(run())

    assert products == list(generate_products())
    assert products[0].price == Decimal("1200.50")


def test_http_error_raises_client_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "Internal server error"})

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            await fetch_product_list("http://api.local", client=http)

    with pytest.raises(ProductListClientError) as exc_info:
        asyncio.run(run())

    assert exc_info.value.status_code == 502
    assert exc_info.value.url == "http://api.local/api/productlist"


def test_connection_error_raises_client_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            await fetch_product_list("http://api.local", client=http)

    with pytest.raises(ProductListClientError):
        asyncio.run(run())


def _fetch_with(handler):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            return await fetch_product_list("http://api.local", client=http)

    return asyncio.run(run())


def test_non_json_body_raises_client_error():
    with pytest.raises(ProductListClientError) as exc_info:
        _fetch_with(lambda request: httpx.Response(200, text="<html>oops</html>"))

    assert "malformed" in str(exc_info.value)


def test_schema_mismatch_raises_client_error():
    body = [{"id": 1, "name": "Laptop"}]

    with pytest.raises(ProductListClientError):
        _fetch_with(lambda request: httpx.Response(200, json=body))

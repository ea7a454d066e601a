"""HTTP client for the product list endpoint.

What a frontend does on load: one GET against the API origin. Prices are
parsed straight into Decimal so they never round-trip through float.
"""

import logging
from decimal import Decimal

import httpx

from config import settings
from errors import ProductListClientError
from services.catalog import Product

logger = logging.getLogger(__name__)

PRODUCT_LIST_PATH = "/api/productlist"


async def fetch_product_list(
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Product]:
    """Fetch and validate the product list.

    Args:
        base_url: API origin. Defaults to settings.api_base_url.
        client: Optional pre-built client (tests pass one with an ASGI transport).

    Returns:
        Products in the order the server sent them.
    """
    base_url = (base_url or settings.api_base_url).rstrip("/")
    url = f"{base_url}{PRODUCT_LIST_PATH}"

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=10) as own_client:
                resp = await own_client.get(url)
        else:
            resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning("Product list fetch failed for %s: %s", url, e)
        raise ProductListClientError(url, str(e)) from e

    try:
        return [Product.model_validate(item) for item in resp.json(parse_float=Decimal)]
    except (ValueError, TypeError) as e:
        # JSONDecodeError and pydantic's ValidationError are both ValueErrors
        logger.warning("Product list from %s is malformed: %s", url, e)
        raise ProductListClientError(url, f"malformed response: {e}") from e

"""Product list exceptions and the FastAPI handlers that render them."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ProductListError(Exception):
    """Base exception; subclasses pin their own HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class CatalogUnavailableError(ProductListError):
    status_code = 503

    def __init__(self):
        super().__init__("No product data returned from catalog")


class ProductListClientError(ProductListError):
    status_code = 502

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch product list from {url}: {reason}")
        self.url = url


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as {"error": message}."""

    @app.exception_handler(ProductListError)
    async def handle_product_list_error(_request: Request, exc: ProductListError):
        if exc.status_code >= 500:
            logger.warning("%s: %s", type(exc).__name__, exc)
        return _error(str(exc), exc.status_code)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return _error(str(exc), 400)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error("Internal server error", 500)

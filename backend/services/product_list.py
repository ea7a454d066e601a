"""Cache-aside read path for the product list.

One fixed key, absolute expiration. On a miss the catalog is regenerated
and stored; on a hit the stored tuple is returned as-is. The miss path is
serialized by a lock and re-checks the cache after acquiring it, so a cold
start under concurrent requests generates the catalog once per window.
"""

import logging
import threading
from typing import Callable, Sequence

from config import settings
from errors import CatalogUnavailableError
from services.cache import CacheBackend, cache
from services.catalog import Product, generate_products

logger = logging.getLogger(__name__)

PRODUCT_LIST_CACHE_KEY = "productlist_cache"


class ProductListService:
    def __init__(
        self,
        cache_backend: CacheBackend,
        generator: Callable[[], Sequence[Product]] = generate_products,
        ttl_seconds: int = 600,
    ):
        # Checked here so a bad PRODUCT_CACHE_TTL_SECONDS stops the app at import
        if ttl_seconds <= 0:
            raise ValueError(f"Product list TTL must be positive, got {ttl_seconds}")
        self._cache = cache_backend
        self._generator = generator
        self._ttl_seconds = ttl_seconds
        self._lock = threading.Lock()
        self.generation_count = 0

    def get_product_list(self) -> tuple[Product, ...]:
        cached = self._cache.get(PRODUCT_LIST_CACHE_KEY)
        if cached is not None:
            logger.debug("Product list cache hit")
            return cached

        with self._lock:
            cached = self._cache.get(PRODUCT_LIST_CACHE_KEY)
            if cached is not None:
                return cached

            logger.info("Product list cache miss, regenerating catalog")
            products = tuple(self._generator())
            self.generation_count += 1
            if not products:
                raise CatalogUnavailableError()

            self._cache.set(PRODUCT_LIST_CACHE_KEY, products, ttl_seconds=self._ttl_seconds)
            return products

    def is_cached(self) -> bool:
        return self._cache.get(PRODUCT_LIST_CACHE_KEY) is not None


product_list_service = ProductListService(cache, ttl_seconds=settings.product_cache_ttl_seconds)


def get_product_list_service() -> ProductListService:
    """FastAPI dependency; override in tests via app.dependency_overrides."""
    return product_list_service


def get_product_list() -> tuple[Product, ...]:
    return product_list_service.get_product_list()

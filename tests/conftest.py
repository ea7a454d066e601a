"""
Shared fixtures: a controllable clock and an app wired to a fresh cache.
"""

import pytest
from fastapi.testclient import TestClient

from app import app
from services.cache import TTLCache
from services.catalog import generate_products
from services.product_list import ProductListService, get_product_list_service


class FakeClock:
    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingGenerator:
    def __init__(self, source=generate_products):
        self.calls = 0
        self._source = source

    def __call__(self):
        self.calls += 1
        return self._source()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def generator():
    return CountingGenerator()


@pytest.fixture
def service(clock, generator):
    return ProductListService(TTLCache(clock=clock), generator=generator, ttl_seconds=600)


@pytest.fixture
def client(service):
    """Test client whose product list route uses the fixture service."""
    app.dependency_overrides[get_product_list_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()

"""Simple in-memory TTL cache. No Redis needed for a single-slot catalog.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
the product list may be generated twice (once per worker). Expiration is
absolute: an entry dies at insert time + TTL regardless of reads.
"""

import threading
import time
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class CacheBackend(Protocol):
    """Anything with get/set-with-TTL can back the product list."""

    def get(self, key: str) -> Any | None:
        ...

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        ...


class TTLCache:
    """Thread-safe: sync routes read it from FastAPI's threadpool."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._store: dict[str, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self._clock() < expires_at:
                return value
            del self._store[key]
            return None

    def set(self, key: str, value: Any, ttl_seconds: int = 60) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        with self._lock:
            self._store[key] = (self._clock() + ttl_seconds, value)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()


cache = TTLCache()

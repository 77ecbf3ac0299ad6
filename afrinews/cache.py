from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

# Entries live for 5 minutes
DEFAULT_TTL_SECONDS = 5 * 60


class _Miss:
    def __repr__(self) -> str:
        return "MISS"

    def __bool__(self) -> bool:
        return False


MISS: Any = _Miss()


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    stored_at: float


class ExpiringCache:
    """
    Flat key -> value store with a fixed time-to-live per entry.

    Stale entries are evicted lazily when read. There is no capacity bound and
    no LRU ordering. `get` returns `MISS` (not None) so that an empty list is
    still a cache hit.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._storage: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._storage

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._storage[key] = CacheEntry(key=key, value=value, stored_at=self._clock())
        logger.debug("Cached", extra={"cache_key": key})

    def get(self, key: str) -> Any:
        with self._lock:
            entry = self._storage.get(key)
            if entry is None:
                logger.debug("Cache miss", extra={"cache_key": key})
                return MISS

            age = self._clock() - entry.stored_at
            if age > self.ttl_seconds:
                del self._storage[key]
                logger.debug("Cache expired", extra={"cache_key": key, "age_seconds": age})
                return MISS

        logger.debug("Cache hit", extra={"cache_key": key})
        return entry.value

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()
        logger.info("Cache cleared")

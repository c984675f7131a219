"""In-memory currency cache with LRU eviction and TTL expiry."""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from country_services.models import LocalCurrency

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 256
DEFAULT_TTL_SECONDS = 3600.0  # 1 hour


def normalize_code(code: str) -> str:
    """Return the cache key for a country code."""
    return code.strip().upper()


class CurrencyCache:
    """Bounded mapping of country code to :class:`LocalCurrency`.

    Entries leave the cache in two ways: the least recently used entry is
    evicted when a new key is added to a full cache, and an entry older
    than ``ttl_seconds`` is dropped the next time it is looked up.  An
    expired entry is indistinguishable from a missing one.

    All operations take an internal lock, so one cache can back a service
    shared between threads.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl_seconds: float | None = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive or None")
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        # key -> (value, stored_at)
        self._entries: OrderedDict[str, tuple[LocalCurrency, float]] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0

    def _is_expired(self, stored_at: float, now: float) -> bool:
        return self.ttl_seconds is not None and now - stored_at >= self.ttl_seconds

    def get(self, code: str) -> LocalCurrency | None:
        """Return the cached currency if present and fresh, else None."""
        key = normalize_code(code)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None

            value, stored_at = entry
            if self._is_expired(stored_at, self._clock()):
                del self._entries[key]
                self._expirations += 1
                self._misses += 1
                logger.debug("Cache expired for %s", key)
                return None

            self._entries.move_to_end(key)
            self._hits += 1
        logger.debug("Cache hit for %s", key)
        return value

    def put(self, code: str, value: LocalCurrency) -> str | None:
        """Store a currency and return the evicted key, if any."""
        key = normalize_code(code)
        evicted = None
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                self._evictions += 1
            self._entries[key] = (value, self._clock())
        if evicted is not None:
            logger.debug("Evicted %s to make room for %s", evicted, key)
        return evicted

    def delete(self, code: str) -> bool:
        with self._lock:
            return self._entries.pop(normalize_code(code), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        with self._lock:
            entry = self._entries.get(normalize_code(code))
            return entry is not None and not self._is_expired(entry[1], self._clock())

    def __len__(self) -> int:
        # May include expired entries that have not been looked up yet.
        with self._lock:
            return len(self._entries)

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "expirations": self._expirations,
            }

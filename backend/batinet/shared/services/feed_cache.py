"""
Feed Response Cache

Single-slot, TTL-bound memo of the most recent feed response.

How It Works:
=============
    GET /content?page=1
        │ key = FeedCache.key(filters)
        ▼
    cache.get(key) ──hit──▶ return stored FeedPage
        │ miss
        ▼
    FeedService.query_feed(filters) → cache.set(key, page) → return

    POST /content/posts, media remove/reorder/cover, CONTENT tag link/unlink
        └──▶ cache.invalidate()

The slot holds one (key, payload, stored_at) triple. A lookup hits only when
the stored key equals the requested key and the entry is younger than the
TTL. Two interleaving distinct queries therefore never hit; the cache pays
off for the hot default first page.

Concurrency:
============
The application runs on one event loop and the slot is only touched between
awaits, so no lock is needed. Last writer wins; an invalidate racing with a
slow populate can leave a stale entry for at most one TTL.

Lifecycle:
==========
One instance per process, created by create_application() and kept on
app.state. Handlers and services receive it through the get_feed_cache
dependency.
"""

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from batinet.shared.core.logging import get_logger
from batinet.shared.services.feed_filters import FeedFilters


logger = get_logger("batinet.feed")

PayloadT = TypeVar("PayloadT")


@dataclass
class _CacheEntry(Generic[PayloadT]):
    key: str
    payload: PayloadT
    stored_at: float


class FeedCache(Generic[PayloadT]):
    """
    Single-slot TTL cache.

    Args:
        ttl_seconds: Maximum entry age, exclusive
        clock: Monotonic time source in seconds; injectable for tests
    """

    def __init__(
        self,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: Optional[_CacheEntry[PayloadT]] = None

    @staticmethod
    def key(filters: FeedFilters) -> str:
        """Cache key of a sanitized filter set."""
        return filters.cache_key()

    def get(self, key: str) -> Optional[PayloadT]:
        """
        Return the stored payload if it matches `key` and is still fresh.

        Returns:
            The payload, or None on a miss. An expired entry is left in place
            and simply reported as a miss.
        """
        entry = self._entry
        if entry is None or entry.key != key:
            return None
        if self._clock() - entry.stored_at >= self.ttl_seconds:
            return None
        return entry.payload

    def set(self, key: str, payload: PayloadT) -> None:
        """Overwrite the slot."""
        self._entry = _CacheEntry(key=key, payload=payload, stored_at=self._clock())

    def invalidate(self) -> None:
        """Drop the stored entry, if any."""
        if self._entry is not None:
            logger.debug("Feed cache invalidated")
        self._entry = None

    @property
    def is_empty(self) -> bool:
        return self._entry is None

"""
Unit tests for FeedCache and the feed cache key.
"""

import uuid

import pytest

from batinet.shared.services.feed_cache import FeedCache
from batinet.shared.services.feed_filters import FeedFilters


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return FeedCache(ttl_seconds=30.0, clock=clock)


class TestCacheKey:
    """Equal sanitized filters give equal keys."""

    def test_omitted_and_explicit_defaults_collide(self):
        omitted = FeedFilters.from_query()
        explicit = FeedFilters.from_query(kind="all", page="1", page_size="20")
        assert FeedCache.key(omitted) == FeedCache.key(explicit)

    def test_tag_order_and_duplicates_do_not_matter(self):
        a, b = str(uuid.uuid4()), str(uuid.uuid4())
        first = FeedFilters.from_query(tag_ids=f"{a},{b}")
        second = FeedFilters.from_query(tag_ids=f"{b},{a},{b}")
        assert FeedCache.key(first) == FeedCache.key(second)

    def test_parameter_order_does_not_matter(self):
        author = str(uuid.uuid4())
        first = FeedFilters.from_query(search="toit", author_id=author, page="2")
        second = FeedFilters.from_query(page="2", author_id=author, search="toit")
        assert FeedCache.key(first) == FeedCache.key(second)

    def test_malformed_ids_collide_with_absent_ids(self):
        assert FeedCache.key(FeedFilters.from_query(company_id="not-an-id")) == FeedCache.key(
            FeedFilters.from_query()
        )

    def test_clamped_values_collide_with_bounds(self):
        assert FeedCache.key(FeedFilters.from_query(page_size="500")) == FeedCache.key(
            FeedFilters.from_query(page_size="100")
        )

    def test_different_filters_differ(self):
        assert FeedCache.key(FeedFilters.from_query(page="1")) != FeedCache.key(
            FeedFilters.from_query(page="2")
        )
        assert FeedCache.key(FeedFilters.from_query(kind="POST")) != FeedCache.key(
            FeedFilters.from_query(kind="TENDER")
        )


class TestFeedCache:
    """Single-slot TTL behaviour."""

    def test_empty_cache_misses(self, cache):
        assert cache.get("k") is None
        assert cache.is_empty

    def test_get_returns_payload_for_same_key(self, cache):
        cache.set("k", {"items": []})
        assert cache.get("k") == {"items": []}

    def test_get_misses_for_other_key(self, cache):
        cache.set("k", "payload")
        assert cache.get("other") is None

    def test_hit_just_before_ttl(self, cache, clock):
        cache.set("k", "payload")
        clock.advance(30.0 - 0.001)
        assert cache.get("k") == "payload"

    def test_miss_just_after_ttl(self, cache, clock):
        cache.set("k", "payload")
        clock.advance(30.0 + 0.001)
        assert cache.get("k") is None

    def test_miss_exactly_at_ttl(self, cache, clock):
        cache.set("k", "payload")
        clock.advance(30.0)
        assert cache.get("k") is None

    def test_set_overwrites_single_slot(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_set_restarts_ttl(self, cache, clock):
        cache.set("k", 1)
        clock.advance(20)
        cache.set("k", 2)
        clock.advance(20)
        assert cache.get("k") == 2

    def test_invalidate_clears_slot(self, cache):
        cache.set("k", "payload")
        cache.invalidate()
        assert cache.get("k") is None
        assert cache.is_empty

    def test_get_has_no_side_effects(self, cache, clock):
        cache.set("k", "payload")
        clock.advance(31)
        assert cache.get("k") is None
        assert not cache.is_empty

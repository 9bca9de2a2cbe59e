"""Unit tests for ResponseCache."""

from tests.conftest import FakeClock
from volunteer_finder.cache import ResponseCache


class TestResponseCache:
    """Tests for ResponseCache expiry and lifecycle."""

    def test_miss(self, clock: FakeClock) -> None:
        cache = ResponseCache(clock=clock)
        assert cache.get("missing") is None

    def test_hit_within_ttl(self, clock: FakeClock) -> None:
        cache = ResponseCache(ttl_seconds=600, clock=clock)
        cache.set("k", {"opportunities": []})
        clock.advance(599)
        entry = cache.get("k")
        assert entry is not None
        assert entry.payload == {"opportunities": []}
        assert entry.stored_at == 1000.0

    def test_stale_at_ttl(self, clock: FakeClock) -> None:
        """Entry is stale once exactly ttl has elapsed."""
        cache = ResponseCache(ttl_seconds=600, clock=clock)
        cache.set("k", [1])
        clock.advance(600)
        assert cache.get("k") is None

    def test_stale_entries_are_kept(self, clock: FakeClock) -> None:
        """Expiry is lazy: stale entries are ignored, not removed."""
        cache = ResponseCache(ttl_seconds=10, clock=clock)
        cache.set("k", [1])
        clock.advance(60)
        assert cache.get("k") is None
        assert len(cache) == 1

    def test_set_overwrites_and_refreshes(self, clock: FakeClock) -> None:
        cache = ResponseCache(ttl_seconds=10, clock=clock)
        cache.set("k", "old")
        clock.advance(8)
        cache.set("k", "new")
        clock.advance(8)
        entry = cache.get("k")
        assert entry is not None
        assert entry.payload == "new"

    def test_falsy_payload_is_cached(self, clock: FakeClock) -> None:
        cache = ResponseCache(clock=clock)
        cache.set("k", [])
        assert cache.get("k") is not None

    def test_clear(self, clock: FakeClock) -> None:
        cache = ResponseCache(clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert len(cache) == 0
        assert cache.get("a") is None

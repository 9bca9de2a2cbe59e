"""Unit tests for CachedFetcher."""

import httpx
import pytest

from tests.conftest import json_response
from volunteer_finder.errors import SourceParseError, SourceTransportError
from volunteer_finder.fetcher import build_url, cache_key

URL = "https://api.example.org/search?location=Arlington"


class TestHelpers:
    """Tests for URL and cache key helpers."""

    def test_cache_key_includes_options(self) -> None:
        a = cache_key(URL, {"headers": {"X-API-Key": "a"}})
        b = cache_key(URL, {"headers": {"X-API-Key": "b"}})
        assert a != b
        assert a.startswith(URL)

    def test_cache_key_is_order_independent(self) -> None:
        a = cache_key(URL, {"headers": {"A": "1", "B": "2"}})
        b = cache_key(URL, {"headers": {"B": "2", "A": "1"}})
        assert a == b

    def test_cache_key_without_options(self) -> None:
        assert cache_key(URL) == URL + "{}"

    def test_build_url_encodes_params(self) -> None:
        url = httpx.URL(build_url("https://x.org/search", {"q": "Arlington, VA", "limit": 1}))
        assert url.params["q"] == "Arlington, VA"
        assert url.params["limit"] == "1"


class TestCachedFetcher:
    """Tests for cached GET behavior."""

    @pytest.mark.asyncio
    async def test_second_call_within_ttl_uses_cache(self, make_fetcher, clock) -> None:
        """Two calls within ten minutes make one network request; a later call makes another."""
        fetcher, transport = make_fetcher(lambda request: json_response({"opportunities": []}))

        await fetcher.get_json(URL)
        clock.advance(5 * 60)
        await fetcher.get_json(URL)
        assert len(transport.requests) == 1

        clock.advance(6 * 60)
        await fetcher.get_json(URL)
        assert len(transport.requests) == 2

    @pytest.mark.asyncio
    async def test_different_headers_not_shared(self, make_fetcher) -> None:
        fetcher, transport = make_fetcher(lambda request: json_response({"ok": True}))
        await fetcher.get_json(URL, headers={"Authorization": "Bearer a"})
        await fetcher.get_json(URL, headers={"Authorization": "Bearer b"})
        assert len(transport.requests) == 2

    @pytest.mark.asyncio
    async def test_sends_headers(self, make_fetcher) -> None:
        fetcher, transport = make_fetcher(lambda request: json_response({}))
        await fetcher.get_json(URL, headers={"X-API-Key": "secret"})
        assert transport.requests[0].headers["X-API-Key"] == "secret"

    @pytest.mark.asyncio
    async def test_http_error_raises_and_is_not_cached(self, make_fetcher) -> None:
        fetcher, transport = make_fetcher(lambda request: json_response({"error": "down"}, status_code=503))
        with pytest.raises(SourceTransportError) as exc_info:
            await fetcher.get_json(URL)
        assert exc_info.value.status_code == 503
        with pytest.raises(SourceTransportError):
            await fetcher.get_json(URL)
        assert len(transport.requests) == 2
        assert len(fetcher.cache) == 0

    @pytest.mark.asyncio
    async def test_network_error_raises_transport_error(self, make_fetcher) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        fetcher, _ = make_fetcher(handler)
        with pytest.raises(SourceTransportError, match="connection refused"):
            await fetcher.get_json(URL)

    @pytest.mark.asyncio
    async def test_malformed_json_raises_parse_error(self, make_fetcher) -> None:
        fetcher, _ = make_fetcher(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
        with pytest.raises(SourceParseError):
            await fetcher.get_json(URL)
        assert len(fetcher.cache) == 0

"""Cached JSON GET over httpx."""

import json
import logging
from typing import Any, Mapping, Optional

import httpx

from volunteer_finder.cache import ResponseCache
from volunteer_finder.errors import SourceParseError, SourceTransportError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "volunteer-finder/0.1 (volunteer opportunity search)",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def cache_key(url: str, options: Optional[Mapping[str, Any]] = None) -> str:
    """Request signature: full URL followed by the serialized request options."""
    return url + json.dumps(dict(options or {}), sort_keys=True)


def build_url(base_url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Encode params onto base_url."""
    return str(httpx.URL(base_url, params={k: str(v) for k, v in (params or {}).items()}))


def new_client(timeout: float = 30.0) -> httpx.AsyncClient:
    """Async client with the package's default headers."""
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        headers=DEFAULT_HEADERS,
    )


class CachedFetcher:
    """
    Performs GET requests and memoizes successful JSON bodies.
    A live cache entry short-circuits the network call; failures are raised
    as SourceTransportError / SourceParseError and never cached.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[ResponseCache] = None,
        *,
        timeout: float = 30.0,
    ):
        self._client = client or new_client(timeout)
        self._owns_client = client is None
        self.cache = cache if cache is not None else ResponseCache()

    async def get_json(self, url: str, *, headers: Optional[Mapping[str, str]] = None) -> Any:
        """GET url and return the parsed JSON body, using the cache when live."""
        options = {"headers": dict(headers)} if headers else {}
        key = cache_key(url, options)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", url)
            return cached.payload

        try:
            resp = await self._client.get(url, headers=headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SourceTransportError(
                url, f"HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            raise SourceTransportError(url, str(e) or type(e).__name__) from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise SourceParseError(f"Malformed JSON from {url}: {e}") from e

        self.cache.set(key, payload)
        return payload

    async def aclose(self) -> None:
        """Close the HTTP client if this object created it."""
        if self._owns_client:
            await self._client.aclose()

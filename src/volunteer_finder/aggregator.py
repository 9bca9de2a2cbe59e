"""Multi-source search: concurrent fan-out, merge and deduplication."""

import asyncio
import logging
from typing import Iterable, Optional

import httpx

from volunteer_finder.cache import ResponseCache
from volunteer_finder.config import Settings
from volunteer_finder.fallback import fallback_data
from volunteer_finder.fetcher import CachedFetcher
from volunteer_finder.geocoding import Geocoder
from volunteer_finder.models.filters import SearchFilters
from volunteer_finder.models.opportunity import GeoPoint, Opportunity, SearchResults, SourceResult
from volunteer_finder.sources.base import BaseSource
from volunteer_finder.sources.registry import SourceRegistry

logger = logging.getLogger(__name__)


def combine_results(results: Iterable[SearchResults]) -> SearchResults:
    """
    Flatten results in order, keeping the first opportunity per
    title/organization key. Inputs are not modified.
    """
    combined: list[Opportunity] = []
    seen: set[str] = set()
    for result in results:
        for opp in result.opportunities:
            key = opp.dedup_key
            if key in seen:
                # Distinct events sharing title and organization collapse here too.
                logger.debug("Dropping duplicate opportunity %r (id=%s)", key, opp.id)
                continue
            seen.add(key)
            combined.append(opp)
    return SearchResults(opportunities=combined)


class Aggregator:
    """
    Searches every enabled source for a location and merges the results.
    Owns one response cache and one HTTP client; both can be injected.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[ResponseCache] = None,
    ):
        self.settings = settings or Settings.from_env()
        self.cache = cache if cache is not None else ResponseCache(self.settings.cache_ttl_seconds)
        self._fetcher = CachedFetcher(client, self.cache, timeout=self.settings.request_timeout)
        self._sources: dict[str, BaseSource] = {
            source_id: SourceRegistry.get(source_id, self._fetcher, self.settings)
            for source_id in self.settings.enabled_sources
        }
        self.geocoder = Geocoder(
            self._fetcher,
            provider=self.settings.geocoder,
            google_api_key=self.settings.google_maps_api_key,
        )

    async def __aenter__(self) -> "Aggregator":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._fetcher.aclose()

    @property
    def source_ids(self) -> list[str]:
        return list(self._sources.keys())

    def source(self, source_id: str) -> BaseSource:
        """Enabled source by id; ValueError when unknown or disabled."""
        try:
            return self._sources[source_id.lower()]
        except KeyError:
            raise ValueError(f"Source not enabled: {source_id}. Enabled: {self.source_ids}") from None

    async def geocode_location(self, address: str) -> Optional[GeoPoint]:
        """GeoPoint for address, or None when it cannot be resolved."""
        return await self.geocoder.geocode(address)

    async def search_source(
        self,
        source_id: str,
        location: str,
        filters: Optional[SearchFilters] = None,
    ) -> SourceResult:
        """Search one source; provider failures come back as a fallback result."""
        return await self.source(source_id).search(location, filters or SearchFilters())

    async def search_all_sources(
        self,
        location: str,
        filters: Optional[SearchFilters] = None,
    ) -> SearchResults:
        """
        Search all enabled sources concurrently and merge the results.
        Waits for every source to settle; a source that raises is dropped.
        Falls back to fallback_data if the orchestration itself fails.
        """
        filters = filters or SearchFilters()
        try:
            outcomes = await asyncio.gather(
                *(src.search(location, filters) for src in self._sources.values()),
                return_exceptions=True,
            )
            successful: list[SourceResult] = []
            for source_id, outcome in zip(self._sources, outcomes):
                if isinstance(outcome, BaseException):
                    logger.error("Source %s raised during search: %r", source_id, outcome)
                    continue
                successful.append(outcome)
            return combine_results(successful)
        except Exception:
            logger.exception("Error searching all sources")
            return fallback_data(location, filters)

    def fallback_data(self, location: str, filters: Optional[SearchFilters] = None) -> SearchResults:
        return fallback_data(location, filters)

"""Abstract base class for opportunity sources."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import ValidationError

from volunteer_finder.errors import MissingApiKey, SourceParseError, VolunteerFinderError
from volunteer_finder.fallback import fallback_data
from volunteer_finder.fetcher import CachedFetcher, build_url
from volunteer_finder.models.filters import SearchFilters
from volunteer_finder.models.opportunity import SourceResult
from volunteer_finder.models.responses import SourceResponse

logger = logging.getLogger(__name__)


class BaseSource(ABC):
    """
    Standard interface for volunteer opportunity APIs.
    Subclasses map location/filters onto their query parameters and supply an
    auth header; search() handles fetching, validation and fallback.
    """

    source_id: str = ""
    display_name: str = ""
    BASE_URL: str = ""

    def __init__(
        self,
        fetcher: CachedFetcher,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        self._fetcher = fetcher
        self.api_key = api_key
        self.base_url = base_url or self.BASE_URL

    @abstractmethod
    def build_params(self, location: str, filters: SearchFilters) -> dict[str, Any]:
        """Query parameters for a search."""
        pass

    @abstractmethod
    def auth_headers(self) -> dict[str, str]:
        """Headers carrying the API key."""
        pass

    def build_url(self, location: str, filters: Optional[SearchFilters] = None) -> str:
        """Full search URL including source-specific and shared filter params."""
        filters = filters or SearchFilters()
        params = self.build_params(location, filters)
        params.update(filters.extra_params())
        return build_url(self.base_url, params)

    def parse(self, payload: Any) -> SourceResponse:
        """Validate a response body; raises SourceParseError on schema mismatch."""
        try:
            return SourceResponse.model_validate(payload)
        except ValidationError as e:
            raise SourceParseError(
                f"{self.source_id} response did not match schema: {e.error_count()} error(s)"
            ) from e

    async def search(self, location: str, filters: Optional[SearchFilters] = None) -> SourceResult:
        """
        Search this source. Never raises for provider problems: a missing key,
        transport failure, malformed body or schema mismatch yields the
        fallback record with fallback=True.
        """
        filters = filters or SearchFilters()
        try:
            if not self.api_key:
                raise MissingApiKey(self.source_id)
            payload = await self._fetcher.get_json(
                self.build_url(location, filters),
                headers=self.auth_headers(),
            )
            response = self.parse(payload)
        except VolunteerFinderError as e:
            logger.warning("%s unavailable, using fallback data: %s", self.display_name or self.source_id, e)
            return self.fallback(location, filters, str(e))

        return SourceResult(source=self.source_id, opportunities=response.opportunities)

    def fallback(self, location: str, filters: SearchFilters, reason: str) -> SourceResult:
        """Fallback record wrapped as this source's result."""
        return SourceResult(
            source=self.source_id,
            opportunities=fallback_data(location, filters).opportunities,
            fallback=True,
            error=reason,
        )

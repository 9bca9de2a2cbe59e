"""VolunteerMatch search API."""

from typing import Any

from volunteer_finder.models.filters import SearchFilters
from volunteer_finder.sources.base import BaseSource

RESULTS_PER_PAGE = 20


class VolunteerMatchSource(BaseSource):
    """VolunteerMatch: free-text location, bearer token auth."""

    source_id = "volunteermatch"
    display_name = "VolunteerMatch"
    BASE_URL = "https://api.volunteermatch.org/search"

    def build_params(self, location: str, filters: SearchFilters) -> dict[str, Any]:
        return {
            "location": location,
            "radius": filters.radius(),
            "category": filters.category or "",
            "resultsPerPage": RESULTS_PER_PAGE,
        }

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

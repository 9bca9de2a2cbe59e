"""United Way volunteer opportunities API."""

from typing import Any

from volunteer_finder.models.filters import SearchFilters
from volunteer_finder.sources.base import BaseSource


class UnitedWaySource(BaseSource):
    """United Way: category is sent as 'cause'."""

    source_id = "unitedway"
    display_name = "United Way"
    BASE_URL = "https://api.unitedway.org/volunteer-opportunities"

    def build_params(self, location: str, filters: SearchFilters) -> dict[str, Any]:
        return {
            "location": location,
            "radius": filters.radius(),
            "cause": filters.category or "",
        }

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

"""Fixed opportunity set returned when providers cannot be reached."""

from typing import Optional

from volunteer_finder.models.filters import SearchFilters
from volunteer_finder.models.opportunity import Opportunity, SearchResults


def fallback_data(location: str, filters: Optional[SearchFilters] = None) -> SearchResults:
    """Single community-cleanup record located at the searched location."""
    filters = filters or SearchFilters()
    return SearchResults(
        opportunities=[
            Opportunity(
                id="fallback-1",
                title="Community Cleanup Event",
                organization="Local Environmental Group",
                category=filters.category or "environment",
                description="Help clean up local parks and waterways.",
                date="This Weekend",
                time="9:00 AM - 1:00 PM",
                location=location,
                skills="None required",
                contact="info@localenv.org",
            )
        ]
    )

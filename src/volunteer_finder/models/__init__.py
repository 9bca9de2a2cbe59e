"""Data models for opportunities, filters and provider responses."""

from volunteer_finder.models.filters import CATEGORIES, SearchFilters
from volunteer_finder.models.opportunity import GeoPoint, Opportunity, SearchResults, SourceResult

__all__ = ["CATEGORIES", "GeoPoint", "Opportunity", "SearchFilters", "SearchResults", "SourceResult"]

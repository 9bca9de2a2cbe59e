"""Opportunity, location and result models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Opportunity(BaseModel):
    """
    One volunteer opportunity as returned by a source or scraper.
    Providers send partial records; missing or null text fields become "",
    numbers in text fields become strings, and unknown fields are kept so
    callers can pass them through.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str = ""
    title: str = ""
    organization: str = ""
    category: str = ""
    description: str = ""
    date: str = ""
    time: Optional[str] = None
    location: str = ""
    skills: Optional[str] = None
    contact: str = ""
    link: Optional[str] = None

    @field_validator(
        "id", "title", "organization", "category", "description", "date", "location", "contact",
        mode="before",
    )
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value

    @property
    def dedup_key(self) -> str:
        """Key used to treat records from different sources as the same opportunity."""
        return f"{self.title}-{self.organization}"


class GeoPoint(BaseModel):
    """Latitude/longitude pair from geocoding."""

    lat: float
    lng: float


class SearchResults(BaseModel):
    """A list of opportunities, the shape every search returns."""

    opportunities: list[Opportunity] = Field(default_factory=list)


class SourceResult(SearchResults):
    """Outcome of one source call: real results, or the fallback record plus the reason."""

    source: str
    fallback: bool = False
    error: Optional[str] = None

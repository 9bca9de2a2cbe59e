"""Schemas for provider response bodies, validated at the HTTP boundary."""

from pydantic import BaseModel, ConfigDict, Field

from volunteer_finder.models.opportunity import Opportunity


class SourceResponse(BaseModel):
    """Body of an opportunity-source search: must carry an opportunities list."""

    model_config = ConfigDict(extra="ignore")

    opportunities: list[Opportunity]


class NominatimMatch(BaseModel):
    """One element of the Nominatim search array. lat/lon arrive as strings."""

    model_config = ConfigDict(extra="ignore")

    lat: float
    lon: float
    display_name: str = ""


class GoogleLatLng(BaseModel):
    lat: float
    lng: float


class GoogleGeometry(BaseModel):
    location: GoogleLatLng


class GoogleGeocodeResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    geometry: GoogleGeometry


class GoogleGeocodeResponse(BaseModel):
    """Google Geocoding API body."""

    model_config = ConfigDict(extra="ignore")

    status: str = ""
    results: list[GoogleGeocodeResult] = Field(default_factory=list)


class ProxyResponse(BaseModel):
    """CORS-relay proxy body wrapping the raw page HTML."""

    model_config = ConfigDict(extra="ignore")

    contents: str

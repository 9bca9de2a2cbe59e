"""Free-text address geocoding via Nominatim or Google."""

import logging
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from volunteer_finder.errors import (
    LocationNotFound,
    MissingApiKey,
    SourceParseError,
    SourceTransportError,
    VolunteerFinderError,
)
from volunteer_finder.fetcher import CachedFetcher, build_url
from volunteer_finder.models.opportunity import GeoPoint
from volunteer_finder.models.responses import GoogleGeocodeResponse, NominatimMatch

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
# Anything else (REQUEST_DENIED, OVER_QUERY_LIMIT, INVALID_REQUEST, ...) is a provider failure.
GOOGLE_OK_STATUSES = ("OK", "ZERO_RESULTS")

_nominatim_matches = TypeAdapter(list[NominatimMatch])


class Geocoder:
    """
    Resolves an address to a GeoPoint. geocode() never raises for provider
    problems; a miss or failure is logged and returns None.
    """

    def __init__(
        self,
        fetcher: CachedFetcher,
        provider: str = "nominatim",
        google_api_key: Optional[str] = None,
        nominatim_url: str = NOMINATIM_URL,
        google_url: str = GOOGLE_GEOCODE_URL,
    ):
        self._fetcher = fetcher
        self.provider = provider
        self.google_api_key = google_api_key
        self.nominatim_url = nominatim_url
        self.google_url = google_url

    async def geocode(self, address: str) -> Optional[GeoPoint]:
        """Return the best match for address, or None."""
        if not address or not address.strip():
            return None
        try:
            if self.provider == "google":
                return await self._geocode_google(address)
            return await self._geocode_nominatim(address)
        except LocationNotFound:
            logger.info("No geocoding match for %r", address)
        except VolunteerFinderError as e:
            logger.error("Geocoding failed for %r: %s", address, e)
        return None

    async def _geocode_nominatim(self, address: str) -> GeoPoint:
        url = build_url(self.nominatim_url, {"q": address, "format": "json", "limit": 1})
        payload = await self._fetcher.get_json(url)
        matches = _validate(_nominatim_matches, payload)
        if not matches:
            raise LocationNotFound(address)
        return GeoPoint(lat=matches[0].lat, lng=matches[0].lon)

    async def _geocode_google(self, address: str) -> GeoPoint:
        if not self.google_api_key:
            raise MissingApiKey("google")
        url = build_url(self.google_url, {"address": address, "key": self.google_api_key})
        payload = await self._fetcher.get_json(url)
        body = _validate(TypeAdapter(GoogleGeocodeResponse), payload)
        if body.status not in GOOGLE_OK_STATUSES:
            raise SourceTransportError(self.google_url, f"Google geocoding status {body.status or 'missing'}")
        if not body.results:
            raise LocationNotFound(address)
        loc = body.results[0].geometry.location
        return GeoPoint(lat=loc.lat, lng=loc.lng)


def _validate(adapter: TypeAdapter, payload: Any) -> Any:
    try:
        return adapter.validate_python(payload)
    except ValidationError as e:
        raise SourceParseError(f"Unexpected geocoding response: {e.error_count()} error(s)") from e

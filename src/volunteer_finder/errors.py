"""Exception types raised inside the package.

None of these cross a public operation boundary: the aggregator, geocoder and
scraper catch them and return fallback or empty values instead.
"""


class VolunteerFinderError(Exception):
    """Base class for volunteer-finder errors."""


class SourceTransportError(VolunteerFinderError):
    """Non-2xx response or network failure talking to a provider."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


class SourceParseError(VolunteerFinderError):
    """Provider body was not valid JSON/HTML or did not match its schema."""


class LocationNotFound(VolunteerFinderError):
    """Geocoding returned no matches."""


class MissingApiKey(VolunteerFinderError):
    """A provider needs an API key that is not configured."""

    def __init__(self, source_id: str):
        super().__init__(f"No API key configured for {source_id}")
        self.source_id = source_id

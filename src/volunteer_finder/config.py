"""Runtime settings read from environment variables."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_SOURCES = ["volunteermatch", "justserve", "unitedway"]
DEFAULT_SCRAPE_PROXY = "https://api.allorigins.win/get"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


class Settings(BaseModel):
    """API keys and tunables. Missing keys put the matching source in fallback mode."""

    volunteer_match_api_key: Optional[str] = None
    justserve_api_key: Optional[str] = None
    united_way_api_key: Optional[str] = None
    google_maps_api_key: Optional[str] = None

    geocoder: str = Field(default="nominatim", description="nominatim | google")
    cache_ttl_seconds: float = Field(default=600.0, gt=0)
    request_timeout: float = Field(default=30.0, gt=0)
    enabled_sources: list[str] = Field(default_factory=lambda: list(DEFAULT_SOURCES))
    scrape_proxy_url: str = DEFAULT_SCRAPE_PROXY

    # Per-source base URL overrides, e.g. {"justserve": "http://localhost:8080/api/opportunities"}
    base_urls: dict[str, str] = Field(default_factory=dict)

    @field_validator("geocoder")
    @classmethod
    def _check_geocoder(cls, value: str) -> str:
        value = value.lower().strip()
        if value not in ("nominatim", "google"):
            raise ValueError(f"Unknown geocoder: {value}. Use 'nominatim' or 'google'")
        return value

    @field_validator("enabled_sources")
    @classmethod
    def _normalize_sources(cls, value: list[str]) -> list[str]:
        return [s.strip().lower() for s in value if s.strip()]

    def api_key_for(self, source_id: str) -> Optional[str]:
        """Return the configured key for a source id, or None."""
        return {
            "volunteermatch": self.volunteer_match_api_key,
            "justserve": self.justserve_api_key,
            "unitedway": self.united_way_api_key,
            "google": self.google_maps_api_key,
        }.get(source_id)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from os.environ (or the given mapping)."""
        env = os.environ if environ is None else environ
        data: dict = {
            "volunteer_match_api_key": _env(env, "VOLUNTEER_MATCH_API_KEY"),
            "justserve_api_key": _env(env, "JUSTSERVE_API_KEY"),
            "united_way_api_key": _env(env, "UNITED_WAY_API_KEY"),
            "google_maps_api_key": _env(env, "GOOGLE_MAPS_API_KEY"),
        }
        geocoder = _env(env, "VOLUNTEER_FINDER_GEOCODER")
        if geocoder:
            data["geocoder"] = geocoder
        ttl = _env(env, "VOLUNTEER_FINDER_CACHE_TTL")
        if ttl:
            data["cache_ttl_seconds"] = ttl
        timeout = _env(env, "VOLUNTEER_FINDER_TIMEOUT")
        if timeout:
            data["request_timeout"] = timeout
        sources = _env(env, "VOLUNTEER_FINDER_SOURCES")
        if sources:
            data["enabled_sources"] = sources.split(",")
        proxy = _env(env, "VOLUNTEER_FINDER_SCRAPE_PROXY")
        if proxy:
            data["scrape_proxy_url"] = proxy
        return cls.model_validate(data)

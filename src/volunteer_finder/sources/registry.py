"""Registry for discovering and instantiating sources."""

from typing import Optional, Type

from volunteer_finder.config import Settings
from volunteer_finder.fetcher import CachedFetcher
from volunteer_finder.sources.base import BaseSource
from volunteer_finder.sources.justserve import JustServeSource
from volunteer_finder.sources.unitedway import UnitedWaySource
from volunteer_finder.sources.volunteermatch import VolunteerMatchSource


class SourceRegistry:
    """Discovers and provides opportunity sources."""

    _sources: dict[str, Type[BaseSource]] = {
        "volunteermatch": VolunteerMatchSource,
        "justserve": JustServeSource,
        "unitedway": UnitedWaySource,
    }

    @classmethod
    def get(
        cls,
        source_id: str,
        fetcher: CachedFetcher,
        settings: Optional[Settings] = None,
    ) -> BaseSource:
        """Source instance wired to fetcher, with key and base URL from settings."""
        source_cls = cls._sources.get(source_id.lower())
        if not source_cls:
            raise ValueError(f"Unknown source: {source_id}. Available: {list(cls._sources.keys())}")
        settings = settings or Settings()
        return source_cls(
            fetcher,
            api_key=settings.api_key_for(source_cls.source_id),
            base_url=settings.base_urls.get(source_cls.source_id),
        )

    @classmethod
    def available_sources(cls) -> list[str]:
        """Return list of available source identifiers."""
        return list(cls._sources.keys())

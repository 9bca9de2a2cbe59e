"""HTML scraping for volunteer sites without an API."""

from volunteer_finder.scraper.scraper import VolunteerScraper
from volunteer_finder.scraper.targets import ScrapeSelectors, ScrapeTarget

__all__ = ["ScrapeSelectors", "ScrapeTarget", "VolunteerScraper"]

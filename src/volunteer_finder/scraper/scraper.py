"""Scrape opportunity cards from HTML pages fetched through a CORS relay."""

import logging
import time
from typing import Callable, Iterable, Optional
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup, Tag

from volunteer_finder.config import DEFAULT_SCRAPE_PROXY
from volunteer_finder.fetcher import new_client
from volunteer_finder.models.opportunity import Opportunity
from volunteer_finder.models.responses import ProxyResponse
from volunteer_finder.scraper.targets import ScrapeSelectors, ScrapeTarget

logger = logging.getLogger(__name__)


def extract_text(element: Tag, selector: Optional[str]) -> str:
    """Stripped text of the first match under element; "" if none."""
    if not selector:
        return ""
    target = element.select_one(selector)
    return target.get_text().strip() if target else ""


def extract_link(element: Tag, selector: Optional[str], base_url: str) -> str:
    """href of the first match, made absolute against base_url."""
    if not selector:
        return ""
    target = element.select_one(selector)
    if target is None:
        return ""
    href = target.get("href")
    if not href or not isinstance(href, str):
        return ""
    return href if href.startswith("http") else urljoin(base_url, href)


def parse_opportunities(
    html: str,
    page_url: str,
    selectors: ScrapeSelectors,
    now_ms: Optional[int] = None,
) -> list[Opportunity]:
    """Build opportunities from each container match; cards without a title are skipped."""
    soup = BeautifulSoup(html, "html.parser")
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    opportunities: list[Opportunity] = []
    for index, element in enumerate(soup.select(selectors.container)):
        opp = Opportunity(
            id=f"scraped-{stamp}-{index}",
            title=extract_text(element, selectors.title),
            organization=extract_text(element, selectors.organization),
            description=extract_text(element, selectors.description),
            date=extract_text(element, selectors.date),
            location=extract_text(element, selectors.location),
            link=extract_link(element, selectors.link, page_url),
        )
        if opp.title:
            opportunities.append(opp)
    return opportunities


class VolunteerScraper:
    """
    Fetches pages via a relay that returns {"contents": "<html>"} and extracts
    opportunity cards. scrape_site() returns [] on any failure.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        proxy_url: str = DEFAULT_SCRAPE_PROXY,
        clock: Callable[[], float] = time.time,
    ):
        self._client = client or new_client()
        self._owns_client = client is None
        self.proxy_url = proxy_url
        self._clock = clock

    async def aclose(self) -> None:
        """Close the HTTP client if this object created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_html(self, url: str) -> str:
        """Raw HTML of url as relayed by the proxy."""
        resp = await self._client.get(self.proxy_url, params={"url": url})
        resp.raise_for_status()
        return ProxyResponse.model_validate(resp.json()).contents

    async def scrape_site(self, url: str, selectors: ScrapeSelectors) -> list[Opportunity]:
        """Scrape one page; errors are logged and yield an empty list."""
        try:
            html = await self.fetch_html(url)
            return parse_opportunities(html, url, selectors, now_ms=int(self._clock() * 1000))
        except Exception as e:
            logger.error("Scraping %s failed: %s", url, e)
            return []

    async def scrape_targets(self, targets: Iterable[ScrapeTarget]) -> list[Opportunity]:
        """Scrape each target in turn and concatenate the results."""
        results: list[Opportunity] = []
        for target in targets:
            found = await self.scrape_site(target.url, target.selectors)
            logger.info("Scraped %d opportunities from %s", len(found), target.name)
            results.extend(found)
        return results

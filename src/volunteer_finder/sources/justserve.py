"""JustServe opportunities API.

JustServe searches by zip code rather than free text and identifies
categories by numeric catalog id, so location and category are translated
before the request is built.
"""

import re
from typing import Any

from volunteer_finder.models.filters import CATEGORIES, SearchFilters
from volunteer_finder.sources.base import BaseSource

# Arlington, VA
DEFAULT_ZIP_CODE = "22201"
_ZIP_PATTERN = re.compile(r"\b\d{5}\b")

CATEGORY_IDS: dict[str, int] = {name: i for i, name in enumerate(CATEGORIES, start=1)}


def extract_zip_code(location: str) -> str:
    """First standalone 5-digit number in location, else the default zip."""
    m = _ZIP_PATTERN.search(location or "")
    return m.group(0) if m else DEFAULT_ZIP_CODE


def map_category(category: str | None) -> int | str:
    """JustServe catalog id for a category label; "" when unrecognized."""
    return CATEGORY_IDS.get((category or "").lower(), "")


class JustServeSource(BaseSource):
    """JustServe: zip code + miles, X-API-Key auth."""

    source_id = "justserve"
    display_name = "JustServe"
    BASE_URL = "https://www.justserve.org/api/opportunities"

    def build_params(self, location: str, filters: SearchFilters) -> dict[str, Any]:
        return {
            "zipCode": extract_zip_code(location),
            "miles": filters.radius(),
            "categoryId": map_category(filters.category),
        }

    def auth_headers(self) -> dict[str, str]:
        return {"X-API-Key": self.api_key or ""}

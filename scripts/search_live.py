#!/usr/bin/env python3
"""Quick live test of geocoding plus the multi-source search.

Run:
  poetry run python scripts/search_live.py                      # Arlington, VA
  poetry run python scripts/search_live.py "Seattle, WA 98101"  # any location
  poetry run python scripts/search_live.py "Denver, CO" education
"""

import asyncio
import sys

from volunteer_finder.aggregator import Aggregator
from volunteer_finder.models.filters import SearchFilters


async def run(location: str, category: str) -> None:
    async with Aggregator() as aggregator:
        point = await aggregator.geocode_location(location)
        print(f"Geocoded {location!r} -> {point}")

        filters = SearchFilters(category=category)
        for source_id in aggregator.source_ids:
            result = await aggregator.search_source(source_id, location, filters)
            state = f"fallback ({result.error})" if result.fallback else "ok"
            print(f"  {source_id}: {len(result.opportunities)} opportunities, {state}")

        combined = await aggregator.search_all_sources(location, filters)
        print(f"Combined: {len(combined.opportunities)} opportunities")
        for i, opp in enumerate(combined.opportunities[:5], 1):
            print(f"  {i}. {opp.title} ({opp.organization or 'N/A'})")


def main() -> None:
    location = sys.argv[1] if len(sys.argv) > 1 else "Arlington, VA 22201"
    category = sys.argv[2] if len(sys.argv) > 2 else ""
    try:
        asyncio.run(run(location, category))
    except ValueError as e:
        raise SystemExit(str(e))


if __name__ == "__main__":
    main()

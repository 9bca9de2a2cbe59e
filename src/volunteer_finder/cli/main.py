"""Main CLI entry point."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="volunteer-finder", description="Find volunteer opportunities near you")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # search
    search_parser = subparsers.add_parser("search", help="Search all configured sources")
    search_parser.add_argument("--location", required=True, help="Address, city or zip code")
    search_parser.add_argument("--category", default="", help="Opportunity category (e.g. education)")
    search_parser.add_argument("--distance", type=float, default=None, help="Search radius in miles (default: 25)")
    search_parser.add_argument("--date-from", type=date.fromisoformat, default=None, help="Earliest date (YYYY-MM-DD)")
    search_parser.add_argument("--date-to", type=date.fromisoformat, default=None, help="Latest date (YYYY-MM-DD)")
    search_parser.add_argument("--time-commitment", default=None, help="e.g. one-time, weekly")
    search_parser.add_argument(
        "--source",
        action="append",
        default=None,
        help="Only search this source (repeatable)",
    )
    search_parser.add_argument("--output", type=Path, default=None, help="Write JSON to file (default: stdout)")

    # geocode
    geocode_parser = subparsers.add_parser("geocode", help="Resolve an address to coordinates")
    geocode_parser.add_argument("address", help="Free-text address")

    # scrape
    scrape_parser = subparsers.add_parser("scrape", help="Scrape sites listed in a targets YAML")
    scrape_parser.add_argument("--targets", type=Path, required=True, help="Path to targets YAML")
    scrape_parser.add_argument("--output", type=Path, default=None, help="Write JSON to file (default: stdout)")

    # sources
    subparsers.add_parser("sources", help="List sources and whether an API key is configured")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "search":
        _run_search(args)
    elif args.command == "geocode":
        _run_geocode(args)
    elif args.command == "scrape":
        _run_scrape(args)
    elif args.command == "sources":
        _run_sources(args)
    else:
        parser.print_help()


def _write_output(data, output: Path | None, noun: str) -> None:
    text = json.dumps(data, indent=2, default=str)
    if output:
        output.write_text(text, encoding="utf-8")
        print(f"Wrote {len(data)} {noun} to {output}")
    else:
        print(text)


def _run_search(args: argparse.Namespace) -> None:
    """Run search command."""
    from pydantic import ValidationError

    from volunteer_finder.aggregator import Aggregator
    from volunteer_finder.config import Settings
    from volunteer_finder.models.filters import SearchFilters

    try:
        filters = SearchFilters(
            distance=args.distance,
            category=args.category,
            date_from=args.date_from,
            date_to=args.date_to,
            time_commitment=args.time_commitment,
        )
    except ValidationError as e:
        raise SystemExit(f"Invalid filters: {e.errors()[0]['msg']}")

    settings = Settings.from_env()
    if args.source:
        settings = settings.model_copy(update={"enabled_sources": [s.lower() for s in args.source]})

    async def _search():
        async with Aggregator(settings) as aggregator:
            return await aggregator.search_all_sources(args.location, filters)

    try:
        results = asyncio.run(_search())
    except ValueError as e:
        raise SystemExit(str(e))
    _write_output(
        [o.model_dump(mode="json", exclude_none=True) for o in results.opportunities],
        args.output,
        "opportunities",
    )


def _run_geocode(args: argparse.Namespace) -> None:
    """Run geocode command."""
    from volunteer_finder.aggregator import Aggregator
    from volunteer_finder.config import Settings

    try:
        # Geocoding uses no opportunity sources.
        settings = Settings.from_env().model_copy(update={"enabled_sources": []})
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    async def _geocode():
        async with Aggregator(settings) as aggregator:
            return await aggregator.geocode_location(args.address)

    point = asyncio.run(_geocode())
    if point is None:
        print(f"Could not geocode: {args.address}", file=sys.stderr)
        raise SystemExit(1)
    print(json.dumps(point.model_dump()))


def _run_scrape(args: argparse.Namespace) -> None:
    """Run scrape command."""
    from volunteer_finder.config import Settings
    from volunteer_finder.scraper import ScrapeTarget, VolunteerScraper

    targets = ScrapeTarget.load_many(args.targets)
    if not targets:
        raise SystemExit(f"No scrape targets in {args.targets}")

    async def _scrape():
        scraper = VolunteerScraper(proxy_url=Settings.from_env().scrape_proxy_url)
        try:
            return await scraper.scrape_targets(targets)
        finally:
            await scraper.aclose()

    opportunities = asyncio.run(_scrape())
    _write_output(
        [o.model_dump(mode="json", exclude_none=True) for o in opportunities],
        args.output,
        "opportunities",
    )


def _run_sources(args: argparse.Namespace) -> None:
    """Run sources command."""
    from volunteer_finder.config import Settings
    from volunteer_finder.sources.registry import SourceRegistry

    settings = Settings.from_env()
    for source_id in SourceRegistry.available_sources():
        key_state = "key set" if settings.api_key_for(source_id) else "no key (fallback data)"
        enabled = "enabled" if source_id in settings.enabled_sources else "disabled"
        print(f"  {source_id}: {enabled}, {key_state}")


if __name__ == "__main__":
    main()

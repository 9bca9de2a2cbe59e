"""Volunteer opportunity finder: multi-source search, geocoding and scraping."""

__version__ = "0.1.0"

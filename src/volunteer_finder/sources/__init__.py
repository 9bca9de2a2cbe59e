"""Volunteer opportunity sources."""

from volunteer_finder.sources.base import BaseSource
from volunteer_finder.sources.registry import SourceRegistry

__all__ = ["BaseSource", "SourceRegistry"]

"""Selector configuration for scraped sites."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class ScrapeSelectors(BaseModel):
    """CSS selectors: one for the repeating card, the rest relative to it."""

    container: str = Field(..., description="Selector for each opportunity card")
    title: Optional[str] = None
    organization: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None
    link: Optional[str] = None


class ScrapeTarget(BaseModel):
    """A page to scrape and how to read it."""

    name: str
    url: str
    selectors: ScrapeSelectors

    @classmethod
    def load_many(cls, path: str | Path) -> list["ScrapeTarget"]:
        """
        Load targets from YAML. Accepts a top-level list or a mapping with a
        'targets' list.
        """
        data = yaml.safe_load(Path(path).read_text()) or []
        if isinstance(data, dict):
            data = data.get("targets", [])
        return [cls.model_validate(item) for item in data]

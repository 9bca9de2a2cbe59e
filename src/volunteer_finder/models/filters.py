"""Search filter model."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

# Order matters: JustServe numbers its catalog 1..10 in this order.
CATEGORIES: tuple[str, ...] = (
    "education",
    "environment",
    "health",
    "community",
    "seniors",
    "animals",
    "disaster",
    "homeless",
    "youth",
    "arts",
)

DEFAULT_DISTANCE = 25


class SearchFilters(BaseModel):
    """Optional narrowing of a search. Unset fields take each source's defaults."""

    distance: Optional[float] = Field(default=None, gt=0, description="Search radius (miles)")
    category: str = ""
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    time_commitment: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _check_category(cls, value: Optional[str]) -> str:
        if value is None:
            return ""
        value = str(value).strip().lower()
        if value and value not in CATEGORIES:
            raise ValueError(f"Unknown category: {value}. Available: {list(CATEGORIES)}")
        return value

    @model_validator(mode="after")
    def _check_date_range(self) -> "SearchFilters":
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("date_from must not be after date_to")
        return self

    def radius(self) -> int | float:
        """Distance to send to a source, defaulting to 25."""
        if not self.distance:
            return DEFAULT_DISTANCE
        return int(self.distance) if float(self.distance).is_integer() else self.distance

    def extra_params(self) -> dict[str, str]:
        """Date range and time commitment as query parameters; unset values omitted."""
        params: dict[str, str] = {}
        if self.date_from:
            params["startDate"] = self.date_from.isoformat()
        if self.date_to:
            params["endDate"] = self.date_to.isoformat()
        if self.time_commitment:
            params["timeCommitment"] = self.time_commitment
        return params

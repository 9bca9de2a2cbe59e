"""Unit tests for data models."""

from datetime import date

import pytest
from pydantic import ValidationError

from volunteer_finder.models.filters import CATEGORIES, SearchFilters
from volunteer_finder.models.opportunity import GeoPoint, Opportunity, SourceResult
from volunteer_finder.models.responses import NominatimMatch, SourceResponse


class TestOpportunity:
    """Tests for Opportunity model."""

    def test_partial_record_defaults(self) -> None:
        """Missing text fields default to empty strings."""
        opp = Opportunity(title="Tutor")
        assert opp.organization == ""
        assert opp.description == ""
        assert opp.time is None
        assert opp.link is None

    def test_extra_fields_pass_through(self) -> None:
        """Unknown provider fields are preserved."""
        opp = Opportunity.model_validate({"title": "Tutor", "spotsLeft": 3})
        assert opp.model_dump()["spotsLeft"] == 3

    def test_dedup_key(self) -> None:
        opp = Opportunity(title="Tutor", organization="Library")
        assert opp.dedup_key == "Tutor-Library"


class TestSearchFilters:
    """Tests for SearchFilters model."""

    def test_defaults(self) -> None:
        filters = SearchFilters()
        assert filters.category == ""
        assert filters.radius() == 25
        assert filters.extra_params() == {}

    def test_category_case_insensitive(self) -> None:
        assert SearchFilters(category="Education").category == "education"

    def test_none_category_is_empty(self) -> None:
        assert SearchFilters(category=None).category == ""

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown category"):
            SearchFilters(category="knitting")

    def test_radius_uses_distance(self) -> None:
        assert SearchFilters(distance=10).radius() == 10
        assert SearchFilters(distance=7.5).radius() == 7.5

    def test_non_positive_distance_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchFilters(distance=0)

    def test_date_range_order(self) -> None:
        with pytest.raises(ValidationError, match="date_from"):
            SearchFilters(date_from=date(2026, 12, 1), date_to=date(2026, 11, 1))

    def test_extra_params(self) -> None:
        filters = SearchFilters(
            date_from=date(2026, 11, 1),
            date_to=date(2026, 11, 30),
            time_commitment="weekly",
        )
        assert filters.extra_params() == {
            "startDate": "2026-11-01",
            "endDate": "2026-11-30",
            "timeCommitment": "weekly",
        }

    def test_ten_categories(self) -> None:
        assert len(CATEGORIES) == 10


class TestResponses:
    """Tests for provider response schemas."""

    def test_source_response_requires_list(self) -> None:
        with pytest.raises(ValidationError):
            SourceResponse.model_validate({"results": []})

    def test_source_response_coerces_partial_records(self) -> None:
        body = SourceResponse.model_validate({"opportunities": [{"title": "A"}], "total": 1})
        assert body.opportunities[0].title == "A"

    def test_nominatim_string_coordinates(self) -> None:
        match = NominatimMatch.model_validate({"lat": "38.88", "lon": "-77.10"})
        assert match.lat == pytest.approx(38.88)
        assert match.lon == pytest.approx(-77.10)

    def test_source_result_is_search_results(self) -> None:
        result = SourceResult(source="justserve", fallback=True, error="HTTP 500")
        assert result.opportunities == []
        assert GeoPoint(lat=1, lng=2).lng == 2.0

"""
Tests for shared data models.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from animesources.core.models import NormalizedResult, SearchRequest


class TestSearchRequest:
    """Tests for SearchRequest."""

    def test_sequences_stored_as_tuples(self):
        request = SearchRequest(titles=["A", "B"], exclusions=["x"])
        assert request.titles == ("A", "B")
        assert request.exclusions == ("x",)
        assert request.first_title == "A"

    def test_frozen_and_hashable(self):
        request = SearchRequest(titles=["A"], episode=1)
        with pytest.raises(FrozenInstanceError):
            request.episode = 2
        assert hash(request) == hash(SearchRequest(titles=("A",), episode=1))

    def test_no_titles(self):
        assert SearchRequest().first_title == ""

    def test_from_options(self):
        request = SearchRequest.from_options(
            titles=["A"], episode="3", resolution=1080, exclusions=["dub"], media={"id": 1}
        )
        assert request == SearchRequest(titles=("A",), episode="3", resolution="1080", exclusions=("dub",))

    def test_from_options_blank_resolution(self):
        assert SearchRequest.from_options(resolution="").resolution is None


class TestNormalizedResult:
    """Tests for NormalizedResult."""

    def test_to_dict_uses_host_field_names(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        result = NormalizedResult(
            title="t", info_hash="h", magnet="m", seeders=1, leechers=2, size=3,
            created_at=created, page_url="p",
        )
        assert result.to_dict() == {
            "title": "t",
            "infoHash": "h",
            "magnet": "m",
            "seeders": 1,
            "leechers": 2,
            "size": 3,
            "createdAt": created,
            "downloads": 0,
            "accuracy": "high",
            "pageUrl": "p",
        }

    def test_created_at_default_is_aware(self):
        result = NormalizedResult(title="t", info_hash="", magnet="")
        assert result.created_at.tzinfo is not None


class TestSearchRequestStrings:
    """A lone string passed where a sequence is expected."""

    def test_string_title_is_not_split(self):
        request = SearchRequest.from_options(titles="Frieren")
        assert request.titles == ("Frieren",)
        assert request.first_title == "Frieren"

    def test_string_exclusion_is_not_split(self):
        assert SearchRequest(exclusions="dub").exclusions == ("dub",)

    def test_constructor_wraps_string_title(self):
        assert SearchRequest(titles="Frieren").first_title == "Frieren"

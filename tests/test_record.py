"""
Tests for the Record model.

Date: 2026-10-19
"""

import pytest

from artgrid.core.errors import FetchError, MalformedResponseError
from artgrid.models.record import RECORD_FIELDS, RECORD_HEADERS, Record


class TestRecordFromJson:
    """Test building records from API items."""

    def test_full_item(self, sample_artwork_json):
        record = Record.from_json(sample_artwork_json)

        assert record.id == 27992
        assert record.title.startswith("A Sunday on La Grande Jatte")
        assert record.place_of_origin == "France"
        assert record.artist_display == "Georges Seurat\nFrench, 1859-1891"
        assert record.date_start == 1884
        assert record.date_end == 1886

    def test_null_text_becomes_empty(self, sample_artwork_json):
        """Null inscriptions are common in the API and render as blank cells."""
        record = Record.from_json(sample_artwork_json)
        assert record.inscriptions == ""

    def test_missing_fields_use_defaults(self):
        record = Record.from_json({"id": 5})
        assert record == Record(id=5)
        assert record.date_start is None

    def test_float_years(self):
        record = Record.from_json({"id": 1, "date_start": 1900.0, "date_end": 1900.5})
        assert record.date_start == 1900
        assert record.date_end is None

    def test_non_numeric_years_become_none(self):
        record = Record.from_json({"id": 1, "date_start": "1900", "date_end": True})
        assert record.date_start is None
        assert record.date_end is None

    @pytest.mark.parametrize("item", [{"title": "no id"}, {"id": "12"}, {"id": True}, {"id": None}])
    def test_missing_or_bad_id_raises(self, item):
        with pytest.raises(MalformedResponseError):
            Record.from_json(item)

    def test_non_object_raises(self):
        with pytest.raises(MalformedResponseError):
            Record.from_json(["id", 1])

    def test_malformed_is_a_fetch_error(self):
        """Callers handle a bad body the same way as a network failure."""
        with pytest.raises(FetchError):
            Record.from_json(None)


class TestRecordIdentity:
    """Test equality and display helpers."""

    def test_records_are_immutable(self):
        record = Record(id=1, title="a")
        with pytest.raises(AttributeError):
            record.title = "b"  # type: ignore[misc]

    def test_same_id_different_content_not_equal(self):
        assert Record(id=1, title="old") != Record(id=1, title="new")

    def test_records_are_hashable(self):
        assert len({Record(id=1), Record(id=1), Record(id=2)}) == 2

    def test_display_value(self):
        record = Record(id=3, title="Nighthawks", date_start=1942)
        assert record.display_value("id") == "3"
        assert record.display_value("title") == "Nighthawks"
        assert record.display_value("date_start") == "1942"
        assert record.display_value("date_end") == ""

    def test_headers_cover_every_field(self):
        assert list(RECORD_HEADERS) == list(RECORD_FIELDS)
        assert RECORD_FIELDS[0] == "id"

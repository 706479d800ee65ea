"""
record.py

Date: 2026-10-19

This module defines the Record class, one artwork row as returned by the
artworks listing endpoint. Records are immutable; two records with the same
id are the same selectable entity even when they come from different page
responses, so selection code keys everything by Record.id.

Classes:
    Record: One artwork row in the table.
"""

from dataclasses import dataclass
from typing import Any

from artgrid.core.errors import MalformedResponseError

# Display fields in column order (id first)
RECORD_FIELDS: tuple[str, ...] = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)

RECORD_HEADERS: dict[str, str] = {
    "id": "ID",
    "title": "Title",
    "place_of_origin": "Place of Origin",
    "artist_display": "Artist Display",
    "inscriptions": "Inscriptions",
    "date_start": "Date Start",
    "date_end": "Date End",
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_year(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


@dataclass(frozen=True)
class Record:
    """One artwork row. Equality covers every field; selection identity is `id` alone."""

    id: int
    title: str = ""
    place_of_origin: str = ""
    artist_display: str = ""
    inscriptions: str = ""
    date_start: int | None = None
    date_end: int | None = None

    def __str__(self) -> str:
        return f"Record({self.id}, {self.title!r})"

    @classmethod
    def from_json(cls, item: Any) -> "Record":
        """
        Build a Record from one element of the response `data` array.

        Missing or null text fields become empty strings and non-integer
        dates become None. A missing or non-integer id makes the whole
        item unusable.

        Raises:
            MalformedResponseError: if item is not an object or has no integer id
        """
        if not isinstance(item, dict):
            raise MalformedResponseError(f"Expected an object per record, got {type(item).__name__}")

        record_id = item.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise MalformedResponseError(f"Record without an integer id: {record_id!r}")

        return cls(
            id=record_id,
            title=_as_text(item.get("title")),
            place_of_origin=_as_text(item.get("place_of_origin")),
            artist_display=_as_text(item.get("artist_display")),
            inscriptions=_as_text(item.get("inscriptions")),
            date_start=_as_year(item.get("date_start")),
            date_end=_as_year(item.get("date_end")),
        )

    def display_value(self, field: str) -> str:
        """Text shown in the table cell for `field` (empty for missing dates)."""
        value = getattr(self, field)
        return "" if value is None else str(value)

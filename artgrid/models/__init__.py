"""Data models for the artgrid application.

This package contains:
- Record: One immutable artwork row
- Page: One fetched batch of records with its index and dataset total
"""

from artgrid.models.page import Page, page_count_for
from artgrid.models.record import RECORD_FIELDS, RECORD_HEADERS, Record

__all__ = ["Page", "RECORD_FIELDS", "RECORD_HEADERS", "Record", "page_count_for"]

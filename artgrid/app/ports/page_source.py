"""Page source port.

Defines the interface the selection core uses to read pages, so the core
depends on an abstraction rather than on the HTTP client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from artgrid.models.page import Page


@runtime_checkable
class PageSource(Protocol):
    """Page-based listing of records.

    Implementations return at most `page_size` records for the 1-based
    `page_index` together with the dataset total, and raise FetchError
    (never anything else) for network, timeout, status or body problems.
    """

    def fetch(self, page_index: int, page_size: int) -> Page:
        """Fetch one page."""
        ...

"""Module: page_cache.py

Date: 2026-10-19

Page Cache - holds the page currently shown in the table.

The cache asks its PageSource for one page at a time and keeps only the last
page that arrived successfully. A failed fetch never touches the displayed
page, its index or the known total, so the grid keeps showing the last good
page instead of going blank.

After every successful fetch the attached SelectionReconciler re-derives the
visible selection before page_loaded is emitted, so observers rendering on
page_loaded already see the right checked rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from artgrid.config import DEFAULT_PAGE_SIZE
from artgrid.core.errors import FetchError
from artgrid.models.page import Page, page_count_for
from artgrid.utils.events import Observable, Signal
from artgrid.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from artgrid.app.ports.page_source import PageSource
    from artgrid.app.state.selection_reconciler import SelectionReconciler
    from artgrid.models.record import Record

logger = get_cached_logger(__name__)


def _check_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be an integer >= 1, got {value!r}")


class PageCache(Observable):
    """Currently displayed page plus the dataset total reported with it."""

    page_loaded = Signal(object)  # Page
    total_changed = Signal(int)
    fetch_failed = Signal(int, str)  # (page_index, message)

    def __init__(
        self,
        source: PageSource,
        page_size: int = DEFAULT_PAGE_SIZE,
        reconciler: SelectionReconciler | None = None,
    ) -> None:
        super().__init__()
        _check_positive("page_size", page_size)

        self._source = source
        self._page_size = page_size
        self._reconciler = reconciler

        self._page: Page | None = None
        self._index = 0  # 0 until the first page arrives
        self._total = 0

        logger.debug(
            "[PageCache] Initialized (page_size=%d)", page_size, extra={"dev_only": True}
        )

    # =====================================
    # State
    # =====================================

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_page(self) -> Page | None:
        return self._page

    @property
    def current_index(self) -> int:
        """1-based index of the displayed page, 0 before the first successful fetch."""
        return self._index

    @property
    def total_records(self) -> int:
        return self._total

    @property
    def page_count(self) -> int:
        return page_count_for(self._total, self._page_size)

    @property
    def records(self) -> tuple[Record, ...]:
        return self._page.records if self._page is not None else ()

    def attach_reconciler(self, reconciler: SelectionReconciler | None) -> None:
        self._reconciler = reconciler

    # =====================================
    # Fetching
    # =====================================

    def fetch_page(self, page_index: int, page_size: int | None = None) -> Page:
        """Fetch `page_index` and make it the displayed page.

        Args:
            page_index: 1-based page index
            page_size: Overrides the cache page size from now on when given

        Returns:
            The newly displayed page

        Raises:
            ValueError: if page_index or page_size is not a positive integer
            FetchError: if the source fails; displayed state is left untouched

        """
        _check_positive("page_index", page_index)
        size = self._page_size if page_size is None else page_size
        _check_positive("page_size", size)

        try:
            page = self._source.fetch(page_index, size)
        except FetchError as e:
            logger.warning(
                "[PageCache] Fetch of page %d failed, keeping page %d: %s",
                page_index,
                self._index,
                e,
            )
            self.fetch_failed.emit(page_index, str(e))
            raise

        self._page_size = size
        self._page = page
        self._index = page_index

        old_total = self._total
        self._total = page.total

        logger.debug(
            "[PageCache] Page %d loaded: %d records (total %d)",
            page_index,
            len(page),
            page.total,
            extra={"dev_only": True},
        )

        if self._reconciler is not None:
            self._reconciler.derive_visible(page)

        if old_total != self._total:
            self.total_changed.emit(self._total)
        self.page_loaded.emit(page)
        return page

    def refresh(self) -> Page:
        """Re-fetch the displayed page (page 1 if nothing is displayed yet)."""
        return self.fetch_page(self._index or 1)

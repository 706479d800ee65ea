"""
Module: table_controller.py

Date: 2026-10-19

Qt-free controller behind the artworks table.

Receives the table's events (page change, checked rows changed, selection
limit edited, bulk-select submitted, deselect all), routes them to the
PageCache and the SelectionReconciler, and owns the two pieces of UI state
the core does not: the selection limit and whether the limit panel is open.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from artgrid.app.state.selection_reconciler import SelectionReconciler
from artgrid.config import DEFAULT_PAGE_SIZE, DEFAULT_SELECTION_LIMIT, FIRST_PAGE_INDEX
from artgrid.core.errors import FetchError, InvalidLimitError
from artgrid.core.page_cache import PageCache
from artgrid.core.selection_limit import clamp_selection_limit, limit_bounds
from artgrid.utils.events import Observable, Signal
from artgrid.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from artgrid.app.ports.page_source import PageSource
    from artgrid.models.page import Page
    from artgrid.models.record import Record

logger = get_cached_logger(__name__)


class TableController(Observable):
    """
    Coordinates pagination and selection for one table session.

    Signals:
        selection_limit_changed: Emitted with the clamped limit after every edit
        limit_panel_toggled: Emitted with True/False when the panel opens/closes
        status_message: Human-readable outcome of the last operation
    """

    selection_limit_changed = Signal(int)
    limit_panel_toggled = Signal(bool)
    status_message = Signal(str)

    def __init__(
        self,
        source: PageSource,
        page_size: int = DEFAULT_PAGE_SIZE,
        selection_limit: int = DEFAULT_SELECTION_LIMIT,
    ) -> None:
        """
        Initialize the controller.

        Args:
            source: Page source shared by pagination and auto-fill
            page_size: Records per page
            selection_limit: Initial bulk selection limit
        """
        super().__init__()
        self.reconciler = SelectionReconciler(source, page_size)
        self.page_cache = PageCache(source, page_size, reconciler=self.reconciler)

        # Clamped against the real total when the user edits it or submits
        self._selection_limit = max(1, selection_limit)
        self._limit_panel_open = False
        self._autofill_cancelled = False

        self.reconciler.autofill_cancelled.connect(self._on_autofill_cancelled)

    # =====================================
    # Rendering surface state
    # =====================================

    @property
    def current_records(self) -> tuple[Record, ...]:
        return self.page_cache.records

    @property
    def visible_selection(self) -> list[Record]:
        return self.reconciler.visible_selection

    @property
    def global_selection(self) -> list[Record]:
        return self.reconciler.global_selection

    @property
    def total_records(self) -> int:
        return self.page_cache.total_records

    @property
    def page_size(self) -> int:
        return self.page_cache.page_size

    @property
    def current_page_index(self) -> int:
        return self.page_cache.current_index

    @property
    def page_count(self) -> int:
        return self.page_cache.page_count

    @property
    def selection_limit(self) -> int:
        return self._selection_limit

    @property
    def selection_limit_bounds(self) -> tuple[int, int]:
        return limit_bounds(self.total_records)

    @property
    def is_limit_panel_open(self) -> bool:
        return self._limit_panel_open

    # =====================================
    # Events from the table
    # =====================================

    def load_initial(self) -> bool:
        """Show the first page."""
        return self.change_page(FIRST_PAGE_INDEX)

    def change_page(self, page_index: int) -> bool:
        """Display `page_index`. On failure the previous page stays displayed.

        Returns:
            True if the page was loaded

        """
        try:
            page = self.page_cache.fetch_page(page_index)
        except FetchError as e:
            self.status_message.emit(f"Could not load page {page_index}: {e}")
            return False

        self.status_message.emit(self._describe_page(page))
        return True

    def change_page_by_offset(self, first_row: int, rows: int) -> bool:
        """Paginator-style navigation: `first_row` is the 0-based offset of the page."""
        if rows < 1:
            raise ValueError(f"rows must be >= 1, got {rows}")
        return self.change_page(first_row // rows + 1)

    def toggle_visible_selection(self, checked_records: Iterable[Record]) -> list[Record]:
        """Merge the rows now checked on the displayed page into the global selection."""
        return self.reconciler.merge_from_page(checked_records)

    def set_selection_limit(self, value: Any) -> int:
        """Store the limit typed by the user, clamped to [1, total records].

        Input that is not a number leaves the previous limit in place.

        Returns:
            The limit now in effect

        """
        try:
            limit = clamp_selection_limit(value, self.total_records)
        except InvalidLimitError as e:
            logger.warning("[TableController] %s; keeping %d", e, self._selection_limit)
            return self._selection_limit

        if isinstance(value, int) and limit != value:
            logger.info("[TableController] Selection limit %r clamped to %d", value, limit)

        self._selection_limit = limit
        self.selection_limit_changed.emit(limit)
        return limit

    def submit_autofill(self) -> list[Record]:
        """Select the first N records across pages, N being the current limit.

        Fetch failures during the scan leave a partial selection; a cancelled
        scan leaves the selection as it was. Nothing is scanned while no page
        has loaded, and the stored limit is kept for the next attempt. The
        limit panel is closed afterwards.
        """
        if self.total_records == 0:
            logger.info("[TableController] Bulk selection skipped, no records loaded")
            self.status_message.emit("No records loaded; nothing to select")
            self.close_limit_panel()
            return self.global_selection

        limit = clamp_selection_limit(self._selection_limit, self.total_records)
        if limit != self._selection_limit:
            self.set_selection_limit(limit)

        self._autofill_cancelled = False
        selected = self.reconciler.auto_fill_across_pages(
            limit,
            page_size=self.page_size,
            total_records=self.total_records,
        )

        if self._autofill_cancelled:
            self.status_message.emit(f"Selection cancelled; {len(selected)} records still selected")
        elif len(selected) < limit and self.total_records >= limit:
            self.status_message.emit(f"Selected {len(selected)} of {limit} records (scan stopped early)")
        else:
            self.status_message.emit(f"Selected {len(selected)} records")

        self.close_limit_panel()
        return selected

    def cancel_autofill(self) -> None:
        self.reconciler.request_cancel()

    def deselect_all(self) -> None:
        self.reconciler.deselect_all()
        self.status_message.emit("Selection cleared")

    # =====================================
    # Limit panel
    # =====================================

    def open_limit_panel(self) -> None:
        self._set_limit_panel_open(True)

    def close_limit_panel(self) -> None:
        self._set_limit_panel_open(False)

    def toggle_limit_panel(self) -> bool:
        self._set_limit_panel_open(not self._limit_panel_open)
        return self._limit_panel_open

    def _set_limit_panel_open(self, is_open: bool) -> None:
        if is_open == self._limit_panel_open:
            return
        self._limit_panel_open = is_open
        self.limit_panel_toggled.emit(is_open)

    # =====================================
    # Helpers
    # =====================================

    def _on_autofill_cancelled(self) -> None:
        self._autofill_cancelled = True

    def _describe_page(self, page: Page) -> str:
        return (
            f"Page {page.index} of {max(page.page_count, 1)} "
            f"({page.total} records, {self.reconciler.selection_count} selected)"
        )

"""Module: selection_reconciler.py

Date: 2026-10-19

Selection Reconciler - cross-page selection state.

Only one page of records is ever held by the table, but the user's selection
spans every page. This module keeps the authoritative selection (the global
selection, keyed by record id) and derives from it the rows that should
appear checked on the displayed page (the visible selection).

Mutations:
- merge_from_page: union of the global selection with the rows checked on
  the displayed page. The table only reports the displayed page's checked
  rows, so a merge never drops rows selected on other pages.
- auto_fill_across_pages: scans pages 1, 2, 3... in order and replaces the
  global selection with the first N distinct records. Fetch failures end the
  scan early and keep what was accumulated.
- deselect_all: clears everything.

The visible selection is recomputed after every mutation and every page
change; it is never set directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from artgrid.config import DEFAULT_PAGE_SIZE, FIRST_PAGE_INDEX
from artgrid.core.errors import FetchError
from artgrid.models.page import page_count_for
from artgrid.utils.events import Observable, Signal
from artgrid.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from artgrid.app.ports.page_source import PageSource
    from artgrid.models.page import Page
    from artgrid.models.record import Record

logger = get_cached_logger(__name__)


class SelectionReconciler(Observable):
    """Owns the global selection and derives the visible selection from it.

    The global selection is an insertion-ordered mapping id -> Record. An id
    keeps the position where it was first selected; its Record content is
    replaced whenever a newer copy of the same id is merged.
    """

    global_selection_changed = Signal(list)  # list[Record], insertion order
    visible_selection_changed = Signal(list)  # list[Record], page order
    autofill_progress = Signal(int, int)  # (page_index, accumulated_count)
    autofill_finished = Signal(list)  # committed list[Record]
    autofill_cancelled = Signal()

    def __init__(self, source: PageSource, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        super().__init__()
        self._source = source
        self._page_size = page_size

        self._global: dict[int, Record] = {}
        self._visible: list[Record] = []
        self._current_page: Page | None = None

        self._cancel_requested = False
        self._autofill_running = False

        logger.debug("SelectionReconciler initialized", extra={"dev_only": True})

    # =====================================
    # State Queries
    # =====================================

    @property
    def global_selection(self) -> list[Record]:
        return list(self._global.values())

    @property
    def visible_selection(self) -> list[Record]:
        return list(self._visible)

    @property
    def selected_ids(self) -> list[int]:
        return list(self._global.keys())

    @property
    def selection_count(self) -> int:
        return len(self._global)

    @property
    def current_page(self) -> Page | None:
        return self._current_page

    @property
    def is_autofill_running(self) -> bool:
        return self._autofill_running

    def is_selected(self, record_id: int) -> bool:
        return record_id in self._global

    # =====================================
    # Visible Selection
    # =====================================

    def derive_visible(self, page: Page) -> list[Record]:
        """Make `page` the displayed page and return its selected rows in page order.

        Does not modify the global selection.
        """
        self._current_page = page
        self._page_size = page.page_size
        self._refresh_visible()
        return list(self._visible)

    def _refresh_visible(self) -> None:
        if self._current_page is None:
            visible: list[Record] = []
        else:
            visible = [r for r in self._current_page.records if r.id in self._global]

        self._visible = visible
        self.visible_selection_changed.emit(list(visible))

    # =====================================
    # Mutations
    # =====================================

    def merge_from_page(self, new_visible_selection: Iterable[Record]) -> list[Record]:
        """Add the rows checked on the displayed page to the global selection.

        Args:
            new_visible_selection: Rows currently checked on the displayed page

        Returns:
            The global selection after the merge

        """
        added = 0
        for record in new_visible_selection:
            if record.id not in self._global:
                added += 1
            # Existing keys keep their position; content is refreshed
            self._global[record.id] = record

        logger.debug(
            "[Merge] +%d new ids (total selected: %d)",
            added,
            len(self._global),
            extra={"dev_only": True},
        )

        self.global_selection_changed.emit(self.global_selection)
        self._refresh_visible()
        return self.global_selection

    def deselect_all(self) -> None:
        """Clear the global and visible selections unconditionally."""
        count = len(self._global)
        self._global.clear()

        logger.info("[DeselectAll] Cleared %d selected records", count)

        self.global_selection_changed.emit([])
        self._refresh_visible()

    def request_cancel(self) -> None:
        """Ask a running auto-fill scan to stop before its next page.

        The scan then discards what it accumulated and leaves the global
        selection as it was. Has no effect when no scan is running.
        """
        if self._autofill_running:
            logger.info("[AutoFill] Cancellation requested")
            self._cancel_requested = True

    def auto_fill_across_pages(
        self,
        limit: int,
        page_size: int | None = None,
        total_records: int | None = None,
    ) -> list[Record]:
        """Replace the global selection with the first `limit` distinct records.

        Pages are fetched one at a time from the page source in increasing
        order, starting at page 1, without touching the displayed page. The
        scan ends when `limit` records are gathered, when the last page (per
        the latest reported total) has been read, or when a fetch fails. A
        failure keeps the partial result and is not raised.

        Args:
            limit: Number of records to select; callers clamp it beforehand
            page_size: Page size for the scan (defaults to the displayed page's)
            total_records: Dataset total bounding the scan (defaults to the
                displayed page's total)

        Returns:
            The committed global selection. When the scan is cancelled this is
            the unchanged selection from before the call.

        """
        if self._autofill_running:
            logger.warning("[AutoFill] Scan already running, ignoring nested request")
            return self.global_selection

        size = page_size or self._page_size
        if total_records is not None:
            total = total_records
        elif self._current_page is not None:
            total = self._current_page.total
        else:
            total = 0

        self._autofill_running = True
        self._cancel_requested = False
        try:
            accumulated = self._scan(limit, size, total)
        finally:
            self._autofill_running = False
            cancelled = self._cancel_requested
            self._cancel_requested = False

        if cancelled or accumulated is None:
            logger.info("[AutoFill] Cancelled, selection left at %d records", len(self._global))
            self.autofill_cancelled.emit()
            return self.global_selection

        self._global = {record.id: record for record in accumulated}

        logger.info("[AutoFill] Selected %d of %d requested records", len(self._global), limit)

        self.global_selection_changed.emit(self.global_selection)
        self._refresh_visible()
        self.autofill_finished.emit(self.global_selection)
        return self.global_selection

    def _scan(self, limit: int, page_size: int, total: int) -> list[Record] | None:
        """Accumulate distinct records page by page. Returns None when cancelled."""
        accumulated: list[Record] = []
        seen: set[int] = set()
        cursor = FIRST_PAGE_INDEX

        while len(accumulated) < limit and cursor <= page_count_for(total, page_size):
            if self._cancel_requested:
                return None

            try:
                page = self._source.fetch(cursor, page_size)
            except FetchError as e:
                logger.warning(
                    "[AutoFill] Page %d failed, keeping %d accumulated records: %s",
                    cursor,
                    len(accumulated),
                    e,
                )
                break

            for record in page.records:
                if record.id not in seen:
                    seen.add(record.id)
                    accumulated.append(record)

            del accumulated[limit:]

            # The source's latest total bounds the rest of the scan
            total = page.total
            self.autofill_progress.emit(cursor, len(accumulated))
            cursor += 1

        if self._cancel_requested:
            return None
        return accumulated

"""
Module: main_window.py

Date: 2026-10-19

Main window: the artworks table, a paginator underneath and a
"Select Rows (N)" header button that opens the selection limit panel.

All state lives in the TableController; the window forwards user actions to
it and repaints from its signals. Fetches are blocking and run under a wait
cursor, with pagination disabled while a bulk selection scans pages.
"""

import contextlib
from collections.abc import Iterator

from PyQt5.QtCore import QPoint, Qt
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPushButton,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from artgrid.config import WINDOW_MIN_HEIGHT, WINDOW_MIN_WIDTH, WINDOW_TITLE
from artgrid.controllers.table_controller import TableController
from artgrid.ui.models.artwork_table_model import ArtworkTableModel
from artgrid.ui.widgets.selection_limit_panel import SelectionLimitPanel
from artgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@contextlib.contextmanager
def wait_cursor() -> Iterator[None]:
    """Show the busy cursor for the duration of the block."""
    QApplication.setOverrideCursor(Qt.WaitCursor)
    try:
        yield
    finally:
        QApplication.restoreOverrideCursor()


class ArtworkTableWindow(QMainWindow):
    """Paginated artworks table with cross-page selection."""

    def __init__(self, controller: TableController, parent: QWidget | None = None):
        super().__init__(parent)
        self.controller = controller

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self._setup_ui()
        self._connect_signals()
        self._update_select_button()
        self._update_paginator()

    # =====================================
    # Setup
    # =====================================

    def _setup_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)

        header_row = QHBoxLayout()
        self.select_button = QPushButton(central)
        self.select_button.setFlat(True)
        self.selection_label = QLabel(central)
        header_row.addWidget(self.select_button)
        header_row.addWidget(self.selection_label)
        header_row.addStretch(1)
        layout.addLayout(header_row)

        self.model = ArtworkTableModel(self.controller, self)
        self.table_view = QTableView(central)
        self.table_view.setModel(self.model)
        self.table_view.setSelectionMode(QAbstractItemView.NoSelection)
        self.table_view.setAlternatingRowColors(True)
        self.table_view.verticalHeader().setVisible(False)
        header = self.table_view.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.Interactive)
        header.setStretchLastSection(True)
        layout.addWidget(self.table_view, 1)

        paginator = QHBoxLayout()
        self.first_button = QPushButton("<<", central)
        self.prev_button = QPushButton("<", central)
        self.page_label = QLabel(central)
        self.page_label.setAlignment(Qt.AlignCenter)
        self.next_button = QPushButton(">", central)
        self.last_button = QPushButton(">>", central)
        paginator.addStretch(1)
        for widget in (self.first_button, self.prev_button, self.page_label, self.next_button, self.last_button):
            paginator.addWidget(widget)
        paginator.addStretch(1)
        layout.addLayout(paginator)

        self.setCentralWidget(central)

        self.limit_panel = SelectionLimitPanel(self)
        self.limit_panel.hide()

    def _connect_signals(self) -> None:
        controller = self.controller

        self.select_button.clicked.connect(self._on_select_button_clicked)
        self.first_button.clicked.connect(lambda: self.go_to_page(1))
        self.prev_button.clicked.connect(lambda: self.go_to_page(controller.current_page_index - 1))
        self.next_button.clicked.connect(lambda: self.go_to_page(controller.current_page_index + 1))
        self.last_button.clicked.connect(lambda: self.go_to_page(controller.page_count))

        self.limit_panel.limit_changed.connect(controller.set_selection_limit)
        self.limit_panel.submit_requested.connect(self.run_autofill)
        self.limit_panel.deselect_all_requested.connect(controller.deselect_all)
        self.limit_panel.cancel_requested.connect(controller.cancel_autofill)
        self.limit_panel.closed.connect(controller.close_limit_panel)

        controller.limit_panel_toggled.connect(self._on_limit_panel_toggled)
        controller.selection_limit_changed.connect(self._on_selection_limit_changed)
        controller.status_message.connect(self.statusBar().showMessage)
        controller.page_cache.page_loaded.connect(lambda _page: self._update_paginator())
        controller.reconciler.global_selection_changed.connect(self._on_global_selection_changed)
        controller.reconciler.autofill_progress.connect(self._on_autofill_progress)

    # =====================================
    # Actions
    # =====================================

    def load(self) -> bool:
        with wait_cursor():
            return self.controller.load_initial()

    def go_to_page(self, page_index: int) -> bool:
        if page_index < 1 or (self.controller.page_count and page_index > self.controller.page_count):
            return False
        with wait_cursor():
            return self.controller.change_page(page_index)

    def run_autofill(self) -> None:
        self._set_scanning(True)
        try:
            with wait_cursor():
                self.controller.submit_autofill()
        finally:
            self._set_scanning(False)

    # =====================================
    # Controller signal handlers
    # =====================================

    def _on_select_button_clicked(self) -> None:
        # The same click already closed the popup
        if self.limit_panel.closed_recently():
            return
        self.controller.toggle_limit_panel()

    def _on_limit_panel_toggled(self, is_open: bool) -> None:
        if not is_open:
            self.limit_panel.hide()
            return

        minimum, maximum = self.controller.selection_limit_bounds
        self.limit_panel.set_bounds(minimum, maximum)
        self.limit_panel.set_limit(min(max(self.controller.selection_limit, minimum), maximum))
        anchor = self.select_button.mapToGlobal(QPoint(0, self.select_button.height()))
        self.limit_panel.move(anchor)
        self.limit_panel.show()

    def _on_selection_limit_changed(self, limit: int) -> None:
        self.limit_panel.set_limit(limit)
        self._update_select_button()

    def _on_global_selection_changed(self, selection: list) -> None:
        self.selection_label.setText(f"{len(selection)} selected" if selection else "")

    def _on_autofill_progress(self, page_index: int, accumulated: int) -> None:
        self.statusBar().showMessage(f"Scanning page {page_index}: {accumulated} records so far")
        # Lets the Cancel button be clicked between pages
        QApplication.processEvents()

    # =====================================
    # Helpers
    # =====================================

    def _set_scanning(self, scanning: bool) -> None:
        self.limit_panel.set_scanning(scanning)
        for widget in (self.first_button, self.prev_button, self.next_button, self.last_button, self.table_view):
            widget.setEnabled(not scanning)
        if not scanning:
            self._update_paginator()

    def _update_select_button(self) -> None:
        self.select_button.setText(f"Select Rows ({self.controller.selection_limit})")

    def _update_paginator(self) -> None:
        index = self.controller.current_page_index
        count = self.controller.page_count
        total = self.controller.total_records

        self.page_label.setText(f"Page {index} of {count} ({total} records)" if count else "No records")
        self.first_button.setEnabled(index > 1)
        self.prev_button.setEnabled(index > 1)
        self.next_button.setEnabled(0 < index < count)
        self.last_button.setEnabled(0 < index < count)

"""artgrid.ui.models.artwork_table_model

Qt table model over the page currently held by the TableController.

Column 0 is a checkbox bound to the visible selection; the remaining columns
show the Record display fields. The model owns no selection state: checking
a box sends the page's new checked set to the controller, and the checkbox
column is repainted whenever the reconciler re-derives the visible selection.

Date: 2026-10-19
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from PyQt5.QtCore import QAbstractTableModel, QModelIndex, Qt, QVariant

from artgrid.models.record import RECORD_FIELDS, RECORD_HEADERS
from artgrid.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from artgrid.controllers.table_controller import TableController
    from artgrid.models.page import Page
    from artgrid.models.record import Record

logger = get_cached_logger(__name__)

CHECK_COLUMN = 0


class ArtworkTableModel(QAbstractTableModel):
    """Table model for one page of artworks with a leading checkbox column."""

    def __init__(self, controller: TableController, parent=None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._records: tuple[Record, ...] = controller.current_records
        self._checked_ids: set[int] = {r.id for r in controller.visible_selection}

        controller.page_cache.page_loaded.connect(self._on_page_loaded)
        controller.reconciler.visible_selection_changed.connect(self._on_visible_selection_changed)

    # ==================== Qt Model Interface ====================

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._records)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(RECORD_FIELDS) + 1

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._records):
            return QVariant()

        record = self._records[index.row()]

        if index.column() == CHECK_COLUMN:
            if role == Qt.CheckStateRole:
                return Qt.Checked if record.id in self._checked_ids else Qt.Unchecked
            return QVariant()

        field = RECORD_FIELDS[index.column() - 1]
        if role in (Qt.DisplayRole, Qt.ToolTipRole):
            return record.display_value(field)
        if role == Qt.TextAlignmentRole and field in ("id", "date_start", "date_end"):
            return int(Qt.AlignRight | Qt.AlignVCenter)
        return QVariant()

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.EditRole) -> bool:
        if role != Qt.CheckStateRole or not index.isValid() or index.column() != CHECK_COLUMN:
            return False
        if not 0 <= index.row() < len(self._records):
            return False

        record = self._records[index.row()]
        checked = value in (Qt.Checked, int(Qt.Checked))

        checked_on_page = [r for r in self._records if r.id in self._checked_ids]
        if checked:
            checked_on_page.append(record)
        else:
            checked_on_page = [r for r in checked_on_page if r.id != record.id]

        self._controller.toggle_visible_selection(checked_on_page)
        return True

    def flags(self, index: QModelIndex) -> Qt.ItemFlags:
        if not index.isValid():
            return Qt.ItemFlags(Qt.NoItemFlags)

        base_flags = Qt.ItemIsEnabled | Qt.ItemIsSelectable
        if index.column() == CHECK_COLUMN:
            base_flags |= Qt.ItemIsUserCheckable
        return base_flags

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole) -> Any:
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            if section == CHECK_COLUMN:
                return ""
            if 0 < section <= len(RECORD_FIELDS):
                return RECORD_HEADERS[RECORD_FIELDS[section - 1]]
        return super().headerData(section, orientation, role)

    # ==================== Helpers ====================

    def record_at(self, row: int) -> Record | None:
        if 0 <= row < len(self._records):
            return self._records[row]
        return None

    def checked_ids(self) -> set[int]:
        return set(self._checked_ids)

    # ==================== Core signal handlers ====================

    def _on_page_loaded(self, page: Page) -> None:
        self.beginResetModel()
        self._records = page.records
        self._checked_ids = {r.id for r in self._controller.visible_selection}
        self.endResetModel()

        logger.debug(
            "[ArtworkTableModel] Showing page %d (%d rows)",
            page.index,
            len(page.records),
            extra={"dev_only": True},
        )

    def _on_visible_selection_changed(self, visible: list[Record]) -> None:
        self._checked_ids = {r.id for r in visible}
        if self._records:
            top = self.index(0, CHECK_COLUMN)
            bottom = self.index(len(self._records) - 1, CHECK_COLUMN)
            self.dataChanged.emit(top, bottom, [Qt.CheckStateRole])

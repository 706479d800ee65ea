"""
Module: selection_limit_panel.py

Date: 2026-10-19

Popup panel opened from the "Select Rows (N)" header button: a spin box for
the bulk selection limit plus Submit, Deselect All and Cancel buttons.
The panel only emits requests; the controller decides what they do.
"""

from PyQt5.QtCore import QElapsedTimer, Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)


class SelectionLimitPanel(QFrame):
    """Selection limit input with Submit / Deselect All / Cancel actions."""

    limit_changed = pyqtSignal(int)
    submit_requested = pyqtSignal()
    deselect_all_requested = pyqtSignal()
    cancel_requested = pyqtSignal()
    closed = pyqtSignal()  # Hidden by any means, including a click outside the popup

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent, Qt.Popup)
        self.setFrameShape(QFrame.StyledPanel)
        self.setObjectName("selectionLimitPanel")
        # A click on the opener that closes the popup must not reach the opener
        self.setAttribute(Qt.WA_NoMouseReplay)
        self._hide_timer = QElapsedTimer()

        self.spin_box = QSpinBox(self)
        self.spin_box.setMinimum(1)
        self.spin_box.setMaximum(1)
        self.spin_box.setKeyboardTracking(False)
        self.spin_box.valueChanged.connect(self.limit_changed.emit)

        self.submit_button = QPushButton("Submit", self)
        self.submit_button.setDefault(True)
        self.submit_button.clicked.connect(self.submit_requested.emit)

        self.deselect_button = QPushButton("Deselect All", self)
        self.deselect_button.clicked.connect(self.deselect_all_requested.emit)

        self.cancel_button = QPushButton("Cancel", self)
        self.cancel_button.clicked.connect(self.cancel_requested.emit)
        self.cancel_button.hide()

        input_row = QHBoxLayout()
        input_row.addWidget(QLabel("Select number of rows:", self))
        input_row.addWidget(self.spin_box)

        button_row = QHBoxLayout()
        button_row.addWidget(self.submit_button)
        button_row.addWidget(self.deselect_button)
        button_row.addWidget(self.cancel_button)

        layout = QVBoxLayout(self)
        layout.addLayout(input_row)
        layout.addLayout(button_row)

    def set_bounds(self, minimum: int, maximum: int) -> None:
        self.spin_box.blockSignals(True)
        try:
            self.spin_box.setRange(minimum, maximum)
        finally:
            self.spin_box.blockSignals(False)

    def set_limit(self, value: int) -> None:
        """Show `value` without re-emitting limit_changed."""
        self.spin_box.blockSignals(True)
        try:
            self.spin_box.setValue(value)
        finally:
            self.spin_box.blockSignals(False)

    def hideEvent(self, event) -> None:
        super().hideEvent(event)
        self._hide_timer.start()
        self.closed.emit()

    def set_scanning(self, scanning: bool) -> None:
        """Swap Submit/Deselect for Cancel while a bulk selection is running."""
        self.spin_box.setEnabled(not scanning)
        self.submit_button.setEnabled(not scanning)
        self.deselect_button.setEnabled(not scanning)
        self.cancel_button.setVisible(scanning)

    def closed_recently(self, within_ms: int = 250) -> bool:
        """True if the panel was hidden less than `within_ms` ago."""
        return self._hide_timer.isValid() and not self._hide_timer.hasExpired(within_ms)

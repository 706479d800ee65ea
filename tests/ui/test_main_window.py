"""
Tests for ArtworkTableWindow and SelectionLimitPanel.

Date: 2026-10-19
"""

import pytest
from PyQt5.QtCore import Qt

from artgrid.controllers.table_controller import TableController
from artgrid.ui.main_window import ArtworkTableWindow
from tests.mocks import FakePageSource

pytestmark = pytest.mark.gui


@pytest.fixture
def window(qtbot, source_97):
    controller = TableController(source_97, page_size=10, selection_limit=5)
    win = ArtworkTableWindow(controller)
    qtbot.addWidget(win)
    win.show()
    assert win.load()
    return win


class TestPaginator:
    """Test page navigation buttons."""

    def test_initial_page(self, window):
        assert window.page_label.text() == "Page 1 of 10 (97 records)"
        assert not window.prev_button.isEnabled()
        assert window.next_button.isEnabled()
        assert window.model.rowCount() == 10

    def test_next_and_last(self, window):
        window.next_button.click()
        assert window.controller.current_page_index == 2

        window.last_button.click()
        assert window.controller.current_page_index == 10
        assert window.model.rowCount() == 7
        assert not window.next_button.isEnabled()

    def test_out_of_range_page_is_ignored(self, window):
        assert not window.go_to_page(11)
        assert not window.go_to_page(0)
        assert window.controller.current_page_index == 1

    def test_failed_page_shows_status(self, qtbot, records_97):
        controller = TableController(FakePageSource(records_97, fail_on={2}), page_size=10)
        win = ArtworkTableWindow(controller)
        qtbot.addWidget(win)
        win.load()

        win.next_button.click()

        assert controller.current_page_index == 1
        assert win.statusBar().currentMessage().startswith("Could not load page 2")


class TestSelectionPanel:
    """Test the Select Rows popup."""

    def test_button_opens_panel(self, window):
        assert window.select_button.text() == "Select Rows (5)"

        window.select_button.click()

        assert window.controller.is_limit_panel_open
        assert window.limit_panel.isVisible()
        assert window.limit_panel.spin_box.maximum() == 97
        assert window.limit_panel.spin_box.value() == 5

    def test_spin_box_updates_limit(self, window):
        window.select_button.click()

        window.limit_panel.spin_box.setValue(12)

        assert window.controller.selection_limit == 12
        assert window.select_button.text() == "Select Rows (12)"

    def test_submit_selects_and_closes(self, window):
        window.select_button.click()
        window.limit_panel.spin_box.setValue(15)

        window.limit_panel.submit_button.click()

        assert [r.id for r in window.controller.global_selection] == list(range(1, 16))
        assert window.selection_label.text() == "15 selected"
        assert not window.limit_panel.isVisible()
        assert not window.controller.is_limit_panel_open
        assert window.next_button.isEnabled()

    def test_deselect_all(self, window):
        window.controller.toggle_visible_selection(window.controller.current_records[:3])
        window.select_button.click()

        window.limit_panel.deselect_button.click()

        assert window.controller.global_selection == []
        assert window.selection_label.text() == ""
        assert window.model.checked_ids() == set()

    def test_hiding_panel_closes_controller_state(self, window):
        window.select_button.click()

        window.limit_panel.hide()

        assert not window.controller.is_limit_panel_open

    def test_scanning_swaps_buttons(self, window):
        panel = window.limit_panel
        panel.set_scanning(True)
        assert not panel.submit_button.isEnabled()
        assert not panel.cancel_button.isHidden()

        panel.set_scanning(False)
        assert panel.submit_button.isEnabled()
        assert panel.cancel_button.isHidden()

    def test_opener_click_that_closed_popup_does_not_reopen(self, window):
        window.select_button.click()
        window.limit_panel.hide()

        window.select_button.click()

        assert not window.limit_panel.isVisible()
        assert not window.controller.is_limit_panel_open

    def test_opener_reopens_after_popup_closed(self, qtbot, window):
        window.select_button.click()
        window.limit_panel.hide()
        qtbot.wait(300)

        window.select_button.click()

        assert window.limit_panel.isVisible()
        assert window.controller.is_limit_panel_open

    def test_popup_does_not_replay_closing_click(self, window):
        assert window.limit_panel.testAttribute(Qt.WA_NoMouseReplay)

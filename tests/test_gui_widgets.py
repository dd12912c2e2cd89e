"""
Widget tests for the channel grid, editor panel and main window.

Runs on the offscreen Qt platform (set in conftest).
"""

import pytest
from PyQt5.QtWidgets import QApplication

from stimconfig.config import GROUP_COLORS
from stimconfig.model.selection import Modifiers


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp, memory_sink):
    from stimconfig.gui.main_window import MainWindow
    win = MainWindow(sink=memory_sink)
    yield win
    win.close()
    win.deleteLater()


class TestChannelGrid:

    def test_twelve_tiles(self, window):
        assert len(window.grid.tiles) == 12

    def test_tile_text(self, window):
        tile = window.grid.tiles[0]
        assert tile.title_label.text() == "Channel 1"
        assert tile.mode_label.text() == "Voltage"
        assert tile.rows['frequency'][1].text() == "10 Hz"
        assert tile.rows['drive'][0].text() == "Voltage:"

    def test_drive_row_follows_mode(self, window):
        window.session.activate(3)
        window.session.on_field_change('current', "0.5")
        window.session.on_field_change('currentMode', True)
        tile = window.grid.tiles[3]
        assert tile.rows['drive'][0].text() == "Current:"
        assert tile.rows['drive'][1].text() == "0.5 A"
        assert window.editor.edits['drive'].text() == "0.5"

    def test_tooltip_reports_group_size(self, window):
        assert window.grid.tiles[0].toolTip() == "Same settings as 11 other channel(s)"
        window.session.activate(0)
        window.session.on_field_change('numStims', "5")
        assert window.grid.tiles[0].toolTip() == "Unique settings"
        assert window.grid.tiles[1].toolTip() == "Same settings as 10 other channel(s)"

    def test_click_signal_activates(self, window):
        window.grid.tiles[4].clicked.emit(4, Modifiers())
        assert window.session.selected == (4,)


class TestChannelEditor:

    def test_hidden_until_anchor(self, window):
        assert window.editor.isHidden()
        window.session.activate(2)
        assert not window.editor.isHidden()
        assert window.editor.title_label.text() == "Channel 3 Settings"

    def test_title_for_multi_select(self, window):
        window.session.activate(0)
        window.session.activate(3, Modifiers(shift=True))
        assert window.editor.title_label.text() == "Editing 4 Channels"

    def test_edit_broadcasts(self, window):
        window.session.activate(1)
        window.session.activate(2, Modifiers(shift=True))
        window.editor.edits['frequency'].textEdited.emit("33")
        channels = window.session.channels
        assert channels[1].frequency == 33
        assert channels[2].frequency == 33
        assert channels[0].frequency == 10
        assert window.grid.tiles[2].rows['frequency'][1].text() == "33 Hz"

    def test_drive_field_follows_mode(self, window):
        window.session.activate(5)
        window.editor.edits['drive'].textEdited.emit("4")
        assert window.session.channels[5].voltage == 4
        window.editor.mode_check.clicked.emit(True)
        assert window.session.channels[5].current_mode is True
        assert window.editor.labels['drive'].text() == "Current (A)"
        window.editor.edits['drive'].textEdited.emit("0.25")
        assert window.session.channels[5].current == 0.25
        assert window.session.channels[5].voltage == 4


class TestMainWindow:

    def test_group_colors_on_tiles(self, window):
        window.session.activate(0)
        window.session.on_field_change('frequency', "20")
        assert GROUP_COLORS[0][0] in window.grid.tiles[0].styleSheet()
        assert GROUP_COLORS[1][0] in window.grid.tiles[1].styleSheet()

    def test_export_writes_sink(self, window, memory_sink, monkeypatch):
        from PyQt5.QtWidgets import QMessageBox
        shown = []
        monkeypatch.setattr(QMessageBox, "information", lambda *a, **k: shown.append(a))
        window.export_controller.export()
        assert memory_sink.last.count("set_channel = ") == 12
        assert len(shown) == 1

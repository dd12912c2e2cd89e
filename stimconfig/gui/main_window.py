"""
Main Window
Channel grid, editor panel and the export button, bound to one session.
"""

from PyQt5.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget
from PyQt5.QtGui import QFont

from stimconfig.config import SIZES
from stimconfig.model.session import ChannelSession
from stimconfig.utils.logger import logger
from .channel_editor import ChannelEditor
from .channel_grid import ChannelGrid
from .controllers import ExportController
from .theme import COLORS, FONT_FAMILY, FONT_SIZES, button_style


class MainWindow(QMainWindow):
    """Top-level window for the channel configuration editor."""

    def __init__(self, session=None, sink=None):
        super().__init__()
        self.session = session if session is not None else ChannelSession()
        self.export_controller = ExportController(self.session, sink)

        self.setWindowTitle("Channel Configuration")
        self.resize(SIZES['window_width'], SIZES['window_height'])
        self.setup_ui()
        self.connect_signals()

    def setup_ui(self):
        central = QWidget()
        central.setStyleSheet(f"background-color: {COLORS['background']};")
        layout = QVBoxLayout(central)

        top_bar = QHBoxLayout()
        title = QLabel("Channel Configuration")
        title.setFont(QFont(FONT_FAMILY, FONT_SIZES['title'], QFont.Bold))
        self.export_button = QPushButton("Generate Python Code")
        self.export_button.setStyleSheet(button_style())
        top_bar.addWidget(title)
        top_bar.addStretch()
        top_bar.addWidget(self.export_button)
        layout.addLayout(top_bar)

        self.grid = ChannelGrid(self.session)
        layout.addWidget(self.grid)

        self.editor = ChannelEditor(self.session)
        layout.addWidget(self.editor)
        layout.addStretch()

        self.setCentralWidget(central)

    def connect_signals(self):
        self.grid.channel_clicked.connect(self.on_channel_clicked)
        self.editor.field_changed.connect(self.on_field_changed)
        self.session.selection.selection_changed.connect(self.on_state_changed)
        self.session.batch.channels_changed.connect(self.on_state_changed)
        self.export_button.clicked.connect(lambda: self.export_controller.export())
        self.export_controller.export_succeeded.connect(self.on_export_succeeded)
        self.export_controller.export_failed.connect(self.on_export_failed)

    def on_channel_clicked(self, index, modifiers):
        self.session.activate(index, modifiers)

    def on_field_changed(self, field, value):
        self.session.on_field_change(field, value)

    def on_state_changed(self, *args):
        self.grid.refresh()
        self.editor.refresh()

    def on_export_succeeded(self, text):
        QMessageBox.information(self, "Export", "Python code has been copied to clipboard!")

    def on_export_failed(self, message):
        logger.warning("Export notification shown", component="APP")
        QMessageBox.warning(self, "Export failed", message)

"""
Channel Grid Component
One tile per channel, coloured by configuration group.

Tiles are read-only views; a click is reported as (index, Modifiers) and
the session decides what it means.
"""

from PyQt5.QtWidgets import QFrame, QGridLayout, QHBoxLayout, QLabel, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from stimconfig.config import CHANNEL_FIELDS_BY_KEY, SIZES
from stimconfig.model.selection import Modifiers
from stimconfig.export.serializer import format_value
from .theme import FONT_FAMILY, FONT_SIZES, tile_style


def display_value(value):
    """Tile/editor text for a value: the exported literal, NaN shown as NaN."""
    text = format_value(value)
    return 'NaN' if text == "float('nan')" else text


class ChannelTile(QFrame):
    """Summary card for a single channel."""

    clicked = pyqtSignal(int, object)  # index, Modifiers

    def __init__(self, index, parent=None):
        super().__init__(parent)
        self.index = index
        self.setObjectName("channelTile")
        self.setMinimumWidth(SIZES['tile_min_width'])
        self.setCursor(Qt.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        layout.setSpacing(1)

        header = QHBoxLayout()
        self.title_label = QLabel(f"Channel {index + 1}")
        self.title_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['label'], QFont.Bold))
        self.mode_label = QLabel()
        self.mode_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['small']))
        header.addWidget(self.title_label)
        header.addStretch()
        header.addWidget(self.mode_label)
        layout.addLayout(header)

        self.rows = {}
        for key in ('frequency', 'pulse_width', 'drive', 'pulse_train', 'num_stims'):
            row = QHBoxLayout()
            name = QLabel()
            value = QLabel()
            for lbl in (name, value):
                lbl.setFont(QFont(FONT_FAMILY, FONT_SIZES['small']))
            row.addWidget(name)
            row.addStretch()
            row.addWidget(value)
            layout.addLayout(row)
            self.rows[key] = (name, value)

    def update_channel(self, channel, color, selected, group_size=1):
        self.mode_label.setText("Current" if channel.current_mode else "Voltage")

        self._set_row('frequency', "Frequency:", f"{display_value(channel.frequency)} Hz")
        self._set_row('pulse_width', "Pulse Width:", f"{display_value(channel.pulse_width)} ms")
        drive = CHANNEL_FIELDS_BY_KEY[channel.drive_field]
        self._set_row('drive', f"{drive['label']}:", f"{display_value(channel.drive_value)} {drive['unit']}")
        self._set_row('pulse_train', "Train Length:", display_value(channel.pulse_train))
        self._set_row('num_stims', "Stimulations:", display_value(channel.num_stims))

        self.setToolTip(
            f"Same settings as {group_size - 1} other channel(s)" if group_size > 1 else "Unique settings"
        )
        self.setStyleSheet(tile_style(color, selected))

    def _set_row(self, key, name, value):
        name_label, value_label = self.rows[key]
        name_label.setText(name)
        value_label.setText(value)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.index, Modifiers.from_qt(event.modifiers()))
            event.accept()
            return
        super().mousePressEvent(event)


class ChannelGrid(QWidget):
    """Grid of channel tiles bound to a ChannelSession."""

    channel_clicked = pyqtSignal(int, object)  # index, Modifiers

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session

        layout = QGridLayout(self)
        layout.setSpacing(6)
        columns = SIZES['grid_columns']

        self.tiles = []
        for index in range(len(session.channels)):
            tile = ChannelTile(index)
            tile.clicked.connect(self.channel_clicked)
            layout.addWidget(tile, index // columns, index % columns)
            self.tiles.append(tile)

        self.refresh()

    def refresh(self):
        """Redraw every tile from the session."""
        for channel in self.session.channels:
            index = channel.index
            group = self.session.group_of(index)
            self.tiles[index].update_channel(
                channel,
                self.session.color_of(index),
                self.session.selection.is_selected(index),
                len(group) if group is not None else 1,
            )

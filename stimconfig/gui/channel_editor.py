"""
Channel Editor Panel
Edits the anchored channel; every edit is broadcast to the whole selection.

Values shown are always the anchor channel's. Fields report raw text,
numeric coercion happens in the model.
"""

from PyQt5.QtWidgets import QCheckBox, QFrame, QGridLayout, QLabel, QLineEdit, QVBoxLayout
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from stimconfig.config import CHANNEL_FIELDS_BY_KEY, DRIVE_STEP
from stimconfig.model.channel import channel_at
from .channel_grid import display_value
from .theme import FONT_FAMILY, FONT_SIZES

# Editor layout; 'drive' is voltage or current depending on the anchor's mode
_TEXT_FIELDS = ['frequency', 'pulse_width', 'drive', 'pulse_train', 'num_stims']


class ChannelEditor(QFrame):
    """Settings panel for the current selection."""

    field_changed = pyqtSignal(str, object)  # field key, raw value

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session
        self._drive_field = 'voltage'
        self._shown_anchor = None

        layout = QVBoxLayout(self)
        self.title_label = QLabel()
        self.title_label.setFont(QFont(FONT_FAMILY, FONT_SIZES['section'], QFont.Bold))
        layout.addWidget(self.title_label)

        grid = QGridLayout()
        layout.addLayout(grid)

        self.labels = {}
        self.edits = {}
        for i, key in enumerate(_TEXT_FIELDS):
            label = QLabel()
            edit = QLineEdit()
            edit.setObjectName(f"edit_{key}")
            edit.textEdited.connect(lambda text, k=key: self._on_text_edited(k, text))
            row, col = divmod(i, 3)
            grid.addWidget(label, row * 2, col)
            grid.addWidget(edit, row * 2 + 1, col)
            self.labels[key] = label
            self.edits[key] = edit

        self.mode_check = QCheckBox(CHANNEL_FIELDS_BY_KEY['current_mode']['label'])
        self.mode_check.clicked.connect(
            lambda checked: self.field_changed.emit('current_mode', bool(checked))
        )
        grid.addWidget(self.mode_check, 3, 2)

        self.refresh()

    def _on_text_edited(self, key, text):
        field = self._drive_field if key == 'drive' else key
        self.field_changed.emit(field, text)

    def refresh(self):
        """Reload from the anchor channel; hidden until a channel is anchored."""
        anchor = self.session.anchor
        channel = channel_at(self.session.channels, anchor) if anchor is not None else None
        if channel is None:
            self.setVisible(False)
            return
        self.setVisible(True)

        count = len(self.session.selection)
        if count > 1:
            self.title_label.setText(f"Editing {count} Channels")
        else:
            self.title_label.setText(f"Channel {channel.id} Settings")

        anchor_moved = anchor != self._shown_anchor
        self._shown_anchor = anchor
        self._drive_field = channel.drive_field
        for key in _TEXT_FIELDS:
            field = self._drive_field if key == 'drive' else key
            spec = CHANNEL_FIELDS_BY_KEY[field]
            unit = f" ({spec['unit']})" if spec['unit'] else ""
            self.labels[key].setText(f"{spec['label']}{unit}")

            edit = self.edits[key]
            # Leave the field being typed in alone unless the anchor moved
            if anchor_moved or not edit.hasFocus():
                value = channel.drive_value if key == 'drive' else getattr(channel, field)
                edit.setText(display_value(value))

        self.edits['drive'].setToolTip(f"Step {DRIVE_STEP[self._drive_field]:g}")
        self.mode_check.setChecked(bool(channel.current_mode))

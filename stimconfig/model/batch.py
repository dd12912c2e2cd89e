"""
Batch Update Engine
Broadcasts one field edit to every selected channel.

Store update and group recompute finish before any signal goes out, so
listeners always read channels and groups from the same snapshot.
"""

from typing import Any

from PyQt5.QtCore import QObject, pyqtSignal

from stimconfig.model.channel_store import ChannelStore
from stimconfig.model.grouping import GroupingEngine
from stimconfig.model.selection import SelectionController
from stimconfig.utils.logger import logger


class BatchUpdateEngine(QObject):
    """
    Applies editor changes to the current selection.

    Signals:
        channels_changed(ChannelSet): new snapshot after an edit
        groups_changed(GroupMap): groups recomputed for that snapshot
    """

    channels_changed = pyqtSignal(object)
    groups_changed = pyqtSignal(object)

    def __init__(self, store: ChannelStore, selection: SelectionController,
                 grouping: GroupingEngine, parent=None):
        super().__init__(parent)
        self.store = store
        self.selection = selection
        self.grouping = grouping

    def on_field_change(self, field: str, raw_value: Any) -> bool:
        """
        Set `field` on every selected channel.

        Returns False without touching anything when no channel has been
        activated yet.
        """
        if self.selection.anchor is None:
            logger.debug(f"Ignoring {field} edit, no active channel", component="BATCH")
            return False

        snapshot = self.store.apply_batch(self.selection.selected, field, raw_value)
        groups = self.grouping.recompute(snapshot)
        logger.debug(
            f"{field} edit on {len(self.selection)} channel(s), {len(groups)} group(s)",
            component="BATCH",
        )

        self.channels_changed.emit(snapshot)
        self.groups_changed.emit(groups)
        return True

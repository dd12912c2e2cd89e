"""
Channel Session
Wires the store, selection, grouping and batch engines together.

The GUI reads channels, selection and groups from here and routes input
through activate() and on_field_change(); it never mutates the parts
directly.
"""

from typing import Any, Optional

from stimconfig.model.batch import BatchUpdateEngine
from stimconfig.model.channel_store import ChannelSet, ChannelStore
from stimconfig.model.grouping import ChannelGroup, GroupingEngine, GroupMap
from stimconfig.model.selection import NO_MODIFIERS, Modifiers, SelectionController


class ChannelSession:
    """One editing session over the channel bank."""

    def __init__(self, store: Optional[ChannelStore] = None):
        self.store = store if store is not None else ChannelStore()
        self.selection = SelectionController(num_channels=len(self.store))
        self.grouping = GroupingEngine(self.store.get())
        self.batch = BatchUpdateEngine(self.store, self.selection, self.grouping)

    @property
    def channels(self) -> ChannelSet:
        return self.store.get()

    @property
    def groups(self) -> GroupMap:
        return self.grouping.groups

    @property
    def anchor(self) -> Optional[int]:
        return self.selection.anchor

    @property
    def selected(self):
        return self.selection.selected

    def activate(self, index: int, modifiers: Modifiers = NO_MODIFIERS):
        self.selection.activate(index, modifiers)

    def on_field_change(self, field: str, raw_value: Any) -> bool:
        return self.batch.on_field_change(field, raw_value)

    def color_of(self, index: int):
        return self.grouping.color_of(index)

    def group_of(self, index: int) -> Optional[ChannelGroup]:
        return self.grouping.group_of(index)

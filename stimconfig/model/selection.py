"""
Selection Controller
Turns channel clicks plus modifier keys into a selection and an anchor.

- plain click: select only that channel
- ctrl/cmd click: toggle that channel
- shift click: add the range from the most recently added channel
  to the clicked one

The selection keeps insertion order; shift ranges start from the last
element added, not from the anchor or the highest index.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from PyQt5.QtCore import QObject, Qt, pyqtSignal

from stimconfig.config import NUM_CHANNELS
from stimconfig.utils.logger import logger


@dataclass(frozen=True)
class Modifiers:
    """Modifier keys held during a channel click."""
    shift: bool = False
    ctrl_or_meta: bool = False

    @classmethod
    def from_qt(cls, modifiers) -> 'Modifiers':
        """Build from Qt.KeyboardModifiers. Control and Meta both toggle."""
        modifiers = int(modifiers)
        return cls(
            shift=bool(modifiers & int(Qt.ShiftModifier)),
            ctrl_or_meta=bool(modifiers & (int(Qt.ControlModifier) | int(Qt.MetaModifier))),
        )


NO_MODIFIERS = Modifiers()


class SelectionController(QObject):
    """
    Owns the channel selection.

    Signals:
        selection_changed(selected, anchor): emitted after every activate()
    """

    selection_changed = pyqtSignal(object, object)  # tuple of indices, anchor or None

    def __init__(self, num_channels: int = NUM_CHANNELS, parent=None):
        super().__init__(parent)
        self._num_channels = num_channels
        self._order: List[int] = []   # insertion order
        self._members = set()         # membership index over _order
        self._anchor: Optional[int] = None

    @property
    def selected(self) -> Tuple[int, ...]:
        """Selected indices in insertion order."""
        return tuple(self._order)

    @property
    def anchor(self) -> Optional[int]:
        return self._anchor

    def __len__(self):
        return len(self._order)

    def __contains__(self, index):
        return index in self._members

    def is_selected(self, index: int) -> bool:
        return index in self._members

    def activate(self, index: int, modifiers: Modifiers = NO_MODIFIERS):
        """Apply a click on channel `index` with the given modifiers."""
        if not 0 <= index < self._num_channels:
            raise IndexError(f"Channel index {index} out of range 0-{self._num_channels - 1}")

        if modifiers.shift and self._order:
            last = self._order[-1]
            lo, hi = min(last, index), max(last, index)
            for i in range(lo, hi + 1):
                self._add(i)
            mode = "range"
        elif modifiers.ctrl_or_meta:
            if index in self._members:
                self._order.remove(index)
                self._members.discard(index)
            else:
                self._add(index)
            mode = "toggle"
        else:
            self._order = [index]
            self._members = {index}
            mode = "single"

        self._anchor = index
        logger.debug(
            f"{mode} select ch {index + 1}: {len(self._order)} selected",
            component="SEL",
        )
        self.selection_changed.emit(self.selected, self._anchor)

    def _add(self, index: int):
        if index not in self._members:
            self._order.append(index)
            self._members.add(index)

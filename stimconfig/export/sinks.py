"""
Export sinks
Destinations for rendered export text.

Any object with a write(text) method works as a sink. write() raises
ExportSinkError when the text could not be delivered.
"""

from typing import List, Protocol

from PyQt5.QtWidgets import QApplication

from stimconfig.model.errors import ExportSinkError


class TextSink(Protocol):
    def write(self, text: str) -> None:
        ...


class ClipboardSink:
    """Copies text to the system clipboard through Qt."""

    def write(self, text: str) -> None:
        app = QApplication.instance()
        if app is None:
            raise ExportSinkError("No QApplication running, clipboard unavailable")
        clipboard = app.clipboard()
        if clipboard is None:
            raise ExportSinkError("Clipboard unavailable")
        clipboard.setText(text)


class MemorySink:
    """Keeps every written text in `writes`."""

    def __init__(self):
        self.writes: List[str] = []

    @property
    def last(self):
        return self.writes[-1] if self.writes else None

    def write(self, text: str) -> None:
        self.writes.append(text)

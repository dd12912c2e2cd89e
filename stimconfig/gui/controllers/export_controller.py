"""
ExportController - Renders the channel bank and hands it to a text sink.

The rendered text is also mirrored to the log. Sink failures are reported
through export_failed and never touch channel state.
"""
from __future__ import annotations

from PyQt5.QtCore import QObject, pyqtSignal

from stimconfig.export.serializer import render
from stimconfig.export.sinks import ClipboardSink, TextSink
from stimconfig.model.errors import ExportSinkError
from stimconfig.utils.logger import logger


class ExportController(QObject):
    """Handles the "Generate Python Code" action."""

    export_succeeded = pyqtSignal(str)  # rendered text
    export_failed = pyqtSignal(str)     # user-facing message

    def __init__(self, session, sink: TextSink | None = None, parent=None):
        super().__init__(parent)
        self.session = session
        self.sink = sink if sink is not None else ClipboardSink()

    def export(self) -> str | None:
        """Render and deliver. Returns the text, or None if the sink failed."""
        text = render(self.session.channels)
        logger.info(f"Generated control script:\n{text}", component="EXPORT")

        try:
            self.sink.write(text)
        except (ExportSinkError, OSError, RuntimeError) as e:
            logger.error("Export failed", component="EXPORT", details=str(e))
            self.export_failed.emit(f"Could not copy the Python code: {e}")
            return None

        logger.info(f"Exported {len(self.session.channels)} channels", component="EXPORT")
        self.export_succeeded.emit(text)
        return text

"""
Logger - Central logging system for Stim Config

Usage:
    from stimconfig.utils.logger import logger

    logger.info("Export written", component="EXPORT")
    logger.error("Clipboard unavailable", component="EXPORT", details=str(e))

    # Per-channel trace (0-based index, shown 1-based)
    logger.channel(2, "frequency = 20")   # -> "[CH] Ch 3: frequency = 20"

Records are mirrored to a Qt signal so a GUI console can follow the log.
The console level can be set at startup through STIMCONFIG_LOG_LEVEL.
"""

import logging
import os
import sys
from datetime import datetime
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal

LOG_LEVEL_ENV = "STIMCONFIG_LOG_LEVEL"


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG      # 10
    INFO = logging.INFO        # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR      # 40

    @classmethod
    def parse(cls, name: str) -> "LogLevel":
        """Level from a case-insensitive name ('debug', 'WARN', ...)."""
        key = name.strip().upper()
        if key == "WARN":
            key = "WARNING"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level {name!r}") from None


class LogSignalEmitter(QObject):
    """Qt signal emitter for log updates."""
    log_message = pyqtSignal(str, int, str)  # message, level, timestamp


class QtSignalHandler(logging.Handler):
    """Logging handler that re-emits records as Qt signals."""

    def __init__(self, emitter: LogSignalEmitter):
        super().__init__()
        self.emitter = emitter

    def emit(self, record: logging.LogRecord):
        try:
            msg = self.format(record)
            timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            self.emitter.log_message.emit(msg, record.levelno, timestamp)
        except Exception:
            self.handleError(record)


class StimConfigLogger:
    """
    Central logger for Stim Config.

    Console shows INFO and up by default; the Qt signal and the optional
    log file always get everything, including per-channel edit traces.
    """

    def __init__(self):
        self._logger = logging.getLogger("stimconfig")
        self._logger.setLevel(logging.DEBUG)  # filtering happens per handler
        self._logger.propagate = False

        self.signal_emitter = LogSignalEmitter()

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        self._console_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S"
        ))
        self._logger.addHandler(self._console_handler)

        self._qt_handler = QtSignalHandler(self.signal_emitter)
        self._qt_handler.setLevel(logging.DEBUG)
        self._qt_handler.setFormatter(logging.Formatter("%(message)s"))
        self._logger.addHandler(self._qt_handler)

        self._file_handler: Optional[logging.FileHandler] = None

    @property
    def console_level(self) -> LogLevel:
        return LogLevel(self._console_handler.level)

    def set_level(self, level: LogLevel):
        """Set minimum log level for console output."""
        self._console_handler.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Write every record (DEBUG and up) to `filepath`."""
        self.disable_file_logging()
        self._file_handler = logging.FileHandler(filepath, encoding="utf-8")
        self._file_handler.setLevel(logging.DEBUG)
        self._file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s"
        ))
        self._logger.addHandler(self._file_handler)

    def disable_file_logging(self):
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    @staticmethod
    def _format_message(msg: str, component: Optional[str] = None,
                        details: Optional[str] = None) -> str:
        text = f"[{component}] {msg}" if component else msg
        return f"{text} - {details}" if details else text

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._logger.debug(self._format_message(msg, component, details))

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        self._logger.info(self._format_message(msg, component, details))

    def warning(self, msg: str, component: Optional[str] = None,
                details: Optional[str] = None):
        self._logger.warning(self._format_message(msg, component, details))

    def error(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._logger.error(self._format_message(msg, component, details))

    def channel(self, index: int, msg: str, details: Optional[str] = None):
        """Trace one channel (0-based index) at DEBUG under [CH]."""
        self.debug(f"Ch {index + 1}: {msg}", component="CH", details=details)


# Global logger instance
logger = StimConfigLogger()


def set_log_level(level: LogLevel):
    """Set the console log level."""
    logger.set_level(level)


def log_level_from_env() -> Optional[LogLevel]:
    """Console level requested through STIMCONFIG_LOG_LEVEL, or None if unset."""
    name = os.environ.get(LOG_LEVEL_ENV)
    if not name:
        return None
    return LogLevel.parse(name)

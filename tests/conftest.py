"""Pytest configuration - headless Qt and shared fixtures.

Qt signals on plain QObjects work without a QApplication; the offscreen
platform only matters for tests that build widgets.
"""
from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from stimconfig.model.channel import default_channels
from stimconfig.model.channel_store import ChannelStore
from stimconfig.model.session import ChannelSession
from stimconfig.export.sinks import MemorySink


@pytest.fixture
def channels():
    """Default 12-channel snapshot."""
    return default_channels()


@pytest.fixture
def store():
    return ChannelStore()


@pytest.fixture
def session():
    return ChannelSession()


@pytest.fixture
def memory_sink():
    return MemorySink()


class SignalRecorder:
    """Collects emitted signal arguments."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def record():
    """Factory: record(signal) -> SignalRecorder."""
    return SignalRecorder

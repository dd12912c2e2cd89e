"""
Channel Store
Single source of truth for the channel bank.

Holds an immutable snapshot (tuple of Channel). apply_batch() is the only
mutation and always swaps in a new tuple; channels outside the batch are
carried over as the same objects.
"""

from typing import Any, Iterable, Optional, Tuple

from stimconfig.config import NUM_CHANNELS
from stimconfig.model.channel import Channel, default_channels, resolve_field
from stimconfig.utils.logger import logger


ChannelSet = Tuple[Channel, ...]


def apply_batch(channels: ChannelSet, indices: Iterable[int], field: str, value: Any) -> ChannelSet:
    """Pure batch edit: return a new snapshot with `field` set on every index."""
    key = resolve_field(field)
    new_channels = list(channels)
    for index in indices:
        if not 0 <= index < len(channels):
            raise IndexError(f"Channel index {index} out of range 0-{len(channels) - 1}")
        new_channels[index] = channels[index].with_field(key, value)
    return tuple(new_channels)


class ChannelStore:
    """Holds the current ChannelSet snapshot."""

    def __init__(self, channels: Optional[ChannelSet] = None):
        if channels is None:
            channels = default_channels()
        channels = tuple(channels)
        if len(channels) != NUM_CHANNELS:
            raise ValueError(f"Expected {NUM_CHANNELS} channels, got {len(channels)}")
        for i, ch in enumerate(channels):
            if ch.id != i + 1:
                raise ValueError(f"Channel at position {i} has id {ch.id}, expected {i + 1}")
        self._channels: ChannelSet = channels

    def __len__(self):
        return len(self._channels)

    def get(self) -> ChannelSet:
        """Current snapshot."""
        return self._channels

    def apply_batch(self, indices: Iterable[int], field: str, value: Any) -> ChannelSet:
        """Set `field` to `value` on every channel in `indices` and return the new snapshot."""
        indices = list(indices)
        self._channels = apply_batch(self._channels, indices, field, value)
        key = resolve_field(field)
        logger.debug(f"{key} = {value!r} on {len(indices)} channel(s)", component="STORE")
        for index in indices:
            logger.channel(index, f"{key} -> {getattr(self._channels[index], key)!r}")
        return self._channels

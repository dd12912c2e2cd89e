"""
Export Serializer
Renders the channel bank as a Python control script.

Output depends on the channel values only; selection never affects it.
Every channel produces one record, records are separated by a blank line:

    set_channel = 1
    channels[set_channel-1].set_frequency(10)
    ...
    channels[set_channel-1].set_num_of_stims(3)
"""

import math
from typing import Sequence

from stimconfig.config import (
    CHANNEL_FIELDS,
    EXPORT_CHANNEL_ARRAY,
    EXPORT_CURSOR_NAME,
)
from stimconfig.model.channel import Channel


def format_value(value) -> str:
    """Python literal for a channel value."""
    if isinstance(value, bool):
        return 'True' if value else 'False'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "float('nan')"
        if math.isinf(value):
            return "float('inf')" if value > 0 else "float('-inf')"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return repr(value)


def render_channel(channel: Channel) -> str:
    """One record: cursor assignment plus a setter call per field."""
    target = f"{EXPORT_CHANNEL_ARRAY}[{EXPORT_CURSOR_NAME}-1]"
    lines = [f"{EXPORT_CURSOR_NAME} = {channel.id}"]
    for spec in CHANNEL_FIELDS:
        value = getattr(channel, spec['key'])
        lines.append(f"{target}.{spec['setter']}({format_value(value)})")
    return "\n".join(lines)


def render(channels: Sequence[Channel]) -> str:
    """Render every channel, in id order."""
    ordered = sorted(channels, key=lambda ch: ch.id)
    return "\n\n".join(render_channel(ch) for ch in ordered) + "\n"

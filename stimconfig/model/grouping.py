"""
Grouping Engine
Partitions channels into groups of identical configuration and assigns
each group a display colour.

Groups are derived data: compute_groups() rebuilds the whole map from a
channel snapshot, walking channels in index order so the first distinct
configuration always gets palette colour 0, the second colour 1, and so on
(cycling after the palette runs out).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from stimconfig.config import GROUP_COLORS, UNGROUPED_COLOR
from stimconfig.model.channel import Channel, Signature


@dataclass
class ChannelGroup:
    """Channels sharing one configuration."""
    color: tuple
    members: List[int] = field(default_factory=list)  # 0-based, ascending

    def __contains__(self, index):
        return index in self.members

    def __len__(self):
        return len(self.members)


GroupMap = Dict[Signature, ChannelGroup]


def compute_groups(channels: Sequence[Channel], palette: Sequence = GROUP_COLORS) -> GroupMap:
    """Build the signature -> group map for a channel snapshot."""
    groups: GroupMap = {}
    for index, channel in enumerate(channels):
        sig = channel.signature
        group = groups.get(sig)
        if group is None:
            group = ChannelGroup(color=palette[len(groups) % len(palette)])
            groups[sig] = group
        group.members.append(index)
    return groups


def color_of(groups: GroupMap, index: int, default=UNGROUPED_COLOR):
    """Colour of the group containing `index`, or `default` if none does."""
    for group in groups.values():
        if index in group:
            return group.color
    return default


class GroupingEngine:
    """Holds the GroupMap for the latest channel snapshot."""

    def __init__(self, channels: Optional[Sequence[Channel]] = None, palette: Sequence = GROUP_COLORS):
        self._palette = tuple(palette)
        self._groups: GroupMap = {}
        if channels is not None:
            self.recompute(channels)

    @property
    def groups(self) -> GroupMap:
        return self._groups

    def recompute(self, channels: Sequence[Channel]) -> GroupMap:
        """Rebuild all groups from `channels`."""
        self._groups = compute_groups(channels, self._palette)
        return self._groups

    def color_of(self, index: int):
        return color_of(self._groups, index)

    def group_of(self, index: int) -> Optional[ChannelGroup]:
        for group in self._groups.values():
            if index in group:
                return group
        return None

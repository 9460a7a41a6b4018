"""Top-level column split of the screen."""

from __future__ import annotations

from chatlayout.config import DEFAULT_CONFIG, LayoutConfig
from chatlayout.geometry import Direction, Rect, split_ratios
from chatlayout.state import Snapshot


def selected_has_members(snapshot: Snapshot) -> bool:
    channel = snapshot.selected_channel
    return channel is not None and bool(channel.members)


def split_screen(
    screen: Rect,
    has_members: bool,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[Rect]:
    """Return ``[channels, chat]`` or ``[channels, chat, members]`` columns."""
    ratios = config.ratios_with_members if has_members else config.ratios_without_members
    return split_ratios(screen, ratios, Direction.HORIZONTAL)

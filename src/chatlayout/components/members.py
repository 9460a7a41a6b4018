"""Member column: role glyph and display name, coloured by presence."""

from __future__ import annotations

from chatlayout.config import DEFAULT_CONFIG, LayoutConfig
from chatlayout.geometry import Rect
from chatlayout.pane import Corner, Pane
from chatlayout.state import Member, Snapshot
from chatlayout.text import ListItem, StyledLine


def member_line(
    member: Member,
    snapshot: Snapshot,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> StyledLine:
    style = config.present_style if snapshot.is_present(member.hash) else config.absent_style
    name = snapshot.resolve_name(member.hash)
    return StyledLine.raw(f"{config.glyph(member.role)} {name}", style)


def render_members(
    rect: Rect,
    snapshot: Snapshot,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Pane:
    """Most recently added members first, at most one per pane row."""
    channel = snapshot.selected_channel
    members = channel.members if channel is not None else []
    items = tuple(
        ListItem.from_line(member_line(member, snapshot, config))
        for member in list(reversed(members))[:rect.height]
    )
    return Pane(
        rect=rect,
        items=items,
        style=config.pane_style,
        corner=Corner.TOP_LEFT,
    )

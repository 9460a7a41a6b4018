"""Message history pane.

Messages are laid out newest-first and the pane stacks from its bottom edge,
so the newest message ends up on the bottom row like a live feed. Each
message renders as::

    HH:MM  name: first wrapped line of the body
                 continuation lines aligned under the body

An unread divider separates the newest ``unread_messages`` entries from the
rest.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Sequence

from chatlayout.colors import user_color
from chatlayout.config import DEFAULT_CONFIG, LayoutConfig
from chatlayout.geometry import Rect
from chatlayout.pane import Corner, Pane
from chatlayout.state import Channel, Message
from chatlayout.style import Style
from chatlayout.text import ListItem, Span, StyledLine
from chatlayout.utils import take_columns, visible_width, wrap_text

_DELIMITER = ": "
# "HH:MM " plus ": "
_FIXED_PREFIX_WIDTH = 8


def first_name(name: str) -> str:
    """Return *name* up to its first space."""
    return name.split(" ", 1)[0]


def format_time(arrived_at: datetime, tz: tzinfo | None = None) -> str:
    """Format *arrived_at* as ``HH:MM `` in *tz* (the local zone if ``None``)."""
    local = arrived_at.astimezone(tz)
    return f"{local.hour:02}:{local.minute:02} "


def max_username_width(messages: Sequence[Message]) -> int:
    return max((visible_width(first_name(m.sender)) for m in messages), default=0)


def message_block(
    message: Message,
    name_width: int,
    width: int,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> ListItem:
    """Render one message as a list item of one or more wrapped rows."""
    time = Span(format_time(message.arrived_at, config.timezone), config.time_style)
    name = first_name(message.sender)
    padding = " " * max(0, name_width - visible_width(name))
    sender = Span(
        padding + name,
        Style(fg=user_color(message.sender, config.palette)),
    )
    delimiter = Span(_DELIMITER)

    prefix_width = time.width + sender.width + delimiter.width
    body_width = width - prefix_width
    if body_width <= 0:
        # No room for the body: one row, cut at the pane edge
        first = message.body.split("\n", 1)[0]
        row = StyledLine((time, sender, delimiter, Span(first)))
        return ListItem.from_line(row.clip(width))

    indent = " " * prefix_width
    body_lines = wrap_text(message.body, body_width)

    lines = [StyledLine((time, sender, delimiter, Span(body_lines[0])))]
    lines.extend(StyledLine.raw(indent + line) for line in body_lines[1:])
    return ListItem(tuple(line.clip(width) for line in lines))


def divider_line(name_width: int, width: int, label: str = "new messages") -> StyledLine:
    """Dashed unread separator, e.g. ``------new messages--------``."""
    k = name_width + _FIXED_PREFIX_WIDTH
    right = max(0, width - k - visible_width(label))
    return StyledLine.raw(take_columns("-" * k + label + "-" * right, width))


def pane_title(channel: Channel | None, config: LayoutConfig = DEFAULT_CONFIG) -> str:
    if channel is None or not channel.description:
        return config.messages_title
    return channel.description


def render_messages(
    rect: Rect,
    channel: Channel | None,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Pane:
    messages = channel.messages if channel is not None else []
    name_width = max_username_width(messages)
    width = max(0, rect.width - 2)
    max_lines = rect.height

    items = [
        message_block(message, name_width, width, config)
        for message in list(reversed(messages))[:max_lines]
    ]

    if channel is not None:
        unread = channel.unread_messages
        if 0 < unread < len(items):
            items.insert(
                unread,
                ListItem.from_line(divider_line(name_width, width, config.divider_label)),
            )

    return Pane(
        rect=rect,
        items=tuple(items),
        title=pane_title(channel, config),
        style=config.pane_style,
        corner=Corner.BOTTOM_LEFT,
    )

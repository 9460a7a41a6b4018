"""Channel list column: one label per channel, selected row highlighted."""

from __future__ import annotations

from typing import Sequence

from chatlayout.config import DEFAULT_CONFIG, LayoutConfig
from chatlayout.geometry import Rect
from chatlayout.pane import Corner, Pane
from chatlayout.state import Snapshot
from chatlayout.text import ListItem, StyledLine
from chatlayout.utils import take_columns, visible_width


def format_channel_label(name: str, unread: int, width: int) -> str:
    """Label a channel as ``name (unread)``, shortening the name to fit *width*.

    The unread suffix is never shortened. When the label has no suffix and
    still does not fit, it is returned unchanged and left to be clipped.
    """
    suffix = f" ({unread})" if unread != 0 else ""
    label = name + suffix
    label_width = visible_width(label)
    if label_width <= width or not suffix:
        return label

    overflow = label_width - width
    keep = max(0, visible_width(name) - overflow)
    return take_columns(name, keep) + suffix


def visible_bounds(
    heights: Sequence[int],
    offset: int,
    selected: int | None,
    max_height: int,
) -> tuple[int, int]:
    """Return the ``[start, end)`` item range shown from *offset*.

    The window is shifted just enough to keep *selected* inside it.
    """
    if not heights:
        return (0, 0)

    offset = min(max(0, offset), len(heights) - 1)
    start = end = offset
    height = 0
    for h in heights[offset:]:
        if height + h > max_height:
            break
        height += h
        end += 1

    if selected is None:
        return (start, end)

    selected = min(max(0, selected), len(heights) - 1)
    while selected >= end:
        height += heights[end]
        end += 1
        while height > max_height and start < end - 1:
            height -= heights[start]
            start += 1
    while selected < start:
        start -= 1
        height += heights[start]
        while height > max_height and end > start + 1:
            end -= 1
            height -= heights[end]
    return (start, end)


def render_channel_list(
    rect: Rect,
    snapshot: Snapshot,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> tuple[Pane, int]:
    """Render the channel column.

    Returns the pane and the scroll offset to keep for the next frame; the
    snapshot itself is left untouched.
    """
    width = max(0, rect.width - 2)
    items = tuple(
        ListItem.from_line(
            StyledLine.raw(
                format_channel_label(channel.best_name, channel.unread_messages, width)
            )
        )
        for channel in snapshot.channels
    )

    selected = snapshot.selection.selected
    if selected is not None and not 0 <= selected < len(items):
        selected = None

    start, _end = visible_bounds(
        [item.height for item in items],
        snapshot.selection.offset,
        selected,
        max(0, rect.height - 2),
    )

    pane = Pane(
        rect=rect,
        items=items,
        title=config.channels_title,
        corner=Corner.TOP_LEFT,
        offset=start,
        highlight=selected,
        highlight_style=config.highlight_style,
    )
    return pane, start

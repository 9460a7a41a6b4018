"""One full redraw: split the screen and render every region."""

from __future__ import annotations

import logging

from chatlayout.components.channel_list import render_channel_list
from chatlayout.components.chat_pane import render_chat_pane
from chatlayout.components.members import render_members
from chatlayout.config import DEFAULT_CONFIG, LayoutConfig
from chatlayout.geometry import Rect
from chatlayout.layout import selected_has_members, split_screen
from chatlayout.pane import Frame, Pane
from chatlayout.state import Snapshot

logger = logging.getLogger(__name__)


def draw(
    screen: Rect,
    snapshot: Snapshot,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Frame:
    """Compute every pane and the cursor cell for *screen*.

    Each component only sees its own rect and the snapshot; none of them
    mutates it. The channel list scroll offset comes back in the frame.
    """
    has_members = selected_has_members(snapshot)
    regions = split_screen(screen, has_members, config)
    logger.debug(
        "Drawing %dx%d frame with %d regions", screen.width, screen.height, len(regions)
    )
    if any(r.width < 2 or r.height < 2 for r in regions):
        logger.debug("Screen too small for borders: %s", regions)

    panes: list[Pane] = []
    channel_pane, offset = render_channel_list(regions[0], snapshot, config)
    panes.append(channel_pane)

    chat_panes, cursor = render_chat_pane(regions[1], snapshot, config)
    panes.extend(chat_panes)

    if has_members and len(regions) > 2:
        panes.append(render_members(regions[2], snapshot, config))

    return Frame(panes=tuple(panes), cursor=cursor, channel_offset=offset)

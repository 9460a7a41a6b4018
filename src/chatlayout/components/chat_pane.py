"""Chat column: message history above, input box below."""

from __future__ import annotations

from chatlayout.components.input_box import input_height, render_input_box, text_width_for
from chatlayout.components.messages import render_messages
from chatlayout.config import DEFAULT_CONFIG, LayoutConfig
from chatlayout.geometry import Rect, split_bottom
from chatlayout.pane import Pane
from chatlayout.state import Snapshot


def render_chat_pane(
    rect: Rect,
    snapshot: Snapshot,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> tuple[list[Pane], tuple[int, int]]:
    """Return ``[messages, input]`` panes and the absolute cursor cell."""
    buffer = snapshot.input
    text_width = text_width_for(rect)
    box_height = input_height(buffer.text, buffer.clamped_cursor, text_width)

    messages_rect, input_rect = split_bottom(rect, box_height)
    messages = render_messages(messages_rect, snapshot.selected_channel, config)
    input_box, cursor = render_input_box(input_rect, buffer, text_width, config)
    return [messages, input_box], cursor

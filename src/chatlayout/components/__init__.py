"""Per-region renderers."""

from chatlayout.components.channel_list import (
    format_channel_label,
    render_channel_list,
    visible_bounds,
)
from chatlayout.components.chat_pane import render_chat_pane
from chatlayout.components.input_box import (
    cursor_cell,
    input_height,
    render_input_box,
    wrap_input,
)
from chatlayout.components.members import member_line, render_members
from chatlayout.components.messages import (
    divider_line,
    first_name,
    format_time,
    message_block,
    render_messages,
)

__all__ = [
    "cursor_cell",
    "divider_line",
    "first_name",
    "format_channel_label",
    "format_time",
    "input_height",
    "member_line",
    "message_block",
    "render_channel_list",
    "render_chat_pane",
    "render_input_box",
    "render_members",
    "render_messages",
    "visible_bounds",
    "wrap_input",
]

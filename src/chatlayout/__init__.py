"""chatlayout: layout and rendering core for a terminal chat client."""

# Colour assignment
from chatlayout.colors import user_color

# Per-region renderers
from chatlayout.components import (
    cursor_cell,
    divider_line,
    first_name,
    format_channel_label,
    format_time,
    input_height,
    member_line,
    message_block,
    render_channel_list,
    render_chat_pane,
    render_input_box,
    render_members,
    render_messages,
    visible_bounds,
    wrap_input,
)

# Configuration
from chatlayout.config import (
    DEFAULT_CONFIG,
    DEFAULT_PALETTE,
    ConfigError,
    LayoutConfig,
    config_from_dict,
    config_to_dict,
    load_config,
)

# Full redraw
from chatlayout.frame import draw

# Geometry
from chatlayout.geometry import Direction, Rect, split_bottom, split_ratios
from chatlayout.layout import selected_has_members, split_screen

# Drawable model
from chatlayout.pane import Corner, Frame, Pane

# Reference backend
from chatlayout.screen import Cell, Screen, render_to_ansi

# Application state
from chatlayout.state import (
    Channel,
    ChannelSelection,
    InputBuffer,
    Member,
    Message,
    Role,
    Snapshot,
)
from chatlayout.style import Color, Style
from chatlayout.text import ListItem, Span, StyledLine

# Utilities
from chatlayout.utils import take_columns, visible_width, wrap_text

__all__ = [
    # Colours and styles
    "Color",
    "Style",
    "user_color",
    # Text
    "ListItem",
    "Span",
    "StyledLine",
    # Geometry
    "Direction",
    "Rect",
    "selected_has_members",
    "split_bottom",
    "split_ratios",
    "split_screen",
    # Panes
    "Corner",
    "Frame",
    "Pane",
    "draw",
    # Components
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
    # Config
    "ConfigError",
    "DEFAULT_CONFIG",
    "DEFAULT_PALETTE",
    "LayoutConfig",
    "config_from_dict",
    "config_to_dict",
    "load_config",
    # Backend
    "Cell",
    "Screen",
    "render_to_ansi",
    # State
    "Channel",
    "ChannelSelection",
    "InputBuffer",
    "Member",
    "Message",
    "Role",
    "Snapshot",
    # Utilities
    "take_columns",
    "visible_width",
    "wrap_text",
]

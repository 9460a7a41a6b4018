"""Input box: fixed-width chunking of the input buffer and cursor placement.

Chunks are counted in characters, not display cells, so wide glyphs in the
input can misalign the cursor. Kept that way on purpose.
"""

from __future__ import annotations

from chatlayout.config import DEFAULT_CONFIG, LayoutConfig
from chatlayout.geometry import Rect
from chatlayout.pane import Corner, Pane
from chatlayout.state import InputBuffer
from chatlayout.text import ListItem, StyledLine


def text_width_for(column: Rect) -> int:
    """Interior width of the input box in *column*, never below one."""
    return max(1, column.width - 2)


def wrap_input(text: str, text_width: int) -> list[str]:
    """Split *text* into chunks of *text_width* characters."""
    text_width = max(1, text_width)
    return [text[i:i + text_width] for i in range(0, len(text), text_width)]


def input_line_count(text: str, text_width: int) -> int:
    return max(1, len(wrap_input(text, text_width)))


def input_height(text: str, cursor: int, text_width: int) -> int:
    """Rows needed by the input box, borders included.

    A cursor sitting exactly at the end of a full row gets an extra empty
    row to move into instead of overlapping the border.
    """
    text_width = max(1, text_width)
    extra = 1 if cursor > 0 and cursor % text_width == 0 else 0
    return input_line_count(text, text_width) + 2 + extra


def cursor_cell(rect: Rect, cursor: int, text_width: int) -> tuple[int, int]:
    """Absolute ``(x, y)`` of the cursor; row and column 0 are the border."""
    text_width = max(1, text_width)
    x = rect.x + 1 + cursor % text_width
    y = rect.y + 1 + cursor // text_width
    # Only reachable when the screen is too small for the box
    x = min(x, max(rect.x, rect.right - 1))
    y = min(y, max(rect.y, rect.bottom - 1))
    return (x, y)


def render_input_box(
    rect: Rect,
    buffer: InputBuffer,
    text_width: int,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> tuple[Pane, tuple[int, int]]:
    items = tuple(
        ListItem.from_line(StyledLine.raw(chunk))
        for chunk in wrap_input(buffer.text, text_width)
    )
    pane = Pane(
        rect=rect,
        items=items,
        title=config.input_title,
        corner=Corner.TOP_LEFT,
    )
    return pane, cursor_cell(rect, buffer.clamped_cursor, text_width)

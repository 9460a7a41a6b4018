"""Drawable output of a redraw: bordered list panes and the frame holding them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chatlayout.geometry import Rect
from chatlayout.style import PLAIN, Style
from chatlayout.text import ListItem


class Corner(Enum):
    """Where a pane starts stacking its items."""

    TOP_LEFT = "top-left"
    BOTTOM_LEFT = "bottom-left"


@dataclass(frozen=True)
class Pane:
    """A bordered region holding list items.

    ``offset`` is the index of the first item the backend should try to show
    and ``highlight`` the index of the item drawn with ``highlight_style``.
    With ``Corner.BOTTOM_LEFT`` the first item sits on the bottom row and
    later items stack upwards; the rows inside a multi-line item keep their
    top-to-bottom order.
    """

    rect: Rect
    items: tuple[ListItem, ...] = ()
    title: str | None = None
    style: Style = PLAIN
    corner: Corner = Corner.TOP_LEFT
    borders: bool = True
    offset: int = 0
    highlight: int | None = None
    highlight_style: Style = PLAIN

    @property
    def interior(self) -> Rect:
        return self.rect.inner() if self.borders else self.rect


@dataclass(frozen=True)
class Frame:
    """Everything one redraw produces.

    ``cursor`` is the absolute ``(x, y)`` cell the host must place the
    terminal cursor at. ``channel_offset`` is the channel list scroll offset
    to store back for the next frame.
    """

    panes: tuple[Pane, ...]
    cursor: tuple[int, int] | None = None
    channel_offset: int = 0

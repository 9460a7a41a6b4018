"""In-memory cell grid that draws frames, for terminals and for tests.

This is a reference backend for the drawable model: it knows how to draw
borders, titles and list stacking, and how to turn the result into plain or
SGR-coded text rows. Any other backend only needs to honour the same
``Pane`` semantics.
"""

from __future__ import annotations

from dataclasses import dataclass

import grapheme

from chatlayout.geometry import Rect
from chatlayout.pane import Corner, Frame, Pane
from chatlayout.style import PLAIN, Style
from chatlayout.text import ListItem, StyledLine
from chatlayout.utils import expand_tabs, grapheme_width

_RESET = "\x1b[0m"

# Box drawing: top-left, top-right, bottom-left, bottom-right, horizontal, vertical
_TL, _TR, _BL, _BR, _H, _V = "┌", "┐", "└", "┘", "─", "│"


@dataclass
class Cell:
    # Empty symbol marks the trailing half of a wide glyph
    symbol: str = " "
    style: Style = PLAIN


class Screen:
    """A ``width`` x ``height`` grid of cells plus a cursor position."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]
        self.cursor: tuple[int, int] | None = None

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # -- Primitives ---------------------------------------------------------

    def set_style(self, rect: Rect, style: Style) -> None:
        for y in range(rect.y, min(rect.bottom, self.height)):
            for x in range(rect.x, min(rect.right, self.width)):
                cell = self._cells[y][x]
                cell.style = cell.style.patch(style)

    def set_string(self, x: int, y: int, text: str, style: Style, max_width: int) -> int:
        """Write *text* at ``(x, y)`` clipped to *max_width* columns.

        Returns the number of columns written. Wide glyphs are never split:
        one that does not fit entirely is dropped.
        """
        if not 0 <= y < self.height:
            return 0
        limit = min(max_width, self.width - x)
        col = 0
        for g in grapheme.graphemes(expand_tabs(text)):
            w = grapheme_width(g)
            if w == 0:
                continue
            if col + w > limit:
                break
            target = self._cells[y][x + col]
            target.symbol = g
            target.style = target.style.patch(style)
            for i in range(1, w):
                trailing = self._cells[y][x + col + i]
                trailing.symbol = ""
                trailing.style = target.style
            col += w
        return col

    def set_line(self, x: int, y: int, line: StyledLine, base: Style, max_width: int) -> int:
        col = 0
        for span in line.spans:
            if col >= max_width:
                break
            col += self.set_string(x + col, y, span.text, base.patch(span.style), max_width - col)
        return col

    # -- Widgets ------------------------------------------------------------

    def draw_block(self, rect: Rect, title: str | None, style: Style = PLAIN) -> None:
        """Draw a border around *rect* with *title* on its top edge."""
        if rect.width < 2 or rect.height < 2:
            return
        left, right = rect.x, rect.right - 1
        top, bottom = rect.y, rect.bottom - 1
        for x in range(left + 1, right):
            self._put(x, top, _H, style)
            self._put(x, bottom, _H, style)
        for y in range(top + 1, bottom):
            self._put(left, y, _V, style)
            self._put(right, y, _V, style)
        self._put(left, top, _TL, style)
        self._put(right, top, _TR, style)
        self._put(left, bottom, _BL, style)
        self._put(right, bottom, _BR, style)
        if title:
            self.set_string(left + 1, top, title, style, rect.width - 2)

    def _put(self, x: int, y: int, symbol: str, style: Style) -> None:
        if self._in_bounds(x, y):
            cell = self._cells[y][x]
            cell.symbol = symbol
            cell.style = cell.style.patch(style)

    def draw_pane(self, pane: Pane) -> None:
        rect = pane.rect
        if rect.area == 0:
            return
        self.set_style(rect, pane.style)
        if pane.borders:
            self.draw_block(rect, pane.title, pane.style)

        interior = pane.interior
        if interior.area == 0 or not pane.items:
            return

        shown = _fitting_items(pane.items, pane.offset, interior.height)
        y = interior.y if pane.corner is Corner.TOP_LEFT else interior.bottom
        for index, item in shown:
            if pane.corner is Corner.BOTTOM_LEFT:
                y -= item.height
            base = pane.style
            if index == pane.highlight:
                base = base.patch(pane.highlight_style)
                self.set_style(Rect(interior.x, y, interior.width, item.height), pane.highlight_style)
            for row, line in enumerate(item.lines):
                self.set_line(interior.x, y + row, line, base, interior.width)
            if pane.corner is Corner.TOP_LEFT:
                y += item.height

    def draw_frame(self, frame: Frame) -> None:
        for pane in frame.panes:
            self.draw_pane(pane)
        self.cursor = frame.cursor

    # -- Output -------------------------------------------------------------

    def lines(self) -> list[str]:
        """Plain text of every row."""
        return ["".join(cell.symbol for cell in row) for row in self._cells]

    def to_ansi(self) -> list[str]:
        """Every row with SGR codes for style changes, reset at row end."""
        out: list[str] = []
        for row in self._cells:
            parts: list[str] = []
            current = PLAIN
            for cell in row:
                if not cell.symbol:
                    continue
                if cell.style != current:
                    parts.append(_RESET + cell.style.sgr())
                    current = cell.style
                parts.append(cell.symbol)
            if current != PLAIN:
                parts.append(_RESET)
            out.append("".join(parts))
        return out


def _fitting_items(
    items: tuple[ListItem, ...], offset: int, max_height: int
) -> list[tuple[int, ListItem]]:
    """Whole items from *offset* onwards that fit into *max_height* rows."""
    shown: list[tuple[int, ListItem]] = []
    height = 0
    for index in range(max(0, offset), len(items)):
        item = items[index]
        if height + item.height > max_height:
            break
        shown.append((index, item))
        height += item.height
    return shown


def render_to_ansi(frame: Frame, width: int, height: int) -> list[str]:
    """Draw *frame* on a fresh ``width`` x ``height`` screen and return SGR rows."""
    screen = Screen(width, height)
    screen.draw_frame(frame)
    return screen.to_ansi()

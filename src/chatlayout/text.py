"""Styled text primitives consumed by rendering backends."""

from __future__ import annotations

from dataclasses import dataclass

from chatlayout.style import PLAIN, Style
from chatlayout.utils import expand_tabs, take_columns, visible_width


@dataclass(frozen=True)
class Span:
    text: str
    style: Style = PLAIN

    @property
    def width(self) -> int:
        return visible_width(self.text)


@dataclass(frozen=True)
class StyledLine:
    """A single row of text made of styled spans."""

    spans: tuple[Span, ...] = ()

    @classmethod
    def raw(cls, text: str, style: Style = PLAIN) -> StyledLine:
        return cls((Span(text, style),))

    @property
    def width(self) -> int:
        return sum(span.width for span in self.spans)

    @property
    def plain(self) -> str:
        return "".join(span.text for span in self.spans)

    def clip(self, width: int) -> StyledLine:
        """Cut the line to at most *width* columns, keeping span styles."""
        spans: list[Span] = []
        remaining = width
        for span in self.spans:
            if remaining <= 0:
                break
            text = take_columns(span.text, remaining)
            spans.append(Span(text, span.style))
            if text != expand_tabs(span.text):
                break
            remaining -= visible_width(text)
        return StyledLine(tuple(spans))


@dataclass(frozen=True)
class ListItem:
    """One entry of a list pane; may span several rows."""

    lines: tuple[StyledLine, ...] = ()

    @classmethod
    def from_line(cls, line: StyledLine) -> ListItem:
        return cls((line,))

    @property
    def height(self) -> int:
        return len(self.lines)

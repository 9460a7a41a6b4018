"""Colours and text styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Terminal colours, valued by their SGR foreground code."""

    RESET = 39
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    DARK_GRAY = 90
    WHITE = 97

    @property
    def fg_code(self) -> int:
        return self.value

    @property
    def bg_code(self) -> int:
        return self.value + 10

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Look up a colour by case-insensitive name (``"dark-gray"`` works)."""
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown color: {name!r}") from None


@dataclass(frozen=True)
class Style:
    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False

    def patch(self, other: Style) -> Style:
        """Return this style with every attribute set in *other* applied."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=self.bold or other.bold,
        )

    def sgr(self) -> str:
        """Return the SGR escape sequence that activates this style."""
        params: list[str] = []
        if self.bold:
            params.append("1")
        if self.fg is not None:
            params.append(str(self.fg.fg_code))
        if self.bg is not None:
            params.append(str(self.bg.bg_code))
        if not params:
            return ""
        return f"\x1b[{';'.join(params)}m"


PLAIN = Style()

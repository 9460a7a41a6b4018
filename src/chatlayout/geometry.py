"""Rectangles and ratio-based region splitting.

Widths and heights are character cells. Every subtraction saturates at zero,
so undersized screens produce empty regions rather than negative ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def inner(self, margin: int = 1) -> Rect:
        """Return the rect shrunk by *margin* cells on every side."""
        width = max(0, self.width - 2 * margin)
        height = max(0, self.height - 2 * margin)
        return Rect(
            self.x + min(margin, self.width),
            self.y + min(margin, self.height),
            width,
            height,
        )


def _round_half_up(value: Fraction) -> int:
    return int(value + Fraction(1, 2))


def split_ratios(
    rect: Rect,
    ratios: tuple[tuple[int, int], ...],
    direction: Direction = Direction.HORIZONTAL,
) -> list[Rect]:
    """Partition *rect* along *direction* by ``(numerator, denominator)`` ratios.

    Region boundaries are the cumulative ratios of the total length rounded
    half-up; the last region absorbs any remainder so the regions always tile
    *rect* exactly.
    """
    total = rect.width if direction is Direction.HORIZONTAL else rect.height
    boundaries: list[int] = [0]
    acc = Fraction(0)
    for num, den in ratios:
        acc += Fraction(num, den)
        boundaries.append(min(total, _round_half_up(acc * total)))
    boundaries[-1] = total

    regions: list[Rect] = []
    for start, end in zip(boundaries, boundaries[1:]):
        length = max(0, end - start)
        if direction is Direction.HORIZONTAL:
            regions.append(Rect(rect.x + start, rect.y, length, rect.height))
        else:
            regions.append(Rect(rect.x, rect.y + start, rect.width, length))
    return regions


def split_bottom(rect: Rect, bottom_height: int) -> tuple[Rect, Rect]:
    """Split *rect* vertically into a flexible top and a fixed-height bottom.

    The bottom region gets *bottom_height* rows (clamped to the rect); the top
    region takes whatever is left, possibly nothing.
    """
    bottom_height = max(0, min(bottom_height, rect.height))
    top_height = rect.height - bottom_height
    top = Rect(rect.x, rect.y, rect.width, top_height)
    bottom = Rect(rect.x, rect.y + top_height, rect.width, bottom_height)
    return top, bottom

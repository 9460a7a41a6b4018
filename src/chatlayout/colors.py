"""Deterministic per-user colours."""

from __future__ import annotations

from typing import Sequence

from chatlayout.config import DEFAULT_PALETTE
from chatlayout.style import Color


def user_color(username: str, palette: Sequence[Color] = DEFAULT_PALETTE) -> Color:
    """Pick a palette colour for *username*.

    Sums every UTF-8 byte modulo the palette size, then takes the sum modulo
    the palette size again. Stable across runs, no hash seeding involved.
    """
    n = len(palette)
    idx = sum(b % n for b in username.encode("utf-8")) % n
    return palette[idx]

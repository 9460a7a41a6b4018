"""Terminal text utilities: width measurement, column slicing, word wrapping.

All widths are terminal cell widths measured per grapheme cluster, so wide
glyphs count as two cells and combining marks as zero. Slicing never cuts
inside a grapheme cluster.
"""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


_TAB = "   "


def expand_tabs(text: str) -> str:
    """Replace each tab with three spaces."""
    return text.replace("\t", _TAB)


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (VS16, ZWJ sequences, skin tones, flags) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Treats tabs as 3 spaces, the same expansion ``take_columns``,
      ``wrap_text`` and the screen backend apply.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    expanded = expand_tabs(text)

    if all(0x20 <= ord(ch) <= 0x7E for ch in expanded):
        return len(expanded)

    cached = _width_cache.get(expanded)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(expanded):
        total += grapheme_width(g)

    return _cache_width(expanded, total)


# ---------------------------------------------------------------------------
# Column slicing
# ---------------------------------------------------------------------------

def take_columns(text: str, max_cols: int) -> str:
    """Return the longest prefix of *text* that fits within *max_cols* columns.

    The cut always lands on a grapheme boundary: a wide glyph that would
    straddle the limit is left out entirely. Tabs come back expanded.
    """
    if max_cols <= 0:
        return ""

    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(expand_tabs(text)):
        w = grapheme_width(g)
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
    return "".join(result)


# ---------------------------------------------------------------------------
# wrap_text
# ---------------------------------------------------------------------------

def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap *text* to *width* columns.

    Lines break at spaces; a word wider than *width* is broken at the column
    limit. Embedded newlines start a new physical line. A width below one is
    treated as one. Always returns at least one line.
    """
    width = max(1, width)
    result: list[str] = []
    for physical_line in text.split("\n"):
        result.extend(_wrap_single_line(physical_line, width))
    return result


def _wrap_single_line(line: str, width: int) -> list[str]:
    """Wrap a single line (no embedded newlines) to *width* columns."""
    if not line:
        return [""]

    result_lines: list[str] = []
    current: list[str] = []
    current_width = 0

    for g in grapheme.graphemes(expand_tabs(line)):
        w = grapheme_width(g)

        if current_width + w > width and current_width > 0:
            if g == " ":
                # The overflowing space itself is the break point
                result_lines.append("".join(current).rstrip(" "))
                current = []
                current_width = 0
                continue

            split = _find_word_break(current)
            if split is not None:
                result_lines.append("".join(current[:split]).rstrip(" "))
                current = current[split + 1:]
                while current and current[0] == " ":
                    current.pop(0)
                current_width = sum(grapheme_width(c) for c in current)
            else:
                result_lines.append("".join(current))
                current = []
                current_width = 0

        current.append(g)
        current_width += w

    result_lines.append("".join(current))
    return result_lines


def _find_word_break(parts: list[str]) -> int | None:
    """Index of the last space in *parts* usable as a break, or ``None``."""
    for i in range(len(parts) - 1, 0, -1):
        if parts[i] == " ":
            return i
    return None

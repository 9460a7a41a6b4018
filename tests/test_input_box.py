"""Tests for input chunking, box height and cursor placement."""

from __future__ import annotations

import math

from chatlayout.components.input_box import (
    cursor_cell,
    input_height,
    input_line_count,
    render_input_box,
    text_width_for,
    wrap_input,
)
from chatlayout.geometry import Rect
from chatlayout.state import InputBuffer


class TestWrapInput:
    def test_fixed_width_chunks(self) -> None:
        assert wrap_input("abcdefg", 3) == ["abc", "def", "g"]

    def test_empty_input_has_no_chunks(self) -> None:
        assert wrap_input("", 3) == []
        assert input_line_count("", 3) == 1

    def test_counts_characters_not_bytes(self) -> None:
        assert wrap_input("h\u00e9llo", 2) == ["h\u00e9", "ll", "o"]

    def test_counts_characters_not_cells(self) -> None:
        assert wrap_input("世界世", 2) == ["世界", "世"]

    def test_line_count_is_ceiling(self) -> None:
        for length in range(0, 40):
            text = "x" * length
            for width in range(1, 9):
                expected = max(1, math.ceil(length / width))
                assert input_line_count(text, width) == expected


class TestInputHeight:
    """Borders plus lines plus an optional trailing cursor row."""

    def test_empty(self) -> None:
        assert input_height("", 0, 5) == 3

    def test_cursor_mid_line(self) -> None:
        assert input_height("abcd", 2, 3) == 4

    def test_cursor_at_end_of_full_line_adds_row(self) -> None:
        assert input_height("abc", 3, 3) == 4

    def test_cursor_at_zero_adds_nothing(self) -> None:
        assert input_height("abc", 0, 3) == 3


class TestCursorCell:
    def test_origin(self) -> None:
        assert cursor_cell(Rect(10, 20, 12, 5), 0, 10) == (11, 21)

    def test_wraps_to_next_row(self) -> None:
        assert cursor_cell(Rect(10, 20, 12, 5), 10, 10) == (11, 22)
        assert cursor_cell(Rect(10, 20, 12, 5), 13, 10) == (14, 22)

    def test_cursor_always_inside_box(self) -> None:
        for length in range(0, 25):
            text = "y" * length
            for width in range(1, 7):
                for cursor in range(0, length + 1):
                    height = input_height(text, cursor, width)
                    box = Rect(0, 0, width + 2, height)
                    x, y = cursor_cell(box, cursor, width)
                    assert 1 <= x <= width
                    assert 1 <= y <= height - 2

    def test_clamped_on_tiny_box(self) -> None:
        x, y = cursor_cell(Rect(0, 0, 4, 1), 20, 2)
        assert x <= 3
        assert y == 0


class TestRenderInputBox:
    def test_pane_lines_and_title(self) -> None:
        pane, cursor = render_input_box(Rect(0, 10, 7, 4), InputBuffer("abcdefg", 7), 5)
        assert [item.lines[0].plain for item in pane.items] == ["abcde", "fg"]
        assert pane.title == "Input"
        assert cursor == (3, 12)

    def test_cursor_beyond_text_is_clamped(self) -> None:
        _pane, cursor = render_input_box(Rect(0, 0, 12, 3), InputBuffer("ab", 99), 10)
        assert cursor == (3, 1)

    def test_text_width_never_below_one(self) -> None:
        assert text_width_for(Rect(0, 0, 1, 5)) == 1
        assert text_width_for(Rect(0, 0, 30, 5)) == 28

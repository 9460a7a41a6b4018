"""Tests for the channel list column."""

from __future__ import annotations

from chatlayout.components.channel_list import (
    format_channel_label,
    render_channel_list,
    visible_bounds,
)
from chatlayout.config import DEFAULT_CONFIG
from chatlayout.geometry import Rect
from chatlayout.state import Channel, ChannelSelection, Snapshot
from chatlayout.utils import visible_width


class TestFormatChannelLabel:
    """Labels fit the column and always keep the unread count."""

    def test_no_unread_is_plain_name(self) -> None:
        assert format_channel_label("general", 0, 20) == "general"

    def test_unread_suffix_appended(self) -> None:
        assert format_channel_label("general", 3, 20) == "general (3)"

    def test_name_shortened_to_keep_suffix(self) -> None:
        assert format_channel_label("general", 3, 8) == "gene (3)"

    def test_wide_name_shortened_by_cells(self) -> None:
        assert format_channel_label("世界世界", 2, 8) == "世界 (2)"

    def test_wide_glyph_straddling_cut_is_dropped_whole(self) -> None:
        label = format_channel_label("世界世界", 2, 7)
        assert label == "世 (2)"
        assert visible_width(label) <= 7

    def test_label_without_suffix_passes_through(self) -> None:
        assert format_channel_label("averyverylongname", 0, 5) == "averyverylongname"

    def test_suffix_wider_than_column_keeps_suffix(self) -> None:
        assert format_channel_label("abc", 12345, 3) == " (12345)"

    def test_suffix_always_verbatim_and_name_never_split(self) -> None:
        names = ["general", "日本語チャンネル", "café au lait", "\U0001f451 royals"]
        for name in names:
            for width in range(0, 25):
                label = format_channel_label(name, 42, width)
                assert label.endswith(" (42)")
                kept = label[: -len(" (42)")]
                assert name.startswith(kept)
                if visible_width(name + " (42)") > width:
                    assert visible_width(label) <= max(width, len(" (42)"))


class TestVisibleBounds:
    """List-window arithmetic keeping the selection visible."""

    def test_everything_fits(self) -> None:
        assert visible_bounds([1, 1, 1], 0, 1, 10) == (0, 3)

    def test_scrolls_down_to_selection(self) -> None:
        assert visible_bounds([1] * 10, 0, 7, 3) == (5, 8)

    def test_scrolls_up_to_selection(self) -> None:
        assert visible_bounds([1] * 10, 5, 2, 3) == (2, 5)

    def test_offset_kept_when_selection_visible(self) -> None:
        assert visible_bounds([1] * 10, 4, 5, 3) == (4, 7)

    def test_empty(self) -> None:
        assert visible_bounds([], 3, None, 5) == (0, 0)


def _snapshot(count: int, selected: int | None, offset: int = 0) -> Snapshot:
    channels = [Channel(id=f"c{i}", name=f"chan{i}", unread_messages=i % 3) for i in range(count)]
    return Snapshot(channels=channels, selection=ChannelSelection(selected, offset))


class TestRenderChannelList:
    def test_one_item_per_channel(self) -> None:
        pane, _offset = render_channel_list(Rect(0, 0, 20, 10), _snapshot(3, 1))
        assert [item.lines[0].plain for item in pane.items] == [
            "chan0",
            "chan1 (1)",
            "chan2 (2)",
        ]

    def test_selected_row_highlighted(self) -> None:
        pane, _offset = render_channel_list(Rect(0, 0, 20, 10), _snapshot(3, 1))
        assert pane.highlight == 1
        assert pane.highlight_style == DEFAULT_CONFIG.highlight_style
        assert pane.title == "Channels"

    def test_out_of_range_selection_not_highlighted(self) -> None:
        pane, _offset = render_channel_list(Rect(0, 0, 20, 10), _snapshot(3, 7))
        assert pane.highlight is None
        assert len(pane.items) == 3

    def test_offset_returned_not_mutated(self) -> None:
        snapshot = _snapshot(10, 7)
        pane, offset = render_channel_list(Rect(0, 0, 20, 5), snapshot)
        assert offset == 5
        assert pane.offset == 5
        assert snapshot.selection.offset == 0

    def test_labels_fit_interior_width(self) -> None:
        channels = [Channel(id="c", name="a-very-long-channel-name", unread_messages=12)]
        snapshot = Snapshot(channels=channels)
        pane, _offset = render_channel_list(Rect(0, 0, 12, 5), snapshot)
        assert pane.items[0].lines[0].plain == "a-ver (12)"

    def test_display_name_preferred(self) -> None:
        channels = [Channel(id="c", name="raw-id", display_name="Friends")]
        pane, _offset = render_channel_list(Rect(0, 0, 20, 5), Snapshot(channels=channels))
        assert pane.items[0].lines[0].plain == "Friends"

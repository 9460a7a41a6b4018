"""Tests for rects and ratio splitting."""

from __future__ import annotations

from chatlayout.geometry import Direction, Rect, split_bottom, split_ratios


class TestRect:
    def test_edges(self) -> None:
        r = Rect(2, 3, 10, 4)
        assert r.right == 12
        assert r.bottom == 7
        assert r.area == 40

    def test_inner_removes_border(self) -> None:
        assert Rect(0, 0, 10, 5).inner() == Rect(1, 1, 8, 3)

    def test_inner_saturates_at_zero(self) -> None:
        inner = Rect(0, 0, 1, 1).inner()
        assert inner.width == 0
        assert inner.height == 0


class TestSplitRatios:
    """Regions tile the rect exactly in ratio order."""

    def test_quarter_three_quarters(self) -> None:
        regions = split_ratios(Rect(0, 0, 80, 24), ((1, 4), (3, 4)))
        assert [r.width for r in regions] == [20, 60]
        assert [r.x for r in regions] == [0, 20]
        assert all(r.height == 24 for r in regions)

    def test_three_columns(self) -> None:
        regions = split_ratios(Rect(0, 0, 80, 24), ((1, 4), (5, 8), (1, 8)))
        assert [r.width for r in regions] == [20, 50, 10]
        assert [r.x for r in regions] == [0, 20, 70]

    def test_odd_width_still_tiles(self) -> None:
        regions = split_ratios(Rect(5, 0, 83, 10), ((1, 4), (5, 8), (1, 8)))
        assert sum(r.width for r in regions) == 83
        assert regions[0].x == 5
        assert regions[-1].right == 88

    def test_zero_width_gives_empty_regions(self) -> None:
        regions = split_ratios(Rect(0, 0, 0, 0), ((1, 4), (3, 4)))
        assert len(regions) == 2
        assert all(r.width == 0 for r in regions)

    def test_vertical(self) -> None:
        regions = split_ratios(Rect(0, 0, 10, 8), ((1, 2), (1, 2)), Direction.VERTICAL)
        assert [(r.y, r.height) for r in regions] == [(0, 4), (4, 4)]


class TestSplitBottom:
    def test_fixed_bottom_flexible_top(self) -> None:
        top, bottom = split_bottom(Rect(0, 0, 30, 20), 3)
        assert top == Rect(0, 0, 30, 17)
        assert bottom == Rect(0, 17, 30, 3)

    def test_bottom_clamped_to_rect(self) -> None:
        top, bottom = split_bottom(Rect(0, 0, 30, 2), 5)
        assert top.height == 0
        assert bottom == Rect(0, 0, 30, 2)

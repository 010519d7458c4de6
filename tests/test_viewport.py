"""Tests for viewport windowing."""

import random

import pytest

from rich_select.viewport import Viewport


def assert_consistent(viewport: Viewport, size: int) -> None:
    if size == 0:
        assert (viewport.start, viewport.end) == (0, 0)
        return
    assert 0 <= viewport.start <= viewport.focus < viewport.end <= size
    assert viewport.end - viewport.start == min(viewport.max_height, size)


def window(viewport: Viewport) -> tuple[int, int, int]:
    return viewport.start, viewport.end, viewport.focus


class TestReset:
    def test_shows_top_rows(self):
        viewport = Viewport(max_height=3)
        viewport.reset(5)
        assert window(viewport) == (0, 3, 0)

    def test_height_clamped_to_list_size(self):
        viewport = Viewport(max_height=5)
        viewport.reset(2)
        assert window(viewport) == (0, 2, 0)

    def test_empty_list(self):
        viewport = Viewport(max_height=5)
        viewport.reset(0)
        assert window(viewport) == (0, 0, 0)


class TestMoveDown:
    def test_stays_inside_window(self):
        viewport = Viewport(max_height=3)
        viewport.reset(5)
        viewport.move_down(5)
        viewport.move_down(5)
        assert window(viewport) == (0, 3, 2)

    def test_slides_window_past_bottom_edge(self):
        viewport = Viewport(max_height=3)
        viewport.reset(5)
        for _ in range(3):
            viewport.move_down(5)
        assert window(viewport) == (1, 4, 3)

    def test_wraps_to_top_from_last_item(self):
        viewport = Viewport(max_height=3)
        viewport.reset(5)
        for _ in range(4):
            viewport.move_down(5)
        assert window(viewport) == (2, 5, 4)
        viewport.move_down(5)
        assert window(viewport) == (0, 3, 0)

    def test_noop_on_empty_list(self):
        viewport = Viewport(max_height=3)
        viewport.reset(0)
        viewport.move_down(0)
        assert window(viewport) == (0, 0, 0)


class TestMoveUp:
    def test_wraps_to_bottom_from_first_item(self):
        viewport = Viewport(max_height=3)
        viewport.reset(5)
        viewport.move_up(5)
        assert window(viewport) == (2, 5, 4)

    def test_slides_window_past_top_edge(self):
        viewport = Viewport(max_height=3)
        viewport.reset(5)
        viewport.move_up(5)
        viewport.move_up(5)
        viewport.move_up(5)
        assert window(viewport) == (2, 5, 2)
        viewport.move_up(5)
        assert window(viewport) == (1, 4, 1)

    def test_noop_on_empty_list(self):
        viewport = Viewport(max_height=3)
        viewport.reset(0)
        viewport.move_up(0)
        assert window(viewport) == (0, 0, 0)


class TestPlace:
    @pytest.mark.parametrize(
        "index, expected",
        [
            (0, (0, 3, 0)),
            (1, (0, 3, 1)),
            (2, (1, 4, 2)),
            (4, (2, 5, 4)),
        ],
    )
    def test_shows_item_above_focus(self, index, expected):
        viewport = Viewport(max_height=3)
        viewport.place(index, 5)
        assert window(viewport) == expected

    def test_single_row_window_contains_focus(self):
        viewport = Viewport(max_height=1)
        viewport.place(2, 5)
        assert window(viewport) == (2, 3, 2)

    def test_short_list_shows_everything(self):
        viewport = Viewport(max_height=5)
        viewport.place(2, 3)
        assert window(viewport) == (0, 3, 2)


@pytest.mark.parametrize("max_height", [1, 2, 3, 5, 8])
@pytest.mark.parametrize("size", [1, 2, 5, 7])
def test_random_navigation_keeps_focus_in_window(max_height, size):
    rng = random.Random(max_height * 100 + size)
    viewport = Viewport(max_height=max_height)
    viewport.reset(size)
    for _ in range(300):
        if rng.random() < 0.5:
            viewport.move_up(size)
        else:
            viewport.move_down(size)
        assert_consistent(viewport, size)


def test_visible_slice():
    viewport = Viewport(max_height=2)
    viewport.reset(4)
    viewport.move_down(4)
    viewport.move_down(4)
    assert list(viewport.visible(["a", "b", "c", "d"])) == ["b", "c"]

from hexvi.core.grid import Grid
from hexvi.core.protocols import Renderable, Scrollable
from hexvi.core.viewport import Viewport


def test_no_scroll_when_cursor_visible() -> None:
    viewport = Viewport(10)
    viewport.first_row = 5
    for row in range(5, 15):
        viewport.ensure_visible(row)
        assert viewport.first_row == 5


def test_scrolls_minimally() -> None:
    viewport = Viewport(10)
    viewport.ensure_visible(12)
    assert viewport.first_row == 3
    viewport.ensure_visible(1)
    assert viewport.first_row == 1


def test_resize_keeps_cursor_visible() -> None:
    viewport = Viewport(10)
    viewport.ensure_visible(9)
    viewport.resize(4, 9)
    assert viewport.visible_rows == 4
    assert viewport.first_row == 6
    start, end = viewport.visible_row_range()
    assert start <= 9 < end


def test_resize_never_below_one_row() -> None:
    viewport = Viewport(10)
    viewport.resize(0, 0)
    assert viewport.visible_rows == 1


def test_visible_row_range_clipped() -> None:
    viewport = Viewport(10)
    assert viewport.visible_row_range() == (0, 10)
    assert viewport.visible_row_range(3) == (0, 3)
    assert viewport.visible_row_range(0) == (0, 0)


def test_scroll_by_stays_in_bounds() -> None:
    viewport = Viewport(10)
    viewport.scroll_by(5, 30)
    assert viewport.first_row == 5
    viewport.scroll_by(100, 30)
    assert viewport.first_row == 20
    viewport.scroll_by(-100, 30)
    assert viewport.first_row == 0
    viewport.scroll_by(3, 4)
    assert viewport.first_row == 0


def test_viewport_is_scrollable() -> None:
    assert isinstance(Viewport(), Scrollable)


def test_stub_renderable() -> None:
    class Static:
        def render(self) -> Grid:
            return Grid()

        def frame_state(self):
            return None

    assert isinstance(Static(), Renderable)
    assert not isinstance(Viewport(), Renderable)

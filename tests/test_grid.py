from hexvi.core.buffer import ByteBuffer
from hexvi.core.cursor import Cursor
from hexvi.core.grid import FrameState, Style, ascii_start, changed_rows, column_at, render_grid, render_row
from hexvi.core.modes import Editing, Navigation
from hexvi.core.viewport import Viewport

HEX_START = 10


def hex_column(column: int) -> int:
    return HEX_START + column * 3


def test_row_layout() -> None:
    buf = ByteBuffer.load(b"AB\x00\x7f" + bytes(range(0x30, 0x3C)))
    row = render_row(buf, 0, 16)
    assert row.offset == 0
    assert row.text() == (
        "00000000  41 42 00 7F 30 31 32 33 34 35 36 37 38 39 3A 3B  AB..0123456789:;"
    )


def test_short_last_row_keeps_ascii_aligned() -> None:
    buf = ByteBuffer.load(bytes(range(0x41, 0x41 + 20)))
    grid = render_grid(buf, None, Viewport(10, 16))
    first, second = grid.lines()
    assert second.startswith("00000010  51 52 53 54 ")
    assert len(first) - 16 == len(second) - 4
    assert second.endswith("  QRST")


def test_empty_buffer_gives_empty_grid() -> None:
    grid = render_grid(ByteBuffer.load(b""), Cursor(), Viewport(10))
    assert len(grid) == 0
    assert grid.lines() == []


def test_only_visible_rows_rendered() -> None:
    buf = ByteBuffer.load(bytes(16 * 8))
    viewport = Viewport(3)
    viewport.ensure_visible(5)
    grid = render_grid(buf, None, viewport)
    assert [row.offset for row in grid.rows] == [0x30, 0x40, 0x50]


def test_cursor_highlight_in_navigation() -> None:
    buf = ByteBuffer.load(bytes(32))
    cursor = Cursor(16)
    cursor.move_to(18, 32)
    viewport = Viewport(4)
    grid = render_grid(buf, cursor, viewport, Navigation())

    x = hex_column(2)
    ascii_x = HEX_START + 16 * 3 - 1 + 2 + 2
    assert grid.find(Style.CURSOR) == [(1, x), (1, ascii_x)]
    assert grid.find(Style.SELECTED) == [(1, x + 1)]


def test_pending_nibble_and_low_half_cursor() -> None:
    buf = ByteBuffer.load(b"\x12\x34")
    cursor = Cursor(16)
    cursor.toggle_half()
    grid = render_grid(buf, cursor, Viewport(2), Editing(0xE))

    cells = grid.rows[0].cells
    high, low = cells[hex_column(0)], cells[hex_column(0) + 1]
    assert high.char == "E"
    assert Style.PENDING in high.style and Style.SELECTED in high.style
    assert low.char == "2"
    assert Style.CURSOR in low.style
    assert buf.read(0) == 0x12


def test_modified_bytes_tagged() -> None:
    buf = ByteBuffer.load(bytes(4))
    buf.write(3, 0x41)
    grid = render_grid(buf, None, Viewport(1))
    positions = grid.find(Style.MODIFIED)
    assert (0, hex_column(3)) in positions
    assert (0, hex_column(3) + 1) in positions
    assert grid.rows[0].cells[positions[-1][1]].char == "A"
    buf.mark_clean()
    assert render_grid(buf, None, Viewport(1)).find(Style.MODIFIED) == []


def test_render_does_not_mutate_inputs() -> None:
    buf = ByteBuffer.load(bytes(64))
    cursor = Cursor(16)
    cursor.move_to(50, 64)
    viewport = Viewport(2)
    render_grid(buf, cursor, viewport, Editing(3))
    assert cursor.offset == 50
    assert viewport.first_row == 0
    assert not buf.is_dirty()


def test_custom_placeholder() -> None:
    row = render_row(ByteBuffer.load(b"\x00a"), 0, 2, placeholder="*")
    assert row.text().endswith("*a")


def frame(**overrides) -> FrameState:
    values = dict(first_row=0, visible_rows=4, row_width=16, mode=Navigation(), cursor_row=0)
    values.update(overrides)
    return FrameState(**values)


def test_column_at_matches_rendered_layout() -> None:
    buf = ByteBuffer.load(bytes(range(16)))
    text = render_row(buf, 0, 16).text()
    assert ascii_start(16) == len(text) - 16
    for column in range(16):
        x = hex_column(column)
        assert text[x:x + 2] == f"{column:02X}"
        assert column_at(x, 16) == column
        assert column_at(x + 1, 16) == column
        assert column_at(ascii_start(16) + column, 16) == column
    assert column_at(hex_column(0) + 2, 16) is None
    assert column_at(0, 16) is None
    assert column_at(ascii_start(16) - 1, 16) is None
    assert column_at(ascii_start(16) + 16, 16) is None


def test_first_frame_repaints_everything() -> None:
    assert changed_rows(None, frame()) is None


def test_scroll_or_mode_change_repaints_everything() -> None:
    assert changed_rows(frame(), frame(first_row=1)) is None
    assert changed_rows(frame(), frame(visible_rows=5)) is None
    assert changed_rows(frame(), frame(mode=Editing())) is None


def test_cursor_move_repaints_old_and_new_rows() -> None:
    assert changed_rows(frame(cursor_row=1), frame(cursor_row=2)) == {1, 2}
    assert changed_rows(frame(cursor_row=3), frame(cursor_row=3)) == {3}


def test_modified_rows_repainted_when_their_state_changes() -> None:
    before = frame(cursor_row=1, modified_rows=frozenset({0, 2}))
    after = frame(cursor_row=1, modified_rows=frozenset({0, 2, 3}))
    assert changed_rows(before, after) == {1, 3}
    saved = frame(cursor_row=1)
    assert changed_rows(after, saved) == {0, 1, 2, 3}

"""
Grid renderer projecting the visible part of the buffer into styled cells.

Nothing here touches the terminal: the result is a plain :class:`Grid`
that a painter (curses, a test, a hexdump printer) turns into output.
"""

import enum
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Set, TYPE_CHECKING

from .buffer import ByteBuffer
from .cursor import Cursor, Nibble
from .modes import Editing, Mode
from ..utils.hex_utils import ascii_glyph, format_offset

if TYPE_CHECKING:
    from .protocols import Scrollable

OFFSET_GAP = "  "
ASCII_GAP = "  "
OFFSET_WIDTH = 8
HEX_START = OFFSET_WIDTH + len(OFFSET_GAP)


class Style(enum.Flag):
    """Style attributes attached to a grid cell."""

    NORMAL = 0
    OFFSET = enum.auto()
    HEX = enum.auto()
    ASCII = enum.auto()
    CURSOR = enum.auto()
    SELECTED = enum.auto()
    MODIFIED = enum.auto()
    PENDING = enum.auto()


@dataclass(frozen=True)
class Cell:
    char: str
    style: Style = Style.NORMAL


@dataclass
class GridRow:
    """One rendered row, starting at buffer ``offset``."""

    offset: int
    cells: List[Cell] = field(default_factory=list)

    def text(self) -> str:
        return ''.join(cell.char for cell in self.cells)


@dataclass
class Grid:
    rows: List[GridRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def lines(self) -> List[str]:
        """Plain text of every row."""

        return [row.text() for row in self.rows]

    def find(self, style: Style) -> List[tuple]:
        """Positions ``(row, column)`` of cells carrying ``style``."""

        return [
            (y, x)
            for y, row in enumerate(self.rows)
            for x, cell in enumerate(row.cells)
            if style in cell.style
        ]


def _hex_cells(value: int, offset: int, buf: ByteBuffer, cursor: Optional[Cursor],
               pending: Optional[int]) -> List[Cell]:
    base = Style.HEX
    if buf.is_modified(offset):
        base |= Style.MODIFIED

    high, low = f"{value:02X}"
    if cursor is None or offset != cursor.offset:
        return [Cell(high, base), Cell(low, base)]

    high_style = low_style = base | Style.SELECTED
    if pending is not None:
        high = f"{pending:X}"
        high_style |= Style.PENDING

    if cursor.half is Nibble.HIGH:
        high_style = (high_style & ~Style.SELECTED) | Style.CURSOR
    else:
        low_style = (low_style & ~Style.SELECTED) | Style.CURSOR

    return [Cell(high, high_style), Cell(low, low_style)]


def render_row(buf: ByteBuffer, row: int, row_width: int, cursor: Optional[Cursor] = None,
               pending: Optional[int] = None, placeholder: str = '.') -> GridRow:
    """Render a single buffer row."""

    start = row * row_width
    data = buf.get_row(row, row_width)
    grid_row = GridRow(start)
    cells = grid_row.cells

    cells.extend(Cell(ch, Style.OFFSET) for ch in format_offset(start, OFFSET_WIDTH))
    cells.extend(Cell(ch) for ch in OFFSET_GAP)

    for column in range(row_width):
        if column:
            cells.append(Cell(' '))
        if column < len(data):
            cells.extend(_hex_cells(data[column], start + column, buf, cursor, pending))
        else:
            cells.extend((Cell(' '), Cell(' ')))

    cells.extend(Cell(ch) for ch in ASCII_GAP)

    for column, value in enumerate(data):
        offset = start + column
        style = Style.ASCII
        if buf.is_modified(offset):
            style |= Style.MODIFIED
        if cursor is not None and offset == cursor.offset:
            style |= Style.CURSOR
        cells.append(Cell(ascii_glyph(value, placeholder), style))

    return grid_row


def render_grid(buf: ByteBuffer, cursor: Optional[Cursor], viewport: 'Scrollable',
                mode: Optional[Mode] = None, placeholder: str = '.') -> Grid:
    """Project the rows inside ``viewport`` into a grid of cells.

    Reads its inputs without modifying them. An empty buffer gives an
    empty grid.
    """

    row_width = viewport.row_width
    pending = mode.partial if isinstance(mode, Editing) else None
    start, end = viewport.visible_row_range(buf.row_count(row_width))

    return Grid([
        render_row(buf, row, row_width, cursor, pending, placeholder)
        for row in range(start, end)
    ])


def ascii_start(row_width: int) -> int:
    """Screen column of the first ASCII cell."""

    return HEX_START + row_width * 3 - 1 + len(ASCII_GAP)


def column_at(x: int, row_width: int) -> Optional[int]:
    """Map a screen column to a byte column, or None between cells.

    Both the hex pairs and the ASCII column resolve to the byte they show.
    """

    if HEX_START <= x < ascii_start(row_width) - len(ASCII_GAP):
        column, within = divmod(x - HEX_START, 3)
        return column if within < 2 else None

    first = ascii_start(row_width)
    if first <= x < first + row_width:
        return x - first

    return None


@dataclass(frozen=True)
class FrameState:
    """What a painted frame depended on, used to limit repaints."""

    first_row: int
    visible_rows: int
    row_width: int
    mode: Mode
    cursor_row: int
    modified_rows: FrozenSet[int] = frozenset()


def changed_rows(previous: Optional[FrameState], current: FrameState) -> Optional[Set[int]]:
    """Rows that need repainting since ``previous``, None for all of them.

    Scrolling, resizing or a mode change repaint everything. Otherwise only
    the old and new cursor rows and rows whose unsaved state changed.
    """

    if previous is None or (
        previous.first_row, previous.visible_rows, previous.row_width, previous.mode
    ) != (current.first_row, current.visible_rows, current.row_width, current.mode):
        return None

    rows = {previous.cursor_row, current.cursor_row}
    rows |= previous.modified_rows ^ current.modified_rows
    return rows

"""
Window management module painting the editor grid with curses.
"""

import curses
import os
import time
from typing import List, Optional, Tuple

from ..core.grid import Cell, FrameState, GridRow, Style, changed_rows
from ..core.modes import GotoPrompt
from ..core.protocols import Renderable
from ..core.session import EditorSession


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


def cell_runs(cells: List[Cell]) -> List[Tuple[int, str, Style]]:
    """Group consecutive cells of equal style into ``(x, text, style)`` runs."""

    runs: List[Tuple[int, str, Style]] = []
    for x, cell in enumerate(cells):
        if runs and runs[-1][2] == cell.style:
            start, text, style = runs[-1]
            runs[-1] = (start, text + cell.char, style)
        else:
            runs.append((x, cell.char, cell.style))

    return runs


class WindowManager:
    """Manages the curses windows and UI layout."""

    STATUS_MESSAGE_DURATION = 3
    TITLE_HEIGHT = 2
    STATUS_HEIGHT = 1
    MIN_HEIGHT = 5
    MIN_WIDTH = 40

    def __init__(self, stdscr: 'curses.window', session: EditorSession):
        self.stdscr = stdscr
        self.session = session
        self.height, self.width = stdscr.getmaxyx()

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            raise ValueError(
                f"Terminal too small. Minimum size: {self.MIN_WIDTH}x{self.MIN_HEIGHT}, "
                f"Current size: {self.width}x{self.height}"
            )

        self.title_window: Optional['curses.window'] = None
        self.hex_window: Optional['curses.window'] = None
        self.status_window: Optional['curses.window'] = None
        self.status_message_time = 0.0
        self._shown_message: Optional[str] = None
        self._last_frame: Optional[FrameState] = None

        curses.start_color()
        curses.init_pair(1, curses.COLOR_WHITE, -1)  # Status bar
        curses.init_pair(2, curses.COLOR_YELLOW, -1)  # Selected byte, pending nibble
        curses.init_pair(3, curses.COLOR_GREEN, -1)  # ASCII
        curses.init_pair(7, curses.COLOR_RED, -1)   # Error messages, modified bytes
        curses.init_pair(10, 8 if curses.COLORS > 8 else curses.COLOR_WHITE, -1)  # Offsets

        self.setup_windows()

    @property
    def visible_rows(self) -> int:
        return max(1, self.height - self.TITLE_HEIGHT - self.STATUS_HEIGHT)

    def setup_windows(self) -> None:
        """Create and position all windows."""

        self.title_window = curses.newwin(self.TITLE_HEIGHT, self.width, 0, 0)
        self.hex_window = curses.newwin(self.visible_rows, self.width, self.TITLE_HEIGHT, 0)
        self.status_window = curses.newwin(self.STATUS_HEIGHT, self.width, self.height - 1, 0)

        self.session.resize(self.visible_rows)
        self._last_frame = None

    def style_attr(self, style: Style) -> int:
        """Map a grid cell style onto curses attributes."""

        if Style.CURSOR in style:
            return curses.A_REVERSE | curses.A_BOLD
        if Style.PENDING in style:
            return curses.color_pair(2) | curses.A_BOLD
        if Style.SELECTED in style:
            return curses.color_pair(2)
        if Style.MODIFIED in style:
            return curses.color_pair(7)
        if Style.ASCII in style:
            return curses.color_pair(3)
        if Style.OFFSET in style:
            return curses.color_pair(10)

        return curses.A_NORMAL

    def refresh_all(self) -> None:
        """Refresh all windows."""

        self.draw_title()
        self.draw_grid(self.session)
        self.draw_status()
        curses.doupdate()

    def draw_title(self) -> None:
        """Draw the file name and a separator line."""

        if not self.title_window:
            return

        self.title_window.erase()
        path = self.session.buffer.path
        name = os.path.basename(path) if path else '[No Name]'
        safe_addstr(self.title_window, 0, 0, f"[{name}]")

        self.title_window.hline(1, 0, curses.ACS_HLINE, self.width)
        self.title_window.noutrefresh()

    def _paint_row(self, y: int, row: GridRow) -> None:
        try:
            self.hex_window.move(y, 0)
            self.hex_window.clrtoeol()
        except curses.error:
            pass

        for x, text, style in cell_runs(row.cells):
            safe_addstr(self.hex_window, y, x, text, self.style_attr(style))

    def draw_grid(self, source: Renderable) -> None:
        """Paint the rendered rows, repainting only rows that changed."""

        if not self.hex_window:
            return

        frame = source.frame_state()
        rows = changed_rows(self._last_frame, frame)
        self._last_frame = frame
        grid = source.render()

        if rows is None:
            self.hex_window.erase()
            for y, row in enumerate(grid.rows):
                self._paint_row(y, row)
        else:
            for y, row in enumerate(grid.rows):
                if frame.first_row + y in rows:
                    self._paint_row(y, row)

        self.hex_window.noutrefresh()

    def _current_message(self) -> Optional[str]:
        """Get the session's status message, dropping it once it expired."""

        message = self.session.status_message
        if message != self._shown_message:
            self._shown_message = message
            self.status_message_time = time.time()
        elif message and time.time() - self.status_message_time > self.STATUS_MESSAGE_DURATION:
            self.session.status_message = None
            self._shown_message = None
            return None

        return message

    def draw_status(self) -> None:
        """Draw the status bar."""

        if not self.status_window:
            return

        self.status_window.erase()
        bar_attr = curses.color_pair(1) | curses.A_BOLD | curses.A_REVERSE
        self.status_window.attron(bar_attr)

        session = self.session
        if isinstance(session.mode, GotoPrompt):
            safe_addstr(self.status_window, 0, 0, f" Go to address: 0x{session.mode.query}")
            self.status_window.attroff(bar_attr)
            self.status_window.noutrefresh()
            return

        message = self._current_message()
        if message:
            attr = curses.color_pair(7) | curses.A_BOLD if message.startswith("Error:") else bar_attr
            safe_addstr(self.status_window, 0, 0, " " + message, attr)
            self.status_window.attroff(bar_attr)
            self.status_window.noutrefresh()
            return

        buf = session.buffer
        status = f" [{session.mode.label}] [{len(buf)} bytes] "
        if buf.is_dirty():
            status += "[Modified] "

        cursor = session.cursor
        pos_info = f"Offset: 0x{cursor.offset:08X} "
        pos_info += f"Line: {cursor.row + 1} "
        pos_info += f"Col: {cursor.column + 1}"

        available_width = self.width - len(pos_info) - 1
        if len(status) > available_width:
            status = status[:max(0, available_width - 3)] + "... "
        else:
            status += " " * (available_width - len(status))

        safe_addstr(self.status_window, 0, 0, status + pos_info)
        self.status_window.attroff(bar_attr)
        self.status_window.noutrefresh()

    def resize(self) -> None:
        """Handle terminal resize events."""

        self.height, self.width = self.stdscr.getmaxyx()

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            self.session.status_message = "Error: Terminal too small"
            return

        self.setup_windows()

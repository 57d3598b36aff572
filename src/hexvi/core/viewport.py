"""
Viewport module tracking which rows of the buffer are on screen.
"""

from typing import Optional, Tuple


class Viewport:
    """Window of visible rows that follows the cursor with minimal scrolling."""

    def __init__(self, visible_rows: int = 1, row_width: int = 16) -> None:
        self.first_row = 0
        self.visible_rows = max(1, visible_rows)
        self.row_width = row_width

    def ensure_visible(self, cursor_row: int) -> None:
        """Scroll just enough to bring ``cursor_row`` into view."""

        if cursor_row < self.first_row:
            self.first_row = cursor_row
        elif cursor_row >= self.first_row + self.visible_rows:
            self.first_row = cursor_row - self.visible_rows + 1

    def resize(self, visible_rows: int, cursor_row: int) -> None:
        """Change the number of visible rows, keeping the cursor in view."""

        self.visible_rows = max(1, visible_rows)
        self.ensure_visible(cursor_row)

    def scroll_by(self, delta_rows: int, total_rows: int) -> None:
        """Scroll the window without touching the cursor."""

        last_start = max(0, total_rows - self.visible_rows)
        self.first_row = max(0, min(self.first_row + delta_rows, last_start))

    def visible_row_range(self, total_rows: Optional[int] = None) -> Tuple[int, int]:
        """Get the ``[start, end)`` range of rows to render."""

        end = self.first_row + self.visible_rows
        if total_rows is not None:
            end = min(end, total_rows)

        return self.first_row, max(self.first_row, end)

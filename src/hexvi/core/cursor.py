"""
Cursor model mapping a linear byte offset onto the hex grid.
"""

import enum


def clamp(value: int, lo: int, hi: int) -> int:
    """Clamp ``value`` to the inclusive ``[lo, hi]`` range."""

    return lo if value < lo else hi if value > hi else value


class Nibble(enum.Enum):
    """Which half of the byte the next typed hex digit replaces."""

    HIGH = 0
    LOW = 1


class Cursor:
    """Cursor over a buffer of a given length.

    Every motion takes the current buffer length and saturates at the
    buffer bounds instead of wrapping, so the offset is always in
    ``[0, length - 1]`` (or 0 for an empty buffer).
    """

    def __init__(self, row_width: int = 16) -> None:
        if row_width < 1:
            raise ValueError("Row width must be at least 1")

        self.offset = 0
        self.half = Nibble.HIGH
        self.row_width = row_width

    @property
    def row(self) -> int:
        return self.offset // self.row_width

    @property
    def column(self) -> int:
        return self.offset % self.row_width

    def _set(self, offset: int, length: int) -> None:
        self.offset = clamp(offset, 0, max(length - 1, 0))

    def move_to(self, offset: int, length: int) -> None:
        """Jump to ``offset``, clamped to the buffer."""

        self._set(offset, length)

    def move_by(self, delta_rows: int, delta_cols: int, length: int) -> None:
        """Move by whole rows and single bytes."""

        self._set(self.offset + delta_rows * self.row_width + delta_cols, length)

    def move_to_row_start(self, length: int) -> None:
        self._set(self.row * self.row_width, length)

    def move_to_row_end(self, length: int) -> None:
        self._set(self.row * self.row_width + self.row_width - 1, length)

    def move_to_buffer_start(self, length: int) -> None:
        self._set(0, length)

    def move_to_buffer_end(self, length: int) -> None:
        self._set(length - 1, length)

    def toggle_half(self) -> None:
        """Switch between the high and low nibble."""

        self.half = Nibble.LOW if self.half is Nibble.HIGH else Nibble.HIGH

    def reset_half(self) -> None:
        self.half = Nibble.HIGH

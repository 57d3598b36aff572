"""
Capability interfaces between the editing core and its front ends.
"""

from typing import Optional, Protocol, Tuple, runtime_checkable

from .grid import FrameState, Grid


@runtime_checkable
class Renderable(Protocol):
    """Something that can be projected into a grid of cells."""

    def render(self) -> Grid:
        ...

    def frame_state(self) -> FrameState:
        """Inputs of the next frame, compared to decide what to repaint."""
        ...


@runtime_checkable
class Scrollable(Protocol):
    """A window over rows that can follow a cursor."""

    first_row: int
    visible_rows: int
    row_width: int

    def ensure_visible(self, cursor_row: int) -> None:
        ...

    def resize(self, visible_rows: int, cursor_row: int) -> None:
        ...

    def scroll_by(self, delta_rows: int, total_rows: int) -> None:
        ...

    def visible_row_range(self, total_rows: Optional[int] = None) -> Tuple[int, int]:
        ...

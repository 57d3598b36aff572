"""
Editor session: the modal input state machine tying the core together.
"""

import logging
from typing import Callable, Dict, Final, Optional

from . import persistence
from .buffer import ByteBuffer
from .cursor import Cursor
from .errors import HexviError, OutOfRangeError
from .grid import FrameState, Grid, column_at, render_grid
from .keys import Key, KeyEvent
from .modes import DirectionalPolicy, Editing, GotoPrompt, Mode, Navigation
from .protocols import Scrollable
from .viewport import Viewport
from ..config import EditorConfig
from ..utils.hex_utils import MAX_ADDRESS_DIGITS, parse_hex_address

logger = logging.getLogger(__name__)

UNSAVED_CHANGES_STATUS_MESSAGE: Final[str] = "Buffer has unsaved changes. Press Ctrl+W to save or quit again to discard changes."
NO_CHANGES_STATUS_MESSAGE: Final[str] = "No changes to save"
GOTO_STATUS_MESSAGE: Final[str] = "Go to address. Type hex digits, press Enter to jump, Esc to cancel."

Motion = Callable[[int], None]


class EditorSession:
    """Owns the buffer, cursor, viewport and input mode of one open file.

    Key events go through :meth:`handle_key`, which is total: every event
    in every mode either maps to a transition or is ignored, and errors are
    turned into status messages instead of escaping to the event loop.
    """

    def __init__(self, buf: ByteBuffer, config: Optional[EditorConfig] = None,
                 visible_rows: int = 1) -> None:
        self.buffer = buf
        self.config = config or EditorConfig()
        self.cursor = Cursor(self.config.row_width)
        self.viewport: Scrollable = Viewport(visible_rows, self.config.row_width)
        self.mode: Mode = Navigation()
        self.status_message: Optional[str] = None
        self.running = True
        self._quit_warning_shown = False
        self.motions: Dict[KeyEvent, Motion] = self._setup_motions()
        self.command_handlers: Dict[KeyEvent, Callable[[], None]] = self._setup_handlers()

    def _setup_motions(self) -> Dict[KeyEvent, Motion]:
        """Set up the cursor motion bindings."""

        cursor = self.cursor
        page = self.config.page_rows

        def by(rows: int, cols: int) -> Motion:
            return lambda length: cursor.move_by(rows, cols, length)

        bindings = {
            by(0, -1): ['h', 'b', Key.LEFT],
            by(0, 1): ['l', 'w', Key.RIGHT],
            by(-1, 0): ['k', Key.UP],
            by(1, 0): ['j', Key.DOWN],
            by(-page, 0): [Key.PAGE_UP, KeyEvent.of_ctrl('b')],
            by(page, 0): [Key.PAGE_DOWN, KeyEvent.of_ctrl('f')],
            cursor.move_to_row_start: ['0', Key.HOME],
            cursor.move_to_row_end: ['$', Key.END],
            cursor.move_to_buffer_start: ['g', KeyEvent(Key.HOME, ctrl=True)],
            cursor.move_to_buffer_end: ['G', KeyEvent(Key.END, ctrl=True)],
        }

        motions: Dict[KeyEvent, Motion] = {}
        for motion, keys in bindings.items():
            for key in keys:
                if isinstance(key, str):
                    key = KeyEvent.of_char(key)
                elif isinstance(key, Key):
                    key = KeyEvent(key)
                motions[key] = motion

        return motions

    def _setup_handlers(self) -> Dict[KeyEvent, Callable[[], None]]:
        """Set up the navigation mode command bindings."""

        return {
            KeyEvent.of_char('i'): self._start_editing,
            KeyEvent(Key.ENTER): self._start_editing,
            KeyEvent.of_ctrl('w'): self._save,  # Ctrl + W (save key)
            KeyEvent.of_char('s'): self._save,
            KeyEvent.of_ctrl('x'): self._quit,  # Ctrl + X (quit key)
            KeyEvent.of_char('q'): self._quit,
            KeyEvent.of_ctrl('g'): self._start_goto,  # Ctrl + G (go to address key)
        }

    @property
    def length(self) -> int:
        return self.buffer.length

    def handle_key(self, event: KeyEvent) -> bool:
        """Handle a single key event. Returns False if the session ended."""

        try:
            if isinstance(self.mode, Editing):
                self._handle_editing(self.mode, event)
            elif isinstance(self.mode, GotoPrompt):
                self._handle_goto(self.mode, event)
            else:
                self._handle_navigation(event)
        except OutOfRangeError as e:
            logger.error("Internal fault handling %s: %s", event, e)
            self._report_error(f"Internal fault: {e}")
        except HexviError as e:
            logger.warning("Command failed: %s", e)
            self._report_error(str(e))

        self.viewport.ensure_visible(self.cursor.row)
        return self.running

    def _report_error(self, message: str) -> None:
        self.status_message = f"Error: {message}"
        self._set_mode(Navigation())

    def _set_mode(self, mode: Mode) -> None:
        if type(mode) is not type(self.mode):
            logger.debug("Mode %s -> %s", self.mode.label, mode.label)
        if not isinstance(mode, Editing) or mode.partial is None:
            self.cursor.reset_half()
        self.mode = mode

    def _handle_navigation(self, event: KeyEvent) -> None:
        motion = self.motions.get(event)
        if motion is not None:
            motion(self.length)
            self._quit_warning_shown = False
            return

        handler = self.command_handlers.get(event)
        if handler is None:
            return

        if handler != self._quit:
            self._quit_warning_shown = False
        handler()

    def _handle_editing(self, mode: Editing, event: KeyEvent) -> None:
        if event.key is Key.ESC:
            self._set_mode(Navigation())
            return

        value = event.hex_value
        if value is not None:
            self._compose(mode, value)
            return

        motion = self.motions.get(event)
        if motion is None or self.config.directional_policy is DirectionalPolicy.IGNORE:
            return

        if mode.partial is not None:
            current = self.buffer.read(self.cursor.offset)
            self.buffer.write(self.cursor.offset, (mode.partial << 4) | (current & 0x0F))
        self._set_mode(Editing())
        motion(self.length)

    def _compose(self, mode: Editing, digit: int) -> None:
        """Handle hex digit input in editing mode."""

        if mode.partial is None:
            self.mode = Editing(digit)
            self.cursor.toggle_half()
            return

        self.buffer.write(self.cursor.offset, (mode.partial << 4) | digit)
        self._set_mode(Editing())
        self.cursor.move_by(0, 1, self.length)

    def _handle_goto(self, mode: GotoPrompt, event: KeyEvent) -> None:
        if event.key is Key.ESC:
            self.status_message = None
            self._set_mode(Navigation())
        elif event.key is Key.ENTER:
            self._set_mode(Navigation())
            self.goto(mode.query)
        elif event.key is Key.BACKSPACE:
            self.mode = GotoPrompt(mode.query[:-1])
        elif event.hex_value is not None and len(mode.query) < MAX_ADDRESS_DIGITS:
            self.mode = GotoPrompt(mode.query + event.char)

    def _start_editing(self) -> None:
        self._set_mode(Editing())

    def _start_goto(self) -> None:
        self.status_message = GOTO_STATUS_MESSAGE
        self._set_mode(GotoPrompt())

    def _save(self) -> None:
        self.save()

    def _quit(self) -> None:
        """Quit, warning once first if there are unsaved changes."""

        if self.buffer.is_dirty() and self.config.confirm_quit and not self._quit_warning_shown:
            self._quit_warning_shown = True
            self.status_message = UNSAVED_CHANGES_STATUS_MESSAGE
            return

        logger.info("Quitting session (dirty=%s)", self.buffer.is_dirty())
        self.running = False

    def save(self) -> bool:
        """Save the buffer if it has unsaved changes.

        Raises ``NoFileLoadedError`` or ``FileIOError`` on failure, leaving
        the buffer dirty.
        """

        if not persistence.save(self.buffer):
            self.status_message = NO_CHANGES_STATUS_MESSAGE
            return False

        self.status_message = f"Saved: {self.buffer.path}"
        return True

    def goto(self, address: str) -> None:
        """Move the cursor to a hex address typed by the user."""

        offset = parse_hex_address(address)
        if offset is None:
            self.status_message = f"Error: Invalid address '{address}'"
            return

        if offset >= self.length:
            self.status_message = f"Error: Address 0x{offset:X} is past the end of the buffer"
            return

        self.cursor.move_to(offset, self.length)
        self.status_message = None
        self.viewport.ensure_visible(self.cursor.row)

    def resize(self, visible_rows: int) -> None:
        """Adapt the viewport to a new terminal height."""

        self.viewport.resize(visible_rows, self.cursor.row)

    def scroll(self, delta_rows: int) -> None:
        """Scroll the view without moving the cursor."""

        self.viewport.scroll_by(delta_rows, self.buffer.row_count(self.config.row_width))

    def render(self) -> Grid:
        """Project the visible window into a grid of cells."""

        return render_grid(self.buffer, self.cursor, self.viewport, self.mode,
                           self.config.placeholder)

    def frame_state(self) -> FrameState:
        """Describe what the next rendered frame depends on."""

        viewport = self.viewport
        row_width = self.config.row_width
        start, end = viewport.visible_row_range()
        return FrameState(
            first_row=viewport.first_row,
            visible_rows=viewport.visible_rows,
            row_width=row_width,
            mode=self.mode,
            cursor_row=self.cursor.row,
            modified_rows=frozenset(
                row for row in self.buffer.modified_rows(row_width) if start <= row < end
            ),
        )

    def click(self, y: int, x: int) -> bool:
        """Place the cursor on the byte shown at grid position ``(y, x)``.

        Clicks on the offset column, between cells or past the end of the
        buffer are ignored, as are clicks while a byte is half typed or the
        goto prompt is open. Returns whether the cursor moved.
        """

        if isinstance(self.mode, GotoPrompt):
            return False
        if isinstance(self.mode, Editing) and self.mode.partial is not None:
            return False

        column = column_at(x, self.config.row_width)
        if column is None or y < 0 or y >= self.viewport.visible_rows:
            return False

        offset = (self.viewport.first_row + y) * self.config.row_width + column
        if offset >= self.length:
            return False

        self.cursor.move_to(offset, self.length)
        self.viewport.ensure_visible(self.cursor.row)
        return True

"""
Input handler module turning curses key codes into editor key events.
"""

import curses
import logging
from typing import Dict, Final

from ..core.keys import Key, KeyEvent
from ..core.session import EditorSession
from .window import WindowManager

logger = logging.getLogger(__name__)

SCROLL_ROWS: Final[int] = 5

SPECIAL_KEYS: Final[Dict[int, Key]] = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_PPAGE: Key.PAGE_UP,
    curses.KEY_NPAGE: Key.PAGE_DOWN,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_RESIZE: Key.RESIZE,
    ord('\n'): Key.ENTER,
    ord('\r'): Key.ENTER,
    ord('\t'): Key.TAB,
    27: Key.ESC,
    127: Key.BACKSPACE,
    8: Key.BACKSPACE,
}

# Terminfo names xterm-like terminals report for Ctrl + Home/End
CTRL_KEY_NAMES: Final[Dict[bytes, Key]] = {
    b'kHOM5': Key.HOME,
    b'kEND5': Key.END,
}


def translate_key(ch: int) -> KeyEvent:
    """Translate a ``getch`` code into a key event."""

    if ch in SPECIAL_KEYS:
        return KeyEvent(SPECIAL_KEYS[ch])

    if 32 <= ch <= 126:
        return KeyEvent.of_char(chr(ch))

    if 1 <= ch <= 26:
        return KeyEvent.of_ctrl(chr(ch + ord('a') - 1))

    if ch > 255:
        try:
            name = curses.keyname(ch)
        except (curses.error, ValueError):
            name = b''
        if name in CTRL_KEY_NAMES:
            return KeyEvent(CTRL_KEY_NAMES[name], ctrl=True)

    return KeyEvent(Key.UNKNOWN)


class InputHandler:
    """Feeds keyboard and mouse input into the editor session."""

    def __init__(self, window_manager: WindowManager, session: EditorSession) -> None:
        self.window_manager = window_manager
        self.session = session

    def handle_input(self, ch: int) -> bool:
        """Handle a single keyboard input. Returns False if should quit."""

        if ch == curses.KEY_MOUSE:
            self._handle_mouse()
            return True

        event = translate_key(ch)
        if event.key is Key.RESIZE:
            self.window_manager.resize()
            return True

        return self.session.handle_key(event)

    def _handle_mouse(self) -> None:
        """Place the cursor on a left click, scroll with the mouse wheel."""

        try:
            _, x, y, _, state = curses.getmouse()
        except curses.error:
            return

        if state & (curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED):
            self.session.click(y - self.window_manager.TITLE_HEIGHT, x)
        elif state & curses.BUTTON4_PRESSED:
            self.session.scroll(-SCROLL_ROWS)
        elif state & getattr(curses, 'BUTTON5_PRESSED', 0):
            self.session.scroll(SCROLL_ROWS)

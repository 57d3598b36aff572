"""
Terminal-independent key events consumed by the editor session.
"""

import enum
from dataclasses import dataclass
from typing import Optional

HEX_DIGITS = '0123456789abcdefABCDEF'


class Key(enum.Enum):
    """Key identities the editor understands."""

    CHAR = 'char'
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'
    HOME = 'home'
    END = 'end'
    PAGE_UP = 'page_up'
    PAGE_DOWN = 'page_down'
    ENTER = 'enter'
    ESC = 'esc'
    BACKSPACE = 'backspace'
    TAB = 'tab'
    RESIZE = 'resize'
    UNKNOWN = 'unknown'


DIRECTIONAL_KEYS = frozenset({
    Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN,
    Key.HOME, Key.END, Key.PAGE_UP, Key.PAGE_DOWN,
})


@dataclass(frozen=True)
class KeyEvent:
    """A single key press with an optional character and Ctrl modifier."""

    key: Key
    char: Optional[str] = None
    ctrl: bool = False

    @classmethod
    def of_char(cls, char: str) -> 'KeyEvent':
        return cls(Key.CHAR, char)

    @classmethod
    def of_ctrl(cls, char: str) -> 'KeyEvent':
        """Ctrl combined with a letter, e.g. ``KeyEvent.of_ctrl('w')``."""

        return cls(Key.CHAR, char.lower(), ctrl=True)

    def is_char(self, char: str) -> bool:
        return self.key is Key.CHAR and not self.ctrl and self.char == char

    def is_ctrl(self, char: str) -> bool:
        return self.key is Key.CHAR and self.ctrl and self.char == char

    @property
    def hex_value(self) -> Optional[int]:
        """Value of the key as a hex digit, or None if it is not one."""

        if self.key is not Key.CHAR or self.ctrl or not self.char:
            return None
        if len(self.char) != 1 or self.char not in HEX_DIGITS:
            return None

        return int(self.char, 16)

"""
Core package for the hex editing engine.

This package implements the terminal-independent part of the editor: the
ByteBuffer holding the file content, the Cursor and Viewport projecting it
onto rows, the input modes and key events, and the grid renderer. The
EditorSession state machine lives in ``hexvi.core.session``.
"""

from .buffer import ByteBuffer
from .cursor import Cursor, Nibble
from .errors import FileIOError, HexviError, NoFileLoadedError, OutOfRangeError
from .keys import Key, KeyEvent
from .modes import DirectionalPolicy, Editing, GotoPrompt, Navigation
from .viewport import Viewport

__all__ = [
    'ByteBuffer', 'Cursor', 'Nibble', 'Viewport',
    'Key', 'KeyEvent',
    'DirectionalPolicy', 'Editing', 'GotoPrompt', 'Navigation',
    'HexviError', 'OutOfRangeError', 'FileIOError', 'NoFileLoadedError',
]

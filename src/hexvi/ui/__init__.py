"""
UI package for the curses front end.

This package paints the grid produced by the editing core with curses
(WindowManager) and translates curses key codes into editor key events
(InputHandler).
"""

from .window import WindowManager
from .input_handler import InputHandler, translate_key

__all__ = ['WindowManager', 'InputHandler', 'translate_key']

"""
Input modes of the editor.

The mode is a small tagged variant: exactly one of :class:`Navigation`,
:class:`Editing` or :class:`GotoPrompt` is active at any time and only the
editor session replaces it.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Navigation:
    """Keys move the cursor, switch modes or run commands."""

    label = "NORMAL"


@dataclass(frozen=True)
class Editing:
    """Keys compose a new value for the byte under the cursor.

    ``partial`` holds the typed high nibble until the low one arrives.
    """

    partial: Optional[int] = None
    label = "INSERT"


@dataclass(frozen=True)
class GotoPrompt:
    """Collects a hex address to jump to."""

    query: str = ""
    label = "GOTO"


Mode = Union[Navigation, Editing, GotoPrompt]


class DirectionalPolicy(enum.Enum):
    """What directional keys do while in editing mode."""

    IGNORE = 'ignore'
    COMMIT = 'commit'

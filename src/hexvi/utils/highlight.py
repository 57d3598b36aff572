"""
Hexdump output for the non-interactive dump mode, colored using Pygments.
"""

from typing import TYPE_CHECKING

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer

if TYPE_CHECKING:
    from ..core.grid import Grid


def format_dump(grid: 'Grid') -> str:
    """Render a grid as ``hexdump -C`` style text, ASCII column in pipes."""

    from ..core.grid import Style

    lines = []
    for row in grid.rows:
        prefix = ''.join(cell.char for cell in row.cells if Style.ASCII not in cell.style)
        ascii_part = ''.join(cell.char for cell in row.cells if Style.ASCII in cell.style)
        lines.append(f"{prefix}|{ascii_part}|")

    return '\n'.join(lines) + ('\n' if lines else '')


def highlight_dump(text: str, color: bool = True) -> str:
    """Colorize hexdump text for a terminal, or return it unchanged."""

    if not color or not text:
        return text

    return highlight(text, HexdumpLexer(), TerminalFormatter())

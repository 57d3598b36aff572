"""
Utility package for hex formatting and hexdump output.
"""

from .hex_utils import (
    ascii_glyph,
    format_offset,
    is_printable,
    parse_hex_address
)
from .highlight import format_dump, highlight_dump

__all__ = [
    'ascii_glyph',
    'format_offset',
    'is_printable',
    'parse_hex_address',
    'format_dump',
    'highlight_dump'
]

"""
Utility functions for hex formatting and parsing.
"""

from typing import Optional

MAX_ADDRESS_DIGITS = 16


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def is_printable(value: int) -> bool:
    """Check if a byte value is a printable ASCII character."""

    return 32 <= value <= 126


def ascii_glyph(value: int, placeholder: str = '.') -> str:
    """
    Get the character shown in the ASCII column for a byte.

    Args:
        value (int): Byte value
        placeholder (str): Glyph used for non-printable bytes

    Returns:
        str: Single character
    """

    return chr(value) if is_printable(value) else placeholder


def parse_hex_address(text: str) -> Optional[int]:
    """
    Parse a hex address typed by the user.

    Accepts an optional ``0x`` prefix and surrounding whitespace.

    Args:
        text (str): Address such as "1F0" or "0x1f0"

    Returns:
        int: Parsed address or None if invalid
    """

    clean = text.strip()
    if clean[:2].lower() == '0x':
        clean = clean[2:]

    if not clean or len(clean) > MAX_ADDRESS_DIGITS:
        return None
    if not all(c in '0123456789ABCDEFabcdef' for c in clean):
        return None

    return int(clean, 16)

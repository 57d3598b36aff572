"""
Error types raised by the editing core.
"""

from typing import Optional


class HexviError(Exception):
    """Base class for all editor errors."""


class OutOfRangeError(HexviError, IndexError):
    """Raised when an offset falls outside the buffer."""

    def __init__(self, offset: int, length: int) -> None:
        super().__init__(f"Offset 0x{offset:X} out of range for buffer of {length} bytes")
        self.offset = offset
        self.length = length


class FileIOError(HexviError, IOError):
    """Raised when reading or writing the backing file fails."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class NoFileLoadedError(HexviError):
    """Raised when saving a buffer that has no file behind it."""

    def __init__(self, message: str = "No file loaded") -> None:
        super().__init__(message)

"""
Buffer module holding the fixed-length byte content of an opened file.
"""

from typing import List, Optional, Set

from .errors import OutOfRangeError


class ByteBuffer:
    """Fixed-length byte buffer with dirty tracking.

    The length is set once at load time. Bytes can be overwritten in place
    but never inserted or removed.
    """

    def __init__(self, initial_data: bytes = b'', path: Optional[str] = None) -> None:
        self._data = bytearray(initial_data)
        self._dirty = False
        self._modified: Set[int] = set()
        self.path = path

    @classmethod
    def load(cls, data: bytes, path: Optional[str] = None) -> 'ByteBuffer':
        """Create a buffer holding a copy of ``data``."""

        return cls(bytes(data), path)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def length(self) -> int:
        """Number of bytes in the buffer."""

        return len(self._data)

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset < len(self._data):
            raise OutOfRangeError(offset, len(self._data))

    def read(self, offset: int) -> int:
        """Return the byte value at ``offset``."""

        self._check_offset(offset)
        return self._data[offset]

    def write(self, offset: int, value: int) -> None:
        """Overwrite the byte at ``offset`` and mark the buffer dirty."""

        self._check_offset(offset)
        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

        self._data[offset] = value
        self._modified.add(offset)
        self._dirty = True

    def is_dirty(self) -> bool:
        return self._dirty

    def mark_clean(self) -> None:
        """Forget all modifications, typically after a successful save."""

        self._dirty = False
        self._modified.clear()

    def is_modified(self, offset: int) -> bool:
        """Check whether ``offset`` was written since the last clean point."""

        return offset in self._modified

    def row_count(self, row_width: int) -> int:
        """Get the total number of rows at the given row width."""

        return (len(self._data) + row_width - 1) // row_width

    def get_row(self, row: int, row_width: int) -> bytes:
        """Get the bytes shown on ``row``. The last row may be short."""

        start = row * row_width
        end = min(start + row_width, len(self._data))
        if start >= end:
            return b''

        return bytes(self._data[start:end])

    def modified_rows(self, row_width: int) -> List[int]:
        """Rows holding at least one unsaved byte, in ascending order."""

        return sorted({offset // row_width for offset in self._modified})

    def to_bytes(self) -> bytes:
        """Snapshot of the full content."""

        return bytes(self._data)

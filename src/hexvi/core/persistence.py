"""
Reading files into buffers and writing them back.
"""

import logging
from typing import Optional

from .buffer import ByteBuffer
from .errors import FileIOError, NoFileLoadedError

logger = logging.getLogger(__name__)


def read_all(path: str) -> bytes:
    """Read the whole file at ``path``."""

    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise FileIOError(f"Failed to read file: {e}", path) from e


def write_all(path: str, data: bytes) -> None:
    """Replace the content of the file at ``path`` with ``data``."""

    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise FileIOError(f"Failed to save file: {e}", path) from e


def open_buffer(path: str) -> ByteBuffer:
    """Load the file at ``path`` into a new buffer."""

    data = read_all(path)
    logger.info("Loaded %d bytes from %s", len(data), path)
    return ByteBuffer.load(data, path)


def save(buf: ByteBuffer, path: Optional[str] = None, force: bool = False) -> bool:
    """
    Write the buffer back to disk.

    Args:
        buf: Buffer to save
        path: Target file. If None, uses the buffer's own path.
        force: Write even if the buffer has no unsaved changes

    Returns:
        bool: True if the file was written, False if there was nothing to save

    Raises:
        NoFileLoadedError: Neither ``path`` nor the buffer's path is set
        FileIOError: The write failed; the buffer stays dirty
    """

    target = path or buf.path
    if not target:
        raise NoFileLoadedError("No file to save to")

    if not force and not buf.is_dirty():
        return False

    write_all(target, buf.to_bytes())
    buf.mark_clean()
    buf.path = target
    logger.info("Saved %d bytes to %s", len(buf), target)
    return True

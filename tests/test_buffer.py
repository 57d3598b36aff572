import pytest

from hexvi.core.buffer import ByteBuffer
from hexvi.core.errors import OutOfRangeError


def test_load_copies_input() -> None:
    source = bytearray(b"\x00\x11\x22\x33")
    buf = ByteBuffer.load(source)
    source[0] = 0xFF
    assert buf.read(0) == 0x00
    assert len(buf) == 4
    assert not buf.is_dirty()


def test_empty_buffer_is_legal_but_unreadable() -> None:
    buf = ByteBuffer.load(b"")
    assert buf.length == 0
    assert buf.row_count(16) == 0
    with pytest.raises(OutOfRangeError):
        buf.read(0)
    with pytest.raises(OutOfRangeError):
        buf.write(0, 1)


@pytest.mark.parametrize("offset", [-1, 4, 100])
def test_out_of_range_offsets(offset: int) -> None:
    buf = ByteBuffer.load(b"abcd")
    with pytest.raises(OutOfRangeError) as excinfo:
        buf.read(offset)
    assert excinfo.value.offset == offset
    assert excinfo.value.length == 4
    assert isinstance(excinfo.value, IndexError)


def test_write_changes_only_target_byte() -> None:
    original = bytes(range(32))
    buf = ByteBuffer.load(original)
    buf.write(7, 0xAB)
    after = buf.to_bytes()
    assert after[7] == 0xAB
    assert after[:7] == original[:7]
    assert after[8:] == original[8:]
    assert len(after) == len(original)


def test_write_rejects_bad_value_without_marking_dirty() -> None:
    buf = ByteBuffer.load(b"\x00")
    with pytest.raises(ValueError):
        buf.write(0, 256)
    assert not buf.is_dirty()


def test_dirty_flag_and_mark_clean() -> None:
    buf = ByteBuffer.load(b"\x00\x01")
    buf.write(0, 5)
    assert buf.is_dirty()
    buf.write(1, 6)
    assert buf.is_dirty()
    assert buf.is_modified(0) and buf.is_modified(1)
    buf.mark_clean()
    assert not buf.is_dirty()
    assert not buf.is_modified(0)


def test_rows_and_modified_rows() -> None:
    buf = ByteBuffer.load(bytes(20))
    assert buf.row_count(16) == 2
    assert buf.get_row(0, 16) == bytes(16)
    assert buf.get_row(1, 16) == bytes(4)
    assert buf.get_row(2, 16) == b""
    buf.write(18, 1)
    buf.write(3, 1)
    assert buf.modified_rows(16) == [0, 1]

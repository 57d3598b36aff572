from pathlib import Path

import pytest

from hexvi.__main__ import dump, main, parse_args
from hexvi.config import EditorConfig
from hexvi.core.buffer import ByteBuffer
from hexvi.core.modes import DirectionalPolicy


def test_config_from_args() -> None:
    config = EditorConfig.from_args(parse_args(["f.bin", "--width", "8", "--commit-on-move"]))
    assert config.row_width == 8
    assert config.directional_policy is DirectionalPolicy.COMMIT
    assert config.confirm_quit

    config = EditorConfig.from_args(parse_args(["f.bin", "--no-confirm-quit"]))
    assert config.row_width == 16
    assert config.directional_policy is DirectionalPolicy.IGNORE
    assert not config.confirm_quit


def test_invalid_width_rejected() -> None:
    with pytest.raises(SystemExit):
        parse_args(["f.bin", "--width", "0"])
    with pytest.raises(ValueError):
        EditorConfig(row_width=0)


def test_dump_plain() -> None:
    text = dump(ByteBuffer.load(b"Hello, hex!\x00" + bytes(8)), EditorConfig(), color=False)
    assert text.splitlines() == [
        "00000000  48 65 6C 6C 6F 2C 20 68 65 78 21 00 00 00 00 00  |Hello, hex!.....|",
        "00000010  00 00 00 00                                      |....|",
    ]


def test_dump_color_adds_escape_codes() -> None:
    text = dump(ByteBuffer.load(b"abc"), EditorConfig(), color=True)
    assert "\x1b[" in text
    assert "61" in text and "63" in text


def test_dump_empty() -> None:
    assert dump(ByteBuffer.load(b""), EditorConfig(), color=True) == ""


def test_main_dump(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    target = tmp_path / "x.bin"
    target.write_bytes(b"\x01\x02")
    assert main([str(target), "--dump", "--width", "4"]) == 0
    out = capsys.readouterr().out
    assert out == "00000000  01 02        |..|\n"


def test_main_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main([str(tmp_path / "nope.bin"), "--dump"]) == 1
    assert "Error loading" in capsys.readouterr().err

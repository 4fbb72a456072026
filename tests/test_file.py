"""Tests for loading files into viewports."""

import asyncio

import pytest

from linepager import Viewport, load_file
from linepager.file import aload_file, read_text


@pytest.fixture
def temp_log_file(tmp_path):
    """Create a 50 line log file."""
    path = tmp_path / "test.log"
    path.write_text("".join(f"line {i}\n" for i in range(50)))
    return path


def test_load_file_creates_viewport(temp_log_file):
    vp = load_file(temp_log_file)
    # Trailing newline leaves an empty last line
    assert len(vp) == 51
    assert vp.lines[0] == "line 0"
    assert vp.lines[-1] == ""
    assert vp.offset == 0


def test_load_file_into_existing_viewport(temp_log_file):
    vp = Viewport(height=10)
    assert load_file(str(temp_log_file), vp) is vp
    assert vp.visible_lines()[0] == "line 0"


def test_load_file_tail(temp_log_file):
    vp = load_file(temp_log_file, Viewport(height=10), tail=True)
    assert vp.offset == 40
    assert vp.at_bottom()
    assert vp.visible_lines()[-1] == "line 49"


def test_load_file_normalizes_line_endings(tmp_path):
    path = tmp_path / "dos.txt"
    path.write_bytes(b"one\r\ntwo\r\nthree")
    assert load_file(path).lines == ["one", "two", "three"]


def test_read_text_replaces_bad_bytes(tmp_path):
    path = tmp_path / "binary.log"
    path.write_bytes(b"ok\n\xff\xfe\n")
    text = read_text(path)
    assert text.startswith("ok\n")
    assert "�" in text


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file(tmp_path / "missing.log")


def test_aload_file(temp_log_file):
    vp = asyncio.run(aload_file(temp_log_file, Viewport(height=10), tail=True))
    assert len(vp) == 51
    assert vp.offset == 40

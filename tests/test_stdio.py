import io
import os
import sys

import pytest

from lamina import stdio


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_format_value_passes_text_through():
    assert stdio.format_value("hello") == "hello"
    assert stdio.format_value(None) == "null"


def test_read_input_int(monkeypatch):
    _feed(monkeypatch, "42\n")
    assert stdio.read_input() == 42


def test_read_input_float(monkeypatch):
    _feed(monkeypatch, "3.5\n")
    assert stdio.read_input() == 3.5


def test_read_input_text(monkeypatch):
    _feed(monkeypatch, "hello\n")
    assert stdio.read_input() == "hello"


def test_read_input_numeric_prefix(monkeypatch):
    _feed(monkeypatch, "12abc\n")
    assert stdio.read_input() == 12


def test_read_input_int_overflow_stays_text(monkeypatch):
    _feed(monkeypatch, "99999999999\n")
    assert stdio.read_input() == "99999999999"


def test_read_input_eof(monkeypatch):
    _feed(monkeypatch, "")
    assert stdio.read_input() == ""


def test_read_input_prompt(monkeypatch, capsys):
    _feed(monkeypatch, "x\n")
    assert stdio.read_input("Name: ") == "x"
    assert capsys.readouterr().out == "Name: "


def test_print_values(capsys):
    assert stdio.print_values(1, "a", 2.5) is None
    assert capsys.readouterr().out == "1 a 2.5\n"


def test_print_values_empty(capsys):
    stdio.print_values()
    assert capsys.readouterr().out == "\n"


def test_file_round_trip(tmp_path):
    target = tmp_path / "data.txt"
    target.write_text("old content here")
    written = stdio.file_put_content(str(target), "new")
    assert written == len("new")
    assert stdio.file_get_content(str(target)) == "new"


def test_file_put_requires_existing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        stdio.file_put_content(str(tmp_path / "missing.txt"), "x")
    with pytest.raises(IsADirectoryError):
        stdio.file_put_content(str(tmp_path), "x")
    with pytest.raises(TypeError):
        stdio.file_put_content(5, "x")


def test_file_get_missing(tmp_path):
    with pytest.raises(OSError):
        stdio.file_get_content(str(tmp_path / "missing.txt"))


def test_exist_and_touch(tmp_path):
    target = tmp_path / "touched.txt"
    assert stdio.exist(str(target)) is False
    assert stdio.touch_file(str(target)) is True
    assert stdio.exist(str(target)) is True
    assert os.path.getsize(target) == 0


def test_touch_keeps_content(tmp_path):
    target = tmp_path / "keep.txt"
    target.write_text("keep")
    stdio.touch_file(str(target))
    assert target.read_text() == "keep"


def test_execute_success_and_failure():
    ok = f'"{sys.executable}" -c "pass"'
    assert stdio.execute(ok) == 0
    bad = f'"{sys.executable}" -c "import sys; sys.exit(3)"'
    with pytest.raises(RuntimeError, match="Command execution failed"):
        stdio.execute(bad)


def test_check():
    assert stdio.check(True, "fine") is None
    with pytest.raises(AssertionError, match="Assertion: boom"):
        stdio.check(False, "boom")
    with pytest.raises(AssertionError, match="Assertion: None"):
        stdio.check()
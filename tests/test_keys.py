"""Tests for the terminal key source."""

import io
import sys

import pytest
import readchar

from picklist.keys import KeySource, TerminalKeySource


def test_terminal_key_source_is_a_key_source():
    assert isinstance(TerminalKeySource(), KeySource)


def test_read_key_passes_keys_through(monkeypatch):
    monkeypatch.setattr(readchar, "readkey", lambda: readchar.key.UP)
    assert TerminalKeySource().read_key() == readchar.key.UP


def test_ctrl_c_becomes_a_key(monkeypatch):
    def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(readchar, "readkey", interrupted)
    assert TerminalKeySource().read_key() == readchar.key.CTRL_C


def test_end_of_input_is_an_io_error(monkeypatch):
    monkeypatch.setattr(readchar, "readkey", lambda: "")
    with pytest.raises(OSError):
        TerminalKeySource().read_key()


def test_isatty_false_for_redirected_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x"))
    assert TerminalKeySource().isatty() is False


def test_isatty_false_for_closed_stdin(monkeypatch):
    stream = io.StringIO()
    stream.close()
    monkeypatch.setattr(sys, "stdin", stream)
    assert TerminalKeySource().isatty() is False


def test_raw_mode_without_termios_is_noop(monkeypatch):
    monkeypatch.setattr("picklist.keys.termios", None)
    with TerminalKeySource().raw_mode():
        pass


def test_raw_mode_on_non_terminal_raises_oserror(tmp_path, monkeypatch):
    pytest.importorskip("termios")
    path = tmp_path / "not-a-tty"
    path.write_text("")
    with path.open() as stream:
        monkeypatch.setattr(sys, "stdin", stream)
        with pytest.raises(OSError):
            with TerminalKeySource().raw_mode():
                pass

import io
import os

import pytest

from metaterm import terminal as term
from metaterm.terminal import AnsiTerminal, TerminalUnavailableError, get_terminal_size


def test_escape_sequences():
    out = io.StringIO()
    t = AnsiTerminal(out)
    t.clear()
    t.hide_cursor()
    t.move_to(0, 0)
    t.write("  AA  ")
    t.move_to(3, 7)
    t.show_cursor()
    t.flush()
    assert out.getvalue() == "\033[2J\033[?25l\033[1;1H  AA  \033[8;4H\033[?25h"


def test_size_of_non_terminal_stream_is_an_error():
    with pytest.raises(TerminalUnavailableError):
        get_terminal_size(io.StringIO())


def test_size_reads_stream_descriptor(monkeypatch):
    seen = []

    def fake_size(fd):
        seen.append(fd)
        return os.terminal_size((120, 40))

    class Stream:
        def fileno(self):
            return 7

    monkeypatch.setattr(term.os, "get_terminal_size", fake_size)
    assert get_terminal_size(Stream()) == (120, 40)
    assert seen == [7]


def test_size_lookup_failure_is_chained(monkeypatch):
    def no_tty(fd):
        raise OSError(25, "Inappropriate ioctl for device")

    class Stream:
        def fileno(self):
            return 1

    monkeypatch.setattr(term.os, "get_terminal_size", no_tty)
    with pytest.raises(TerminalUnavailableError) as info:
        get_terminal_size(Stream())
    assert isinstance(info.value.__cause__, OSError)

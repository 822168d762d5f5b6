"""Tests for the terminal sink and signal wiring."""

import io
import os
import signal
import sys
from unittest.mock import MagicMock

import pytest

from matrix_rain.terminal import DEFAULT_COLUMNS, DEFAULT_ROWS, Terminal, TerminalError


class BrokenStream(io.StringIO):
    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")


class TtyStream(io.StringIO):
    def fileno(self):
        return 1


class TestWrite:
    def test_writes_and_flushes(self):
        stream = io.StringIO()
        terminal = Terminal(stream)
        terminal.write("\x1b[2J")
        terminal.write("x")
        assert stream.getvalue() == "\x1b[2Jx"

    def test_defaults_to_stdout(self):
        assert Terminal().stream is sys.stdout

    def test_broken_pipe_becomes_terminal_error(self):
        terminal = Terminal(BrokenStream())
        with pytest.raises(TerminalError) as exc_info:
            terminal.write("frame")
        assert isinstance(exc_info.value.__cause__, BrokenPipeError)
        assert isinstance(exc_info.value, RuntimeError)


class TestSize:
    def test_fallback_without_tty(self):
        assert Terminal(io.StringIO()).size() == (DEFAULT_COLUMNS, DEFAULT_ROWS) == (80, 24)

    def test_reads_terminal_size(self, monkeypatch):
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((132, 43)))
        assert Terminal(TtyStream()).size() == (132, 43)

    def test_zero_size_falls_back(self, monkeypatch):
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((0, 0)))
        assert Terminal(TtyStream()).size() == (80, 24)

    def test_os_error_falls_back(self, monkeypatch):
        def fail(fd):
            raise OSError(25, "Inappropriate ioctl for device")

        monkeypatch.setattr(os, "get_terminal_size", fail)
        assert Terminal(TtyStream()).size() == (80, 24)


class TestSignals:
    def test_interrupt_and_terminate_request_stop(self):
        terminal = Terminal(io.StringIO())
        engine = MagicMock()
        try:
            terminal.install_signal_handlers(engine)
            signal.getsignal(signal.SIGINT)(signal.SIGINT, None)
            signal.getsignal(signal.SIGTERM)(signal.SIGTERM, None)
        finally:
            terminal.restore_signal_handlers()
        assert engine.request_stop.call_count == 2
        engine.request_resize.assert_not_called()

    @pytest.mark.skipif(not hasattr(signal, "SIGWINCH"), reason="SIGWINCH not available")
    def test_window_change_requests_resize(self):
        terminal = Terminal(io.StringIO())
        engine = MagicMock()
        try:
            assert terminal.install_signal_handlers(engine) is True
            signal.getsignal(signal.SIGWINCH)(signal.SIGWINCH, None)
        finally:
            terminal.restore_signal_handlers()
        engine.request_resize.assert_called_once_with()

    def test_restore_puts_previous_handlers_back(self):
        previous = signal.getsignal(signal.SIGINT)
        terminal = Terminal(io.StringIO())
        terminal.install_signal_handlers(MagicMock())
        assert signal.getsignal(signal.SIGINT) is not previous
        terminal.restore_signal_handlers()
        assert signal.getsignal(signal.SIGINT) is previous

    def test_reinstall_keeps_original_handlers(self):
        previous = signal.getsignal(signal.SIGTERM)
        terminal = Terminal(io.StringIO())
        terminal.install_signal_handlers(MagicMock())
        terminal.install_signal_handlers(MagicMock())
        terminal.restore_signal_handlers()
        assert signal.getsignal(signal.SIGTERM) is previous

"""Shared fakes for terminal, clock and random stream."""

import io
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from matrix_rain.terminal import Terminal


class FakeTerminal(Terminal):
    """In-memory terminal with a settable size and a log of every write."""

    def __init__(self, columns=80, rows=24, stop_after=None):
        super().__init__(io.StringIO())
        self.columns = columns
        self.rows = rows
        self.writes = []
        self.stop_after = stop_after
        self.engine = None
        self.restored = False

    def write(self, data):
        super().write(data)
        self.writes.append(data)
        if self.stop_after is not None and len(self.writes) >= self.stop_after:
            self.engine.request_stop()

    def size(self):
        return self.columns, self.rows

    def install_signal_handlers(self, engine):
        self.engine = engine
        return True

    def restore_signal_handlers(self):
        self.restored = True


class ScriptedRandom:
    """Random source returning a fixed list of values, failing when exhausted."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def make_terminal():
    return FakeTerminal


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def clock():
    return FakeClock()

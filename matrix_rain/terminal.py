"""Terminal output sink, size queries and signal wiring."""

import logging
import os
import signal
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

# Used when the stream is not attached to a terminal
DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 24


class TerminalError(RuntimeError):
    """Writing to the terminal failed; the animation cannot continue."""


class Terminal:
    """Write sink for escape-sequence frames."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self._previous_handlers: dict[int, object] = {}

    def write(self, data: str) -> None:
        """Write and flush in one go so each frame reaches the tty at once."""
        try:
            self.stream.write(data)
            self.stream.flush()
        except OSError as e:
            raise TerminalError(f"Cannot write to terminal: {e}") from e

    def size(self) -> tuple[int, int]:
        """Return (columns, rows), falling back to 80x24."""
        try:
            size = os.get_terminal_size(self.stream.fileno())
        except (AttributeError, OSError, ValueError):
            return DEFAULT_COLUMNS, DEFAULT_ROWS
        return size.columns or DEFAULT_COLUMNS, size.lines or DEFAULT_ROWS

    def install_signal_handlers(self, engine) -> bool:
        """Route interrupt, terminate and resize signals to the engine.

        Handlers only record the request; the frame loop acts on it between
        passes. Returns False when the platform has no SIGWINCH, in which
        case the caller has to poll for size changes itself.
        """
        self._install(signal.SIGINT, lambda signum, frame: engine.request_stop())
        self._install(signal.SIGTERM, lambda signum, frame: engine.request_stop())

        # Windows doesn't have SIGWINCH
        if not hasattr(signal, "SIGWINCH"):
            logger.debug("SIGWINCH unavailable, terminal size will be polled")
            return False
        self._install(signal.SIGWINCH, lambda signum, frame: engine.request_resize())
        return True

    def restore_signal_handlers(self) -> None:
        for signum, handler in self._previous_handlers.items():
            # None means the handler was not installed from Python
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)
        self._previous_handlers.clear()

    def _install(self, signum: int, handler) -> None:
        previous = signal.signal(signum, handler)
        self._previous_handlers.setdefault(signum, previous)

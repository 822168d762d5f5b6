"""Rain engine: owns the column grid and renders minimal frame diffs."""

import logging
from enum import Enum
from typing import Optional

from . import ansi
from .config import DEFAULT_TRAIL_LENGTH
from .drop import Drop
from .gradient import gradient_escapes
from .prng import RandomSource, create_random
from .terminal import Terminal, TerminalError

logger = logging.getLogger(__name__)

# Chance per pass that a visible head is drawn in white
SPARKLE_RATE = 0.1


class EngineState(Enum):
    """Lifecycle of the engine."""
    IDLE = "idle"            # Built, nothing written yet
    RUNNING = "running"      # Cursor hidden, frames being drawn
    STOPPING = "stopping"    # Stop requested, cleanup pending
    STOPPED = "stopped"      # Terminal restored


class RainEngine:
    """Falling glyph columns drawn straight to an ANSI terminal.

    Columns are always processed in ascending order so a seeded random
    stream is consumed in the same sequence on every run. Signal handlers
    never touch the grid directly: they go through request_stop() and
    request_resize(), and the frame loop applies those between passes.
    """

    def __init__(
        self,
        terminal: Terminal,
        trail_length: int = DEFAULT_TRAIL_LENGTH,
        rng: Optional[RandomSource] = None,
    ):
        self.terminal = terminal
        self.trail_length = trail_length
        self.rng = rng if rng is not None else create_random()
        self.colors = gradient_escapes(trail_length)
        self.state = EngineState.IDLE
        self._resize_pending = False

        self.width, self.height = terminal.size()
        self.drops: list[Drop] = [self._spawn(random_start=True) for _ in range(self.width)]

    @property
    def running(self) -> bool:
        return self.state is EngineState.RUNNING

    def _spawn(self, random_start: bool) -> Drop:
        return Drop.spawn(self.rng, self.trail_length, self.height, random_start)

    def start(self) -> None:
        """Hide the cursor and clear the screen before the first frame."""
        if self.state is not EngineState.IDLE:
            return
        self.state = EngineState.RUNNING
        self.terminal.write(ansi.HIDE_CURSOR + ansi.CLEAR_SCREEN)
        logger.debug(f"Rain started at {self.width}x{self.height}, trail {self.trail_length}")

    def render(self, now: float) -> None:
        """Advance due drops and draw every visible trail cell in one write."""
        buffer = []
        height = self.height

        for x in range(self.width):
            drop = self.drops[x]
            col = x + 1

            if drop.is_due(now):
                erase_row = drop.tail
                if 1 <= erase_row <= height:
                    buffer.append(f"{ansi.move_to(erase_row, col)} ")
                drop.advance(now, self.rng)

            # Checked every pass, so a height shrink also recycles
            if drop.is_exhausted(height):
                drop = self.drops[x] = self._spawn(random_start=False)

            for i in range(self.trail_length):
                row = drop.position - i
                if row < 1 or row > height:
                    continue
                if i == 0 and self.rng.random() < SPARKLE_RATE:
                    color = ansi.WHITE
                else:
                    color = self.colors[i]
                buffer.append(f"{ansi.move_to(row, col)}{color}{drop.glyph(i)}")

        self.terminal.write("".join(buffer))

    def resize(self, width: int, height: int) -> None:
        """Fit the grid to new terminal dimensions.

        Existing columns keep their drops untouched; only columns beyond the
        old width get fresh drops. Height changes need no renormalization
        since render() culls rows outside the screen.
        """
        if width != self.width:
            kept = self.drops[:width]
            self.drops = kept + [
                self._spawn(random_start=True) for _ in range(len(kept), width)
            ]
        self.width = width
        self.height = height
        self.terminal.write(ansi.CLEAR_SCREEN)
        logger.debug(f"Resized to {width}x{height}")

    def request_resize(self) -> None:
        self._resize_pending = True

    def request_stop(self) -> None:
        """Ask the frame loop to stop after the current pass."""
        if self.state in (EngineState.IDLE, EngineState.RUNNING):
            logger.info("Stop requested")
            self.state = EngineState.STOPPING

    def process_events(self) -> None:
        """Apply a pending resize. Called between frame passes only."""
        if self._resize_pending and self.running:
            self._resize_pending = False
            self.resize(*self.terminal.size())

    def shutdown(self) -> None:
        """Restore the terminal exactly once."""
        if self.state is EngineState.STOPPED:
            return
        self.state = EngineState.STOPPED
        try:
            self.terminal.write(
                ansi.RESET + ansi.SHOW_CURSOR + ansi.CLEAR_SCREEN + ansi.move_to(1, 1)
            )
        except TerminalError as e:
            logger.error(f"Could not restore terminal state: {e}")
            return
        logger.debug("Terminal restored")

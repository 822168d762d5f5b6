"""Frame pacing loop."""

import logging
import time
from typing import Callable

from .config import DEFAULT_FPS
from .engine import RainEngine
from .terminal import TerminalError

logger = logging.getLogger(__name__)

# Milliseconds to yield between checks of the frame budget
IDLE_INTERVAL = 5.0


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000.0)


class FrameScheduler:
    """Cooperative loop capping the render rate at a target fps.

    Frames are never drawn early but may be skipped under load. Drop fall
    speed is scheduled per drop by the engine, so changing fps only changes
    how often the screen is refreshed.
    """

    def __init__(
        self,
        engine: RainEngine,
        fps: int = DEFAULT_FPS,
        clock: Callable[[], float] = monotonic_ms,
        sleep: Callable[[float], None] = sleep_ms,
        idle_interval: float = IDLE_INTERVAL,
        poll_resize: bool = False,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.engine = engine
        self.fps = fps
        self.frame_interval = 1000.0 / fps
        self.clock = clock
        self.sleep = sleep
        self.idle_interval = idle_interval
        self.poll_resize = poll_resize
        self.last_frame = 0.0
        self.frames = 0

    def tick(self, now: float) -> bool:
        """Render if a frame is due. Returns whether one was drawn."""
        if now - self.last_frame < self.frame_interval:
            return False
        self.engine.render(now)
        self.last_frame = now
        self.frames += 1
        return True

    def _check_size(self) -> None:
        size = self.engine.terminal.size()
        if size != (self.engine.width, self.engine.height):
            self.engine.request_resize()

    def run(self) -> None:
        """Drive the engine until a stop is requested, then restore the terminal."""
        engine = self.engine
        engine.start()
        try:
            while engine.running:
                if self.poll_resize:
                    self._check_size()
                engine.process_events()
                self.tick(self.clock())
                self.sleep(self.idle_interval)
        except TerminalError as e:
            logger.error(f"Stopping after terminal write failure: {e}")
            raise
        finally:
            engine.shutdown()
            logger.info(f"Rendered {self.frames} frames")

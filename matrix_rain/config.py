"""Resolved settings for a rain run."""

import logging
from dataclasses import dataclass, replace
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_FPS = 30
DEFAULT_TRAIL_LENGTH = 20

# A trail needs a head and at least one faded cell
MIN_TRAIL_LENGTH = 2


@dataclass(frozen=True)
class RainConfig:
    """Seed, frame rate and trail length for the animation."""

    seed: Optional[int] = None
    fps: int = DEFAULT_FPS
    trail_length: int = DEFAULT_TRAIL_LENGTH

    def normalized(self) -> "RainConfig":
        """Return a copy with out-of-range values replaced by usable ones."""
        fps = self.fps
        if fps <= 0:
            logger.warning(f"Ignoring fps {fps}, using {DEFAULT_FPS}")
            fps = DEFAULT_FPS

        trail_length = self.trail_length
        if trail_length < MIN_TRAIL_LENGTH:
            logger.warning(f"Trail length {trail_length} too short, using {MIN_TRAIL_LENGTH}")
            trail_length = MIN_TRAIL_LENGTH

        return replace(self, fps=fps, trail_length=trail_length)
